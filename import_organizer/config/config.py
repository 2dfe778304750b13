import os
from typing import List

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

load_dotenv()


class Configs(BaseSettings):

    # organizer defaults
    ORGANIZER_DEFAULT_DIR: str = os.getenv("ORGANIZER_DEFAULT_DIR", "./app")
    ORGANIZER_SOURCE_FOLDERS: str = os.getenv("ORGANIZER_SOURCE_FOLDERS", "components,lib,hooks,utils,types")
    ORGANIZER_IMPORT_ALIAS: str = os.getenv("ORGANIZER_IMPORT_ALIAS", "@/")

    # logging
    ORGANIZER_LOG_LEVEL: str = os.getenv("ORGANIZER_LOG_LEVEL", "INFO")
    ORGANIZER_LOG_FILE: str = os.getenv("ORGANIZER_LOG_FILE", "")

    @property
    def source_folders(self) -> List[str]:
        """Comma-separated folder list, in declared order."""
        return [folder.strip() for folder in self.ORGANIZER_SOURCE_FOLDERS.split(",") if folder.strip()]

    def validate_organizer_config(self) -> None:
        """Validate that the organizer settings are usable."""
        if not self.ORGANIZER_IMPORT_ALIAS:
            raise ValueError("ORGANIZER_IMPORT_ALIAS must not be empty.")
        if not self.source_folders:
            raise ValueError(
                "ORGANIZER_SOURCE_FOLDERS must list at least one folder, "
                "e.g. 'components,lib,hooks,utils,types'."
            )

    class Config:
        case_sensitive = True


configs = Configs()
