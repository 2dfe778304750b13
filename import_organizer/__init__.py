"""
Import Organizer - moves JS/TS project files to the folders their imports imply.

Alias-rooted imports (``@/components/Button``) and relative imports
(``./util``) are resolved to files on disk, each match is moved to the
directory the import names, and the moved file is processed in turn so the
reorganization follows the import graph. Import statements are left as they
are.
"""

__version__ = "0.1.0"
__license__ = "MIT"

# Public API
from import_organizer.exceptions import OrganizerError, ProjectNotFoundError, RelocationError
from import_organizer.models.domain_models import ImportKind, OrganizeReport, ProjectConfiguration
from import_organizer.organizer import ProjectOrganizer, organize_project

__all__ = [
    "ImportKind",
    "OrganizeReport",
    "OrganizerError",
    "ProjectConfiguration",
    "ProjectNotFoundError",
    "ProjectOrganizer",
    "RelocationError",
    "organize_project",
]
