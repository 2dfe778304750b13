from pathlib import Path


class OrganizerError(Exception):
    """Base error for a failed organizer run."""


class ProjectNotFoundError(OrganizerError):

    def __init__(self, root: Path):
        self.root = root
        super().__init__(f"Project directory does not exist or is not a directory: {root}")


class RelocationError(OrganizerError):
    """A move or directory creation failed; the run cannot safely continue."""

    def __init__(self, source: Path, destination: Path, cause: OSError):
        self.source = source
        self.destination = destination
        self.cause = cause
        super().__init__(f"Failed to move {source} to {destination}: {cause}")
