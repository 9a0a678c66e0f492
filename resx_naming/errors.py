"""Exceptions raised while deriving resource file metadata."""


class ResourceNamingError(Exception):
    """Base class for all resource naming errors."""


class InvalidResourceFileError(ResourceNamingError, ValueError):
    """Raised when a path does not follow the naming pattern of its convention."""

    def __init__(self, file_path: str, message: str):
        self.file_path = file_path
        super().__init__(f"{message}: {file_path}")


class UnsupportedFileFormatError(ResourceNamingError, ValueError):
    """Raised for extensions outside the supported resource conventions."""

    def __init__(self, extension: str):
        self.extension = extension
        super().__init__(f"Unsupported file format: {extension}")


class DirectoryNotFoundError(ResourceNamingError):
    """Raised when no directory can be determined for a path."""

    def __init__(self, file_path: str):
        self.file_path = file_path
        super().__init__(f"Cannot determine directory for: {file_path}")
