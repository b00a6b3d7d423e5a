"""Domain error types."""


class ModelStoreError(Exception):
    """Base class for every error raised by the model store."""


class UnknownModelError(ModelStoreError):
    """Raised when a model name is not present in the registry."""


class IntegrityError(ModelStoreError):
    """Raised when a freshly downloaded model file does not match its expected hash."""


class DownloadError(ModelStoreError):
    """Raised when a model archive cannot be fetched."""


class ArchiveError(ModelStoreError):
    """Raised when a model archive cannot be unpacked into a parameter file."""
