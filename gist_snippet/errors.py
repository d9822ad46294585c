"""
Error kinds raised by the gist snippet pipeline.

Everything except ConfigMissingError is turned into an empty string or a
debug fragment at the orchestrator boundary.
"""
from typing import Optional


class GistError(Exception):
    """Base class for all gist snippet failures."""


class ConfigMissingError(GistError):
    """No options object was supplied at all."""


class CredentialValidationError(GistError):
    """Auth token or user agent missing or empty."""


class TransportError(GistError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class RemoteFetchError(GistError):
    """Uniform wrapper for anything that went wrong talking to the API."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(f"github api error: {message}")
        self.status_code = status_code


class ExtractionError(GistError):
    """The gist response could not be read as a files collection."""


class MissingFilesError(ExtractionError):
    pass


class GistFileNotFoundError(ExtractionError):
    def __init__(self, file_name: str):
        super().__init__(f"{file_name} not found in this gist")
        self.file_name = file_name


class FormattingError(GistError):
    pass
