import structlog
from typing import Any, Mapping

from .errors import GistFileNotFoundError, MissingFilesError

logger = structlog.get_logger(__name__)


def extract_content(gist_response: Mapping[str, Any], file_name: str) -> str:
    """Pull the raw text of one file out of a parsed gist API response.

    Args:
        gist_response: Parsed JSON body of GET /gists/{id}
        file_name: Key into the response's ``files`` collection

    Returns:
        str: File content, ``""`` when the file exists but is empty
    """
    files = gist_response.get('files') if isinstance(gist_response, Mapping) else None
    if not isinstance(files, Mapping):
        logger.warning("gist_response_without_files",
                       file_name=file_name,
                       files_type=type(files).__name__)
        raise MissingFilesError("No files contained in gist response")

    if file_name not in files:
        logger.warning("gist_file_not_found",
                       file_name=file_name,
                       available=sorted(str(name) for name in files))
        raise GistFileNotFoundError(file_name)

    entry = files[file_name]
    content = entry.get('content') if isinstance(entry, Mapping) else ''
    return content or ''
