"""
Loading EJSON documents from disk.

The document path comes from Settings: EJSON_FILE_PATH if set, otherwise
<file_dir>/<file_prefix><file_suffix> (./env.ejson by default).
"""

import logging

from ejson_core.config import Settings, get_settings
from ejson_core.document import process_ejson, process_ejson_async
from ejson_core.keys import ResolverLike, resolver_from_settings

logger = logging.getLogger(__name__)


def document_path(settings: Settings | None = None) -> str:
    """Get the path of the EJSON document to load."""
    return (settings or get_settings()).document_path


def _read(settings: Settings) -> str:
    path = settings.document_path
    logger.debug(f"Loading EJSON document from {path}")
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def load_ejson(
    settings: Settings | None = None,
    resolver: ResolverLike | None = None,
) -> dict:
    """
    Read and decrypt the configured EJSON document.

    Args:
        settings: Paths and keys; defaults to get_settings()
        resolver: Key resolver; defaults to resolver_from_settings(settings)

    Returns:
        Decrypted document

    Raises:
        FileNotFoundError: If the document does not exist
        EJSONError: If decryption fails
    """
    settings = settings or get_settings()
    return process_ejson(_read(settings), resolver or resolver_from_settings(settings))


async def load_ejson_async(
    settings: Settings | None = None,
    resolver: ResolverLike | None = None,
) -> dict:
    """Async version of load_ejson(); the resolver may be a coroutine function."""
    settings = settings or get_settings()
    return await process_ejson_async(
        _read(settings), resolver or resolver_from_settings(settings)
    )
