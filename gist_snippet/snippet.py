"""
Gist snippet pipeline: validate -> cache lookup -> fetch -> extract -> format -> cache store.

A missing options object is raised to the caller. Any other failure is
logged and rendered as an empty string, or as a visible error paragraph
when debug is on.
"""
from typing import Any, Dict, Optional

import structlog

from .cache import MemoStore
from .errors import (ExtractionError, FormattingError, GistError,
                     RemoteFetchError, TransportError)
from .extractor import extract_content
from .formatter import build_markdown
from .options import RequestOptions, coerce_options, verify_options
from .transport import DEFAULT_HOST, GistTransport, build_request, create_transport

logger = structlog.get_logger(__name__)


def error_fragment(message: str) -> str:
    return f'<p class="gist-error">{message}</p>'


class GistSnippet:
    """Renders gist files as Markdown code blocks, memoizing into an injected store.

    A transport passed in belongs to the caller. Without one, the snippet
    creates its own on first fetch and closes it in aclose().
    """

    def __init__(self, transport=None, store: MemoStore = None, host: str = DEFAULT_HOST):
        self.transport = transport
        self.store = store if store is not None else MemoStore()
        self.host = host
        self._owns_transport = transport is None

    async def produce(self, gist_id: str, file_name: str, options) -> str:
        """Return the Markdown for one gist file.

        Raises:
            ConfigMissingError: options is None or not an options object
        """
        opts = coerce_options(options)
        try:
            return await self._run(gist_id, file_name, verify_options(opts))
        except GistError as e:
            error_message = f"gist error: {e}"
            logger.warning("gist_error",
                           gist_id=gist_id,
                           file_name=file_name,
                           error_type=type(e).__name__,
                           error=str(e))
            if opts.debug:
                return error_fragment(error_message)
            return ''

    async def _run(self, gist_id: str, file_name: str, opts: RequestOptions) -> str:
        if opts.use_cache:
            cached = self.store.get(gist_id, file_name)
            if cached is not None:
                logger.debug("gist_cache_hit", gist_id=gist_id, file_name=file_name)
                return cached

        gist_response = await self._request_gist(gist_id, opts)

        try:
            content = extract_content(gist_response, file_name)
        except GistError:
            raise
        except Exception as e:
            raise ExtractionError(f"unreadable gist response: {e}") from e

        try:
            md_string = build_markdown(file_name, content, opts.add_hidden_field)
        except GistError:
            raise
        except Exception as e:
            raise FormattingError(str(e)) from e

        if opts.use_cache:
            return self.store.put(gist_id, file_name, md_string)
        return md_string

    async def _request_gist(self, gist_id: str, opts: RequestOptions) -> Dict[str, Any]:
        if self.transport is None:
            self.transport = create_transport()

        request = build_request(gist_id, opts.auth_token, opts.user_agent, host=self.host)
        logger.info("gist_fetch_started", gist_id=gist_id, path=request.path)
        try:
            return await self.transport.send(request)
        except TransportError as e:
            raise RemoteFetchError(str(e), status_code=e.status_code) from e
        except Exception as e:
            raise RemoteFetchError(str(e)) from e

    async def aclose(self):
        if self._owns_transport and self.transport is not None:
            await self.transport.aclose()
            self.transport = None

    async def __aenter__(self) -> "GistSnippet":
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()


default_store = MemoStore()
_default_transport: Optional[GistTransport] = None
_default_snippet: Optional[GistSnippet] = None


def default_transport() -> GistTransport:
    """Process-wide transport shared by every pipeline that was not given one."""
    global _default_transport
    if _default_transport is None:
        _default_transport = create_transport()
    return _default_transport


def default_snippet() -> GistSnippet:
    global _default_snippet
    if _default_snippet is None:
        _default_snippet = GistSnippet(transport=default_transport(), store=default_store)
    return _default_snippet


async def close_default_transport():
    global _default_transport, _default_snippet
    if _default_transport is not None:
        await _default_transport.aclose()
    _default_transport = None
    _default_snippet = None


async def produce_snippet(gist_id: str, file_name: str, options, *,
                          transport=None, store: MemoStore = None) -> str:
    """Function-style entry point for hosts that bind a plain callable.

    Missing collaborators fall back to ``default_transport()`` and
    ``default_store``; no call opens a client of its own.
    """
    if transport is None and store is None:
        return await default_snippet().produce(gist_id, file_name, options)

    snippet = GistSnippet(
        transport=transport if transport is not None else default_transport(),
        store=store if store is not None else default_store,
    )
    return await snippet.produce(gist_id, file_name, options)
