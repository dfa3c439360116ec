"""Background loading: build a document off the calling thread.

``parse_bytes`` and ``parse_path`` run the complete synchronous build
(tree → styles → projection) on a worker thread and hand the finished
document to ``callback``. The continuation is scheduled back onto the
caller's context:

- an explicit ``dispatch`` callable, called as ``dispatch(fn, arg)``
  (``loop.call_soon_threadsafe`` has this signature);
- otherwise the caller's running asyncio loop, if there is one;
- otherwise the worker thread itself.

Failures (malformed bytes, dangling StyleMap references, and any
unexpected error wrapped in ``KmlBuildError``) go to ``errback``
through the same dispatch. With an ``errback`` every build ends in
exactly one continuation. An unreadable file is not a failure; it is
delivered as a document with ``is_error`` set. The call
returns the ``Future`` of the build for callers that prefer to wait.
Builds cannot be cancelled once started; a caller that no longer wants
a result simply ignores it.

``load_document`` is the coroutine form for asyncio callers.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from functools import partial
from os import PathLike
from typing import TYPE_CHECKING, TypeVar

from kml_document.core.config import DocumentConfig
from kml_document.core.exceptions import KmlDocumentError, PermanentError
from kml_document.document import KmlDocument

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from kml_document.core.registry import Factory

    Dispatch = Callable[..., object]

logger = logging.getLogger("kml_document.dispatch")

T = TypeVar("T")

_executor: ThreadPoolExecutor | None = None
_executor_workers = 0
_executor_lock = threading.Lock()


class KmlBuildError(PermanentError):
    """Raised when a background build fails with an unexpected error.

    Wraps the original exception (available as ``__cause__``), e.g. one
    raised by a custom registry factory, so that it reaches ``errback``.
    """

    default_stage = "build"
    default_code = "KML_BUILD_FAILED"


def _get_executor(max_workers: int) -> ThreadPoolExecutor:
    """Return the shared worker pool, creating it on first use.

    A request for a different pool size replaces the pool; builds
    already running on the old one finish there.
    """
    global _executor, _executor_workers
    with _executor_lock:
        if _executor is not None and _executor_workers != max_workers:
            logger.debug(
                "Resizing KML build pool | old=%d | new=%d", _executor_workers, max_workers
            )
            _executor.shutdown(wait=False)
            _executor = None
        if _executor is None:
            _executor = ThreadPoolExecutor(
                max_workers=max_workers, thread_name_prefix="kml-document"
            )
            _executor_workers = max_workers
            logger.debug("Started KML build pool | max_workers=%d", max_workers)
        return _executor


def shutdown_executor(*, wait: bool = True) -> None:
    """Shut the shared worker pool down; the next build starts a new one."""
    global _executor, _executor_workers
    with _executor_lock:
        executor, _executor = _executor, None
        _executor_workers = 0
    if executor is not None:
        executor.shutdown(wait=wait)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def parse_bytes(
    content: bytes,
    callback: Callable[[KmlDocument], object],
    *,
    errback: Callable[[KmlDocumentError], object] | None = None,
    generate_overlays: bool | None = None,
    registry: Mapping[str, Factory] | None = None,
    config: DocumentConfig | None = None,
    dispatch: Dispatch | None = None,
) -> Future[KmlDocument]:
    """Build a document from KML bytes in the background.

    Args:
        content: Raw KML bytes.
        callback: Receives the completed document.
        errback: Receives a ``KmlParseError``, ``StyleResolutionError`` or
            ``KmlBuildError``.
            Without one, failures are only logged (and kept on the future).
        generate_overlays: Overrides ``config.generate_overlays``.
        registry: Tag → factory mapping.
        config: Builder configuration.
        dispatch: Schedules the continuation on the caller's context.
    """
    if config is None:
        config = DocumentConfig()
    build = partial(
        KmlDocument.from_bytes,
        content,
        generate_overlays=generate_overlays,
        registry=registry,
        config=config,
    )
    return _submit(build, callback, errback, _caller_dispatch(dispatch), config)


def parse_path(
    path: str | PathLike[str],
    callback: Callable[[KmlDocument], object],
    *,
    errback: Callable[[KmlDocumentError], object] | None = None,
    generate_overlays: bool | None = None,
    registry: Mapping[str, Factory] | None = None,
    config: DocumentConfig | None = None,
    dispatch: Dispatch | None = None,
) -> Future[KmlDocument]:
    """Build a document from a KML file in the background.

    See :func:`parse_bytes`. A file that cannot be read is delivered to
    ``callback`` as a document with ``is_error`` set.
    """
    if config is None:
        config = DocumentConfig()
    build = partial(
        KmlDocument.from_path,
        path,
        generate_overlays=generate_overlays,
        registry=registry,
        config=config,
    )
    return _submit(build, callback, errback, _caller_dispatch(dispatch), config)


async def load_document(
    source: bytes | str | PathLike[str],
    *,
    generate_overlays: bool | None = None,
    registry: Mapping[str, Factory] | None = None,
    config: DocumentConfig | None = None,
) -> KmlDocument:
    """Build a document on the worker pool and await it.

    ``bytes`` are parsed directly; anything else is treated as a path.

    Raises:
        KmlParseError: If the content is not valid XML.
        StyleResolutionError: If a StyleMap references an unknown style.
    """
    if config is None:
        config = DocumentConfig()
    loader = KmlDocument.from_bytes if isinstance(source, bytes) else KmlDocument.from_path
    build = partial(
        loader,
        source,  # type: ignore[arg-type]
        generate_overlays=generate_overlays,
        registry=registry,
        config=config,
    )
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(_get_executor(config.max_workers), build)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _caller_dispatch(dispatch: Dispatch | None) -> Dispatch | None:
    """Pick the context continuations run on; resolved on the calling thread."""
    if dispatch is not None:
        return dispatch
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        return None
    return loop.call_soon_threadsafe


def _deliver(dispatch: Dispatch | None, fn: Callable[[T], object], value: T) -> None:
    if dispatch is None:
        fn(value)
    else:
        dispatch(fn, value)


def _submit(
    build: Callable[[], KmlDocument],
    callback: Callable[[KmlDocument], object],
    errback: Callable[[KmlDocumentError], object] | None,
    dispatch: Dispatch | None,
    config: DocumentConfig,
) -> Future[KmlDocument]:
    def _run() -> KmlDocument:
        try:
            document = build()
        except KmlDocumentError as exc:
            logger.warning("Background KML build failed | code=%s | error=%s", exc.code, exc.message)
            if errback is not None:
                _deliver(dispatch, errback, exc)
            raise
        except Exception as exc:
            logger.exception("Unexpected error in background KML build")
            error = KmlBuildError(f"Unexpected error in background KML build: {exc!r}")
            error.__cause__ = exc
            if errback is not None:
                _deliver(dispatch, errback, error)
            raise error from exc
        try:
            _deliver(dispatch, callback, document)
        except Exception:
            logger.exception("KML build callback failed | name=%s", document.name)
            raise
        return document

    return _get_executor(config.max_workers).submit(_run)
