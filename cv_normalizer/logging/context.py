"""Context propagation for structured logging.

Fields pushed here (normalization_id, category, ...) are injected into every
log record emitted inside the scope by ContextualFilter. Context lives in a
ContextVar, so concurrent normalizations in threads or tasks never see each
other's fields.
"""

from contextlib import contextmanager
from contextvars import ContextVar, Token
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping
from uuid import uuid4

_EMPTY: Mapping[str, Any] = MappingProxyType({})

LogContextVar: ContextVar[Mapping[str, Any]] = ContextVar(
    "cv_normalizer_log_context", default=_EMPTY
)


def get_log_context() -> Dict[str, Any]:
    """Return a copy of the active logging context."""
    return dict(LogContextVar.get())


def push_log_context(**fields: Any) -> Token:
    """Merge fields into the logging context.

    Returns:
        Token for pop_log_context()
    """
    merged = {**LogContextVar.get(), **fields}
    return LogContextVar.set(MappingProxyType(merged))


def pop_log_context(token: Token) -> None:
    """Restore the context that was active before push_log_context()."""
    LogContextVar.reset(token)


def clear_log_context() -> None:
    """Drop all context fields. Intended for tests."""
    LogContextVar.set(_EMPTY)


@contextmanager
def log_context(**fields: Any) -> Iterator[Dict[str, Any]]:
    """Scope logging context fields to a with-block.

    Example:
        >>> with log_context(normalization_id="a1b2", category="skills"):
        ...     logger.info("Normalized section")  # carries both fields
    """
    token = push_log_context(**fields)
    try:
        yield get_log_context()
    finally:
        pop_log_context(token)


def new_normalization_id() -> str:
    """Short random id correlating the log records of one normalize() call."""
    return uuid4().hex[:12]
