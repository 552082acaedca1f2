"""Structured logging helpers for the CV normalizer."""

import logging
from typing import Optional, Union


class ComponentLoggerAdapter(logging.LoggerAdapter):
    """LoggerAdapter that merges its default fields with per-call ``extra``.

    Fields passed in the call win over the adapter defaults.
    """

    def process(self, msg, kwargs):
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return msg, kwargs


def get_logger(
    name: str, component: Optional[str] = None
) -> Union[logging.Logger, ComponentLoggerAdapter]:
    """Get a logger, optionally tagging every record with ``component``.

    Args:
        name: Logger name (typically __name__)
        component: Component identifier (e.g. "classifier", "aggregator")

    Example:
        >>> logger = get_logger(__name__, component="aggregator")
        >>> logger.debug("Section normalized", extra={"event": "normalization.section.done"})
    """
    logger = logging.getLogger(name)

    if component:
        return ComponentLoggerAdapter(logger, {"component": component})

    return logger
