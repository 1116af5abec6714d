"""Text rendering of tool results and the shared error wrapper."""

from __future__ import annotations

import functools
import logging
from typing import Any, Awaitable, Callable, Mapping

logger = logging.getLogger(__name__)


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    return str(value)


def _entries(value: Any):
    if isinstance(value, Mapping):
        return value.items()
    return enumerate(value)


def format_response(data: Any, title: str) -> str:
    """
    Render ``data`` as a titled markdown-ish text block.

    Mapping values and lists nested one level down are expanded into an
    indented sub-list; anything deeper falls back to ``str()``.
    """
    result = f"**{title}**\n\n"

    if isinstance(data, (Mapping, list, tuple)):
        for key, value in _entries(data):
            if isinstance(value, (Mapping, list, tuple)):
                result += f"**{key}:**\n"
                for sub_key, sub_value in _entries(value):
                    result += f"  - {sub_key}: {_stringify(sub_value)}\n"
                result += "\n"
            else:
                result += f"**{key}:** {_stringify(value)}\n"
    else:
        result += f"{_stringify(data)}\n"

    return result


def error_text(exc: BaseException) -> str:
    return f"Error: {str(exc) or exc.__class__.__name__}"


def rpc_tool(func: Callable[..., Awaitable[str]]) -> Callable[..., Awaitable[str]]:
    """Run a tool coroutine and turn any raised exception into ``Error: <message>`` text."""

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> str:
        try:
            return await func(*args, **kwargs)
        except Exception as exc:
            logger.debug("%s failed: %s", func.__name__, exc)
            return error_text(exc)

    return wrapper
