"""DEBUG call tracing for translator entry points."""

from __future__ import annotations

import inspect
import logging
import reprlib
from functools import wraps
from typing import Any, Callable, Iterable, MutableMapping, Optional, TypeVar, cast

F = TypeVar("F", bound=Callable[..., Any])

_WRAPPED_FLAG = "_debug_logging_wrapped"

_repr = reprlib.Repr()
_repr.maxstring = 80
_repr.maxlist = 4


def _short(value: Any) -> str:
    # Translation results are lists of dataclasses; summarize them by size.
    if isinstance(value, list) and len(value) > _repr.maxlist:
        return f"<{len(value)} items>"
    return _repr.repr(value)


def _describe_call(args: tuple, kwargs: dict) -> str:
    rendered = [_short(arg) for arg in args]
    rendered.extend(f"{key}={_short(value)}" for key, value in kwargs.items())
    return ", ".join(rendered)


def debug_log_call(
    logger: logging.Logger, *, name: Optional[str] = None, log_result: bool = True
) -> Callable[[F], F]:
    """Log entry, exit and failures of the decorated function at DEBUG level.

    Nothing is formatted unless ``logger`` is enabled for DEBUG, so the
    decorator is free to leave on hot paths such as statement translation.
    """

    def decorator(func: F) -> F:
        if getattr(func, _WRAPPED_FLAG, False):
            return func
        label = name or func.__qualname__

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            if not logger.isEnabledFor(logging.DEBUG):
                return func(*args, **kwargs)
            logger.debug("%s(%s)", label, _describe_call(args, kwargs))
            try:
                result = func(*args, **kwargs)
            except Exception:
                logger.debug("%s raised", label, exc_info=True)
                raise
            logger.debug("%s -> %s", label, _short(result) if log_result else "done")
            return result

        setattr(wrapper, _WRAPPED_FLAG, True)
        return cast(F, wrapper)

    return decorator


def apply_debug_logging(
    namespace: MutableMapping[str, Any],
    *,
    logger: Optional[logging.Logger] = None,
    skip: Optional[Iterable[str]] = None,
) -> None:
    """Wrap every public function defined in the module ``namespace``."""

    module_name = namespace["__name__"]
    logger = logger or logging.getLogger(module_name)
    skipped = set(skip or ())
    for attr, value in list(namespace.items()):
        if attr.startswith("_") or attr in skipped:
            continue
        if inspect.isfunction(value) and value.__module__ == module_name:
            namespace[attr] = debug_log_call(logger, name=attr)(value)
