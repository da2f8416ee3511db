from __future__ import annotations

import inspect
import logging
import reprlib
from functools import wraps
from typing import Any, Callable, Iterable, MutableMapping, Optional, Sequence, Set, TypeVar, cast

import numpy as np

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxother = 120
_repr.maxlist = 8
_repr.maxtuple = 8
_repr.maxset = 8
_repr.maxdict = 8


def _summarize(value: Any, *, max_items: int = 6, max_length: int = 300) -> str:
    """Bounded representation used for DEBUG call traces."""

    if isinstance(value, np.ndarray):
        if value.size <= max_items:
            return f"ndarray{tuple(value.shape)}={_repr.repr(value.tolist())}"
        return f"ndarray{tuple(value.shape)}[min={value.min():.6g}, max={value.max():.6g}]"

    if isinstance(value, (list, tuple, set, frozenset)):
        items = [_summarize(item) for item in list(value)[:max_items]]
        if len(value) > max_items:
            items.append(f"... +{len(value) - max_items}")
        open_br, close_br = ("(", ")") if isinstance(value, tuple) else ("[", "]")
        return open_br + ", ".join(items) + close_br

    if isinstance(value, dict):
        items = [f"{_summarize(k)}: {_summarize(v)}" for k, v in list(value.items())[:max_items]]
        if len(value) > max_items:
            items.append(f"... +{len(value) - max_items}")
        return "{" + ", ".join(items) + "}"

    try:
        rendered = _repr.repr(value)
    except Exception as exc:  # pragma: no cover - broken __repr__ on host objects
        rendered = f"<unrepresentable {type(value).__name__}: {exc!r}>"
    if len(rendered) > max_length:
        rendered = rendered[:max_length] + "..."
    return rendered


def _describe_call(args: Sequence[Any], kwargs: MutableMapping[str, Any]) -> str:
    parts = [_summarize(arg) for arg in args]
    parts.extend(f"{key}={_summarize(value)}" for key, value in kwargs.items())
    return ", ".join(parts) if parts else "no-args"


def debug_log_call(
    logger: logging.Logger, *, name: Optional[str] = None, log_result: bool = True
) -> Callable[[F], F]:
    """Decorate a callable so entry, exit and failures are logged at DEBUG."""

    def decorator(func: F) -> F:
        if getattr(func, "_debug_logging_wrapped", False):
            return func
        label = name or func.__qualname__

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            if not logger.isEnabledFor(logging.DEBUG):
                return func(*args, **kwargs)
            logger.debug("-> %s(%s)", label, _describe_call(args, kwargs))
            try:
                result = func(*args, **kwargs)
            except Exception as exc:
                logger.debug("!! %s raised %s: %s", label, type(exc).__name__, exc)
                raise
            if log_result:
                logger.debug("<- %s = %s", label, _summarize(result))
            else:
                logger.debug("<- %s", label)
            return result

        setattr(wrapper, "_debug_logging_wrapped", True)
        return cast(F, wrapper)

    return decorator


def apply_debug_logging(
    namespace: MutableMapping[str, Any],
    *,
    logger: Optional[logging.Logger] = None,
    skip: Optional[Iterable[str]] = None,
) -> None:
    """Wrap the public module-level functions of ``namespace`` with :func:`debug_log_call`.

    Generators are left alone since wrapping them would only trace creation.
    """

    module_name = namespace.get("__name__")
    logger = logger or logging.getLogger(str(module_name))
    skipped: Set[str] = set(skip or ())

    for attr, value in list(namespace.items()):
        if attr in skipped or attr.startswith("_"):
            continue
        if not inspect.isfunction(value) or value.__module__ != module_name:
            continue
        if inspect.isgeneratorfunction(value):
            continue
        namespace[attr] = debug_log_call(logger, name=attr)(value)


__all__ = ["apply_debug_logging", "debug_log_call"]
