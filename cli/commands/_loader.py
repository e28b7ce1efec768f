"""
Resolve MODULE:ATTR targets into reducers.
"""

import importlib
from collections.abc import Mapping
from typing import Any, Callable

from combinekit.config import ComposerOptions
from combinekit.core import combine_reducers


class TargetError(Exception):
    """Raised when a MODULE:ATTR target cannot be loaded."""
    pass


def load_reducer(target: str) -> Callable[[Any, Any], Any]:
    """
    Import a reducer map or reducer from "package.module:attr".

    A mapping is composed with combine_reducers() using options from the
    environment. A callable is returned as is.

    Raises:
        TargetError: If the target is malformed, missing, or not usable
    """
    module_name, sep, attr = target.partition(":")
    if not sep or not module_name or not attr:
        raise TargetError(f"Expected MODULE:ATTR, got {target!r}")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise TargetError(f"Cannot import module {module_name!r}: {e}") from e

    try:
        obj = getattr(module, attr)
    except AttributeError as e:
        raise TargetError(f"Module {module_name!r} has no attribute {attr!r}") from e

    if isinstance(obj, Mapping):
        return combine_reducers(obj, options=ComposerOptions.from_env())
    if callable(obj):
        return obj
    raise TargetError(f"{target} is neither a reducer mapping nor a reducer ({type(obj).__name__})")
