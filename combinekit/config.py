"""
Composer configuration.

Diagnostics are on by default. Performance-sensitive deployments can turn
them off explicitly, or through COMBINEKIT_DIAGNOSTICS when building options
with ComposerOptions.from_env().

Environment Variables:
    COMBINEKIT_DIAGNOSTICS: 0/false/no/off disables diagnostics - default: on
"""

import os
from dataclasses import dataclass
from typing import Callable, Optional

_FALSY = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class ComposerOptions:
    """
    Options fixed at composer construction.

    Fields:
        diagnostics: Run the map sanitizer report and the shape warner
        report: Diagnostic sink; None routes messages to the
            "combinekit.diagnostics" logger
    """
    diagnostics: bool = True
    report: Optional[Callable[[str], None]] = None

    @staticmethod
    def from_env() -> "ComposerOptions":
        raw = os.getenv("COMBINEKIT_DIAGNOSTICS", "1").strip().lower()
        return ComposerOptions(diagnostics=raw not in _FALSY)
