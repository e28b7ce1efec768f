"""
Reducer map sanitization.

Keeps only callable entries. A None entry usually means a reducer was
imported under the wrong name, so it is reported; other non-callables are
dropped without a word.
"""

from typing import Any, Callable, Dict, Mapping, Optional

Reducer = Callable[[Any, Any], Any]


def sanitize_reducers(
    reducers: Mapping[str, Any],
    report: Optional[Callable[[str], None]] = None,
) -> Dict[str, Reducer]:
    """
    Filter a reducer mapping down to its callable entries.

    Args:
        reducers: Mapping of slice key -> reducer (possibly with junk values)
        report: Diagnostic sink; None disables diagnostics

    Returns:
        New dict of callables, in the input's iteration order
    """
    final: Dict[str, Reducer] = {}
    for key, reducer in reducers.items():
        if reducer is None:
            if report is not None:
                report(f'No reducer provided for key "{key}"')
            continue
        if callable(reducer):
            final[key] = reducer
    return final
