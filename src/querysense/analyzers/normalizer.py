import re

from querysense.exceptions import InvalidInput

_WHITESPACE = re.compile(r"\s+")


def normalize(query: str) -> str:
    """Canonical form used only for pattern detection.

    Lower-cases everything, string literals included, and collapses whitespace runs.
    """
    if not isinstance(query, str):
        raise InvalidInput(f"Query must be a string, got {type(query).__name__}")
    return _WHITESPACE.sub(" ", query.lower()).strip()
