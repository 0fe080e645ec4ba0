# html_class_list/normalize.py
# ──────────────────────────────────────────────────────────────
# Input normalization shared by construction and all mutators
# ──────────────────────────────────────────────────────────────
"""
normalize.

Does: Turn any accepted `names` input (None, whitespace-delimited string,
      iterable of strings, or another TokenList) into a flat list of
      trimmed, non-empty tokens in encounter order.
Returns: normalize_input(), normalize_name(), TokenListInputError.
Used by: TokenList construction, add/remove/reset, and the single-name
         operations (contains/toggle/replace).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from html_class_list.types import Names, TokenSource
from html_class_list.utils.log import debug

__all__ = [
    "TokenListInputError",
    "normalize_input",
    "normalize_name",
]

log = logging.getLogger(__name__)


class TokenListInputError(TypeError):
    """Raise when `names` is not None, a str, an iterable of str, or a TokenList."""


# ──────────────────────────────────────────────────────────────
# 1) SINGLE NAME
# ──────────────────────────────────────────────────────────────


def normalize_name(name: str) -> str:
    """
    Does: Trim one candidate token.
    Returns: The trimmed string; '' means "no token".
    """
    if not isinstance(name, str):
        raise TokenListInputError(f"expected a str name, got {type(name).__name__}")
    return name.strip()


# ──────────────────────────────────────────────────────────────
# 2) MANY NAMES
# ──────────────────────────────────────────────────────────────


def _trim_items(items: Iterable[object]) -> list[str]:
    # Validate everything before returning so callers never mutate on bad input
    out: list[str] = []
    dropped = 0
    for pos, item in enumerate(items):
        if not isinstance(item, str):
            raise TokenListInputError(
                f"item {pos} must be a str, got {type(item).__name__}"
            )
        token = item.strip()
        if token:
            out.append(token)
        else:
            dropped += 1
    if dropped:
        log.debug("Discarded %d empty item(s)", dropped)
    return out


def normalize_input(names: Names) -> list[str]:
    """
    Does: Normalize `names`:
          - None              → []
          - TokenList         → its current values (copied)
          - str               → split on whitespace runs
          - iterable of str   → each item trimmed, empties dropped
    Returns: list[str] in encounter order; duplicates are left for the caller.
    Raises: TokenListInputError for any other shape, or a non-str item.
    """
    if names is None:
        return []

    if isinstance(names, str):
        return names.split()

    if isinstance(names, (bytes, bytearray, Mapping)):
        raise TokenListInputError(
            f"unsupported names type: {type(names).__name__}"
        )

    if isinstance(names, TokenSource):
        # runtime_checkable only proves the attribute exists
        if not callable(names.values):
            raise TokenListInputError(
                f"{type(names).__name__}.values is not callable"
            )
        tokens = _trim_items(names.values())
    elif isinstance(names, Iterable):
        tokens = _trim_items(names)
    else:
        log.debug("Rejected names of type %s", type(names).__name__)
        raise TokenListInputError(
            f"names must be None, a str, an iterable of str or a TokenList; "
            f"got {type(names).__name__}"
        )

    debug("normalized %d token(s): %r", len(tokens), tokens, topic="normalize")
    return tokens
