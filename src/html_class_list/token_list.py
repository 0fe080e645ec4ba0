# html_class_list/token_list.py

"""
token_list.py.

Does: Ordered, de-duplicated set of class tokens modeled on the browser
      DOMTokenList: add/remove/toggle/replace/reset plus string and
      indexed read access.
Returns: TokenList and its HTML-named subclass ClassList.
Used by: Any code that builds a `class="..."` attribute value.
"""
from __future__ import annotations

import logging
from collections.abc import Iterator

from html_class_list.normalize import TokenListInputError, normalize_input, normalize_name
from html_class_list.types import Names
from html_class_list.utils.log import debug

__all__ = [
    "TokenList",
    "ClassList",
]

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)


class TokenList:
    """
    Insertion-ordered set of trimmed, non-empty string tokens.

    Tokens live as keys of a dict (values unused), which gives O(1)
    membership and first-insertion iteration order. Re-adding a token
    never moves it.

    Example:
        >>> lst = TokenList("foo bar")
        >>> lst.add("baz").remove("foo").value()
        'bar baz'
    """

    def __init__(self, names: Names = None) -> None:
        self._tokens: dict[str, None] = {}
        self.add(names)

    # ─────────────────────────────────────────────────────────────────────────
    # Factory
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def from_values(cls, names: Names = None) -> TokenList:
        """Build a new instance of `cls` from `names`."""
        return cls(names)

    # ─────────────────────────────────────────────────────────────────────────
    # Read access
    # ─────────────────────────────────────────────────────────────────────────

    def value(self) -> str:
        """Return the tokens joined by single spaces ('' when empty)."""
        return " ".join(self._tokens)

    def to_string(self) -> str:
        return self.value()

    def length(self) -> int:
        return len(self._tokens)

    def item(self, index: int) -> str | None:
        """
        Does: Look up the token at `index` in current order.
        Returns: The token, or None for a negative or out-of-range index.
        """
        if not isinstance(index, int) or isinstance(index, bool):
            return None
        if index < 0 or index >= len(self._tokens):
            return None
        return self.values()[index]

    def contains(self, name: str) -> bool:
        return normalize_name(name) in self._tokens

    def values(self) -> list[str]:
        """Return a snapshot list of the tokens in order."""
        return list(self._tokens)

    # ─────────────────────────────────────────────────────────────────────────
    # Mutation
    # ─────────────────────────────────────────────────────────────────────────

    def add(self, names: Names) -> TokenList:
        """Insert each normalized token not already present; keeps existing positions."""
        for token in normalize_input(names):
            self._tokens.setdefault(token, None)
        return self

    def remove(self, names: Names) -> TokenList:
        """Delete each normalized token that is present; absent tokens are ignored."""
        for token in normalize_input(names):
            self._tokens.pop(token, None)
        return self

    def replace(self, old: str, new: str) -> TokenList:
        """
        Does: Rename `old` to `new` at `old`'s position.
              - `old` absent or equal to `new` → no change
              - `new` empty after trimming → `old` is removed
              - `new` already present → one `new` survives, at whichever
                of the two positions comes first
        Returns: self.
        Raises: TokenListInputError if `new` holds inner whitespace.
        """
        old = normalize_name(old)
        new = normalize_name(new)
        if len(new.split()) > 1:
            raise TokenListInputError(f"replacement {new!r} must be a single token")
        if old not in self._tokens or old == new:
            return self

        if new in self._tokens:
            log.debug("replace(%r, %r): %r already present, merging", old, new, new)

        rebuilt: dict[str, None] = {}
        for token in self._tokens:
            renamed = new if token == old else token
            if renamed:
                rebuilt.setdefault(renamed, None)
        self._tokens = rebuilt
        debug("replace %r -> %r: %r", old, new, self.value())
        return self

    def toggle(self, name: str, force: bool | None = None) -> bool:
        """
        Does: Split `name` like add/remove do. With `force` set, add (truthy)
              or remove (falsy) every token and return bool(force).
              Otherwise remove them all when all are present, else add them.
        Returns: False after a removal, True after an addition; False when
                 `name` holds no token and `force` is not given.
        """
        tokens = normalize_input(normalize_name(name))

        if force is not None:
            if force:
                self.add(tokens)
            else:
                self.remove(tokens)
            return bool(force)

        if not tokens:
            return False

        if all(token in self._tokens for token in tokens):
            self.remove(tokens)
            debug("toggle %r off", tokens)
            return False

        self.add(tokens)
        debug("toggle %r on", tokens)
        return True

    def reset(self, names: Names = None) -> TokenList:
        """Replace the whole collection with the normalized `names`."""
        tokens = normalize_input(names)
        self._tokens = dict.fromkeys(tokens)
        return self

    # ─────────────────────────────────────────────────────────────────────────
    # Python protocol
    # ─────────────────────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return self.value()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value()!r})"

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[str]:
        return iter(self.values())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.contains(name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TokenList):
            return NotImplemented
        return self.values() == other.values()

    __hash__ = None  # type: ignore[assignment]


class ClassList(TokenList):
    """TokenList for an HTML `class` attribute."""
