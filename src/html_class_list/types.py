# html_class_list/types.py
from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, Union, runtime_checkable

"""
types.py.

Does: Define the structural Protocol and input alias accepted by the
normalizer and every TokenList mutator.
"""


@runtime_checkable
class TokenSource(Protocol):
    def values(self) -> list[str]: ...


Names = Union[None, str, Iterable[str], TokenSource]

__all__ = ["Names", "TokenSource"]

__docformat__ = "google"
