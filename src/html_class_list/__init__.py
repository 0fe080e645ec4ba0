"""
html_class_list
===============

Does: Root package for the DOMTokenList-style HTML class list.
Returns: Exposes TokenList, ClassList, the input normalizer and its error type.
Used by: Templating and attribute-rendering code that needs a `class="..."` value.
"""

from .normalize import TokenListInputError, normalize_input
from .token_list import ClassList, TokenList

__all__: list[str] = [
    "ClassList",
    "TokenList",
    "TokenListInputError",
    "normalize_input",
]
__docformat__ = "google"
