# html_class_list/utils/__init__.py
"""

Does: Provide the env-configured debug logging helper for the class list package.
Returns: Public API via debug/enabled/reload_topics.
Used by: token_list, normalize, tests.
"""

from __future__ import annotations

from .log import (
    ENV_VAR,
    debug,
    enabled,
    reload_topics,
)

__all__ = [
    "ENV_VAR",
    "debug",
    "enabled",
    "reload_topics",
]
