"""
log.py.

Does: Topic-gated trace lines for class list mutations, switched on per topic
      by CLASS_LIST_DEBUG_TOPICS (comma-sep or 'all'). Messages take
      %-style args and are only formatted when their topic is on.
Returns: `[ts] [topic][LEVEL] msg` lines on stderr (or a given stream).
Used by: TokenList mutators and the input normalizer.
"""

from __future__ import annotations

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["ENV_VAR", "debug", "enabled", "reload_topics"]

ENV_VAR = "CLASS_LIST_DEBUG_TOPICS"
_ALL = "all"


def _parse(raw: str) -> frozenset[str]:
    return frozenset(part.strip().lower() for part in raw.split(",") if part.strip())


_topics: frozenset[str] = _parse(os.getenv(ENV_VAR, ""))


def reload_topics() -> frozenset[str]:
    """Re-read CLASS_LIST_DEBUG_TOPICS and return the enabled topics."""
    global _topics
    _topics = _parse(os.getenv(ENV_VAR, ""))
    return _topics


def enabled(topic: str) -> bool:
    return _ALL in _topics or topic.strip().lower() in _topics


def debug(
    msg: str,
    *args: object,
    topic: str = "mutation",
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """
    Does: Write `msg % args` tagged with topic and level, if the topic is on.
          Nothing is formatted for a disabled topic; all topics are off
          when the variable is unset.
    """
    if not enabled(topic):
        return
    text = msg % args if args else msg
    stamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    out = stream if stream is not None else sys.stderr
    out.write(f"[{stamp}] [{topic.strip().lower()}][{level.upper()}] {text}\n")
