"""
log.py.

Does: Lightweight topic tracer controlled by TAIL_COLORS_DEBUG_TOPICS (comma-sep or 'all').
Returns: Prints timestamped lines with topic + level to stderr. Silent when the
         variable is unset. Used by the resolver and tests.
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["debug", "enabled", "reload_topics"]

DEBUG_TOPICS_ENV = "TAIL_COLORS_DEBUG_TOPICS"


def _load_topics() -> set[str]:
    raw = os.getenv(DEBUG_TOPICS_ENV, "")
    return {t.strip().lower() for t in raw.split(",") if t.strip()}


_DEBUG_TOPICS = _load_topics()


def reload_topics() -> None:
    """Does: Reload topics from environment variable TAIL_COLORS_DEBUG_TOPICS."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics()


def enabled(topic: str) -> bool:
    """Does: Tell whether `topic` would be printed (lets callers skip costly messages)."""
    topic_key = topic.lower().strip()
    return "all" in _DEBUG_TOPICS or topic_key in _DEBUG_TOPICS


def debug(
    msg: str,
    topic: str = "resolve",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Print a timestamped debug line with topic and level
    if enabled via TAIL_COLORS_DEBUG_TOPICS.
    """
    if not enabled(topic):
        return
    if stream is None:
        stream = sys.stderr
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{ts}] [{topic.lower().strip()}][{level.upper()}] {msg}", file=stream)
