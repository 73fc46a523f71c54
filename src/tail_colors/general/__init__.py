"""
general.

Does: Domain-agnostic helpers (tokenizing, fuzzy suggestions, config loading, tracing)
      shared by the color engine.
"""

__all__: list[str] = []
__docformat__ = "google"
