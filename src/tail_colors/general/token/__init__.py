# tail_colors/general/token/__init__.py
"""
token.
=====

Does: Provide base token utilities for splitting/joining class strings.
Exports: tokenize, join, ClassInput
Used by: Classifier, resolver, cleaner and themer.
"""

from __future__ import annotations

from .classlist import (
    ClassInput,
    join,
    tokenize,
)

__all__ = [
    "ClassInput",
    "tokenize",
    "join",
]
