#!/usr/bin/env python3
"""
These are the shortopt specific errors that can occur
"""
# Imports:
from __future__ import annotations

# ##-- 1st party imports
from ._base import ShortoptError
from .config import ConfigError, MissingGrammarError
from .grammar import GrammarError
from .parse import (DuplicateOptionError, ParseError,
                    UnrecognizedTokenError, ValidationError)

# ##-- end 1st party imports

__all__ = ( # noqa: RUF022
    "ShortoptError",
    "GrammarError",
    "ParseError", "DuplicateOptionError", "UnrecognizedTokenError", "ValidationError",
    "ConfigError", "MissingGrammarError",
)
