#!/usr/bin/env python3
"""
Shortopt : Short option cli parsing, validated against a grammar.

A grammar is a spec string like '{c|x|t}[v]f:', meaning:
  one of -c, -x or -t, optionally -v, and -f with a value.

    parser = shortopt.ShortOptParser("{c|x|t}[v]f:")
    parser.parse(["-x", "-f", "archive.tar"])
    => {"x": "", "f": "archive.tar"}

"""
# Imports:
from __future__ import annotations

import logging as logmod

from ._interface import __version__
from . import errors
from .errors import (GrammarError, ParseError, ShortoptError,
                     ValidationError)
from .parsers.compiler import compile_grammar
from .parsers.parser import ShortOptParser, parse
from .parsers.tokenizer import tokenize

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

__all__ = [
    "GrammarError",
    "ParseError",
    "ShortOptParser",
    "ShortoptError",
    "ValidationError",
    "__version__",
    "compile_grammar",
    "errors",
    "parse",
    "tokenize",
]
