#!/usr/bin/env python3
"""
Constants shared across shortopt:
the grammar's punctuation, the token patterns,
the cli's own grammar, config locations and exit codes.

"""
# ruff: noqa:

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import enum
import logging as logmod
import re
from importlib.metadata import PackageNotFoundError, version

# ##-- end stdlib imports

# ##-- types
from typing import Final
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# Vars:
__version__ : str
try:
    __version__ = version("shortopt")
except PackageNotFoundError:
    __version__ = "0.1.0"

# -- grammar punctuation
VALUE_MARK      : Final[str]              = ":"
OPTIONAL_OPEN   : Final[str]              = "["
OPTIONAL_CLOSE  : Final[str]              = "]"
CHOICE_OPEN     : Final[str]              = "{"
CHOICE_CLOSE    : Final[str]              = "}"
CHOICE_SEP      : Final[str]              = "|"
LETTERS         : Final[frozenset[str]]   = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ"
                                                      "abcdefghijklmnopqrstuvwxyz"
                                                      "0123456789")

# -- token patterns, all used with fullmatch
OPTION_RE             : Final[re.Pattern] = re.compile(r"-(\w)", re.ASCII)
ARGUMENT_RE           : Final[re.Pattern] = re.compile(r"([^\-\s].*)")
OPTION_WITH_VALUE_RE  : Final[re.Pattern] = re.compile(r"-(\w)\s*([^\-\s].*)", re.ASCII)
EMPTY_VALUE           : Final[str]        = ""

# -- cli
PROG_NAME       : Final[str]              = "shortopt"
CLI_GRAMMAR     : Final[str]              = "{g:|n:}[c:][v][j]"
ARGS_SEP        : Final[str]              = "--"

# -- config
SHORTOPT_TOML   : Final[str]              = "shortopt.toml"
PYPROJ_TOML     : Final[str]              = "pyproject.toml"
DEFAULT_FILENAMES : Final[tuple[str, ...]] = (SHORTOPT_TOML, PYPROJ_TOML)
TOOL_PREFIX     : Final[tuple[str, ...]]  = ("tool", "shortopt")
DEFAULT_LOG_LEVEL : Final[str]            = "WARNING"
LOG_FORMAT      : Final[str]              = "%(levelname)-8s : %(name)s : %(message)s"

##--|
class ExitCodes(enum.IntEnum):
    SUCCESS          = 0
    PYTHON_FAIL      = 1
    GRAMMAR_FAIL     = 2
    PARSE_FAIL       = 3
    BAD_CONFIG       = 4
    MISSING_GRAMMAR  = 5
