#!/usr/bin/env python3
"""
Loads shortopt config, and the named grammars it declares.

Config is read from, in order of preference:
- an explicitly given path,
- shortopt.toml in the cwd,
- pyproject.toml in the cwd, under [tool.shortopt]

eg: shortopt.toml
    [settings]
    log_level = "INFO"

    [grammars]
    tar = "{c|x|t}[v]f:"
"""
##-- imports
from __future__ import annotations

import logging as logmod
import pathlib as pl
from typing import Any

##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

import tomlguard
from tomlguard import TomlGuard

from shortopt import _interface as API  # noqa: N812
from shortopt import errors
from shortopt.parsers.parser import ShortOptParser

def _find_config(root:pl.Path) -> None|pl.Path:
    for name in API.DEFAULT_FILENAMES:
        candidate = root / name
        if candidate.exists():
            return candidate

    return None

def load_config(path:None|str|pl.Path=None, *, root:None|pl.Path=None) -> TomlGuard:
    """ Read a config file into a TomlGuard.
      With no path, searches root (default: cwd) for the default filenames.
      No config found gives an empty TomlGuard
    """
    match path:
        case None:
            target = _find_config(root or pl.Path.cwd())
        case str() | pl.Path():
            target = pl.Path(path).expanduser()
            if not target.exists():
                raise errors.ConfigError("Config file does not exist: %s", target)
        case x:
            raise TypeError(type(x))

    if target is None:
        logging.debug("No config file found")
        return TomlGuard({})

    logging.debug("Loading config: %s", target)
    try:
        return tomlguard.read(target.read_text())
    except ValueError as err:
        # toml decode errors are ValueErrors
        raise errors.ConfigError("Failed to read config file %s : %s", target, err) from err

def _section(config:TomlGuard, name:str) -> dict[str, Any]:
    """ get a top level table, or its [tool.shortopt] equivalent, as a dict """
    match getattr(config.on_fail(None), name)():
        case None:
            table = getattr(config.on_fail({}).tool.shortopt, name)()
        case x:
            table = x

    return dict(table.items())

def log_level(config:TomlGuard) -> str:
    match _section(config, "settings").get("log_level", None):
        case None:
            return API.DEFAULT_LOG_LEVEL
        case str() as x:
            return x.upper()
        case x:
            raise errors.ConfigError("settings.log_level must be a string, not: %s", type(x).__name__)

def load_grammars(config:TomlGuard) -> dict[str, ShortOptParser]:
    """ Compile every grammar in the config's [grammars] table """
    grammars = {}
    for name, spec in _section(config, "grammars").items():
        match spec:
            case str():
                pass
            case x:
                raise errors.ConfigError("Grammar '%s' must be a string, not: %s", name, type(x).__name__)

        try:
            grammars[name] = ShortOptParser(spec)
        except errors.GrammarError as err:
            raise errors.ConfigError("Grammar '%s' is malformed: %s", name, err) from err

    logging.debug("Loaded Grammars: %s", list(grammars))
    return grammars

def get_grammar(config:TomlGuard, name:str) -> ShortOptParser:
    """ Compile a single named grammar from the config """
    match _section(config, "grammars").get(name, None):
        case None:
            raise errors.MissingGrammarError("No grammar named '%s' in config", name)
        case str() as spec:
            pass
        case x:
            raise errors.ConfigError("Grammar '%s' must be a string, not: %s", name, type(x).__name__)

    try:
        return ShortOptParser(spec)
    except errors.GrammarError as err:
        raise errors.ConfigError("Grammar '%s' is malformed: %s", name, err) from err
