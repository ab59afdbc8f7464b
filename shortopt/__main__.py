#!/usr/bin/env python3
"""
The shortopt cli runner.

    shortopt -g '{c|x|t}[v]f:' -- -x -v -f archive.tar
    shortopt -n tar -c shortopt.toml -j -- -x -f archive.tar

Its own args are parsed by a ShortOptParser, using API.CLI_GRAMMAR:
  -g SPEC : the grammar to parse with
  -n NAME : or, a grammar named in the config
  -c PATH : the config file to use
  -v      : verbose logging
  -j      : print results as json
Everything after '--' is parsed against the chosen grammar.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import json
import logging as logmod
import sys

# ##-- end stdlib imports

# ##-- 3rd party imports
import stackprinter

# ##-- end 3rd party imports

# ##-- 1st party imports
from shortopt import _interface as API  # noqa: N812
from shortopt import errors
from shortopt.loaders.config_loader import get_grammar, load_config, log_level
from shortopt.parsers.parser import ShortOptParser

# ##-- end 1st party imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence
    from tomlguard import TomlGuard

# isort: on
# ##-- end types

##-- logging
logging         = logmod.root
##-- end logging

class ShortoptMain:
    """ Parses the cli's own args, selects a grammar, then parses the remaining args with it.
      Calling the instance returns the exit code.
    """

    def __init__(self, args:None|Sequence[str]=None):
        self.raw_args     : list[str]  = list(sys.argv[1:] if args is None else args)
        self.result_code  : int        = API.ExitCodes.SUCCESS
        self.cli_parser                = ShortOptParser(API.CLI_GRAMMAR)

    def split_args(self) -> tuple[list[str], list[str]]:
        """ separate the cli's args from those to parse """
        if API.ARGS_SEP not in self.raw_args:
            return self.raw_args, []

        index = self.raw_args.index(API.ARGS_SEP)
        return self.raw_args[:index], self.raw_args[index+1:]

    def setup_logging(self, config:TomlGuard, *, verbose:bool=False) -> None:
        level = "DEBUG" if verbose else log_level(config)
        match logmod.getLevelName(level):
            case int() as x:
                logging.setLevel(x)
            case _:
                raise errors.ConfigError("Unknown log level: %s", level)

    def select_parser(self, config:TomlGuard, cli_args:dict[str, str]) -> ShortOptParser:
        match cli_args:
            case {"g": spec}:
                return ShortOptParser(spec)
            case {"n": name}:
                return get_grammar(config, name)
            case x:
                raise errors.ParseError("No grammar specified", x)

    def report(self, result:dict[str, str], *, as_json:bool=False) -> None:
        if as_json:
            print(json.dumps(result))
            return

        for letter, value in result.items():
            print(f"{letter}={value}")

    def __call__(self) -> int:
        try:
            own_args, targets  = self.split_args()
            cli_args           = self.cli_parser.parse(own_args)
            config             = load_config(cli_args.get("c", None))
            self.setup_logging(config, verbose="v" in cli_args)
            parser             = self.select_parser(config, cli_args)
            logging.info("Parsing with grammar: %s", parser)
            self.report(parser.parse(targets), as_json="j" in cli_args)
        except (errors.ShortoptError, NotImplementedError) as err:
            self.result_code = self.discriminate_exit(err)
        except Exception as err:  # noqa: BLE001
            self.result_code = self.python_exit(err)

        return self.result_code

    def discriminate_exit(self, err:Exception) -> int:
        match err:
            case errors.GrammarError():
                logging.error("[%s] : Bad Grammar: %s", type(err).__name__, err)
                return API.ExitCodes.GRAMMAR_FAIL
            case errors.ParseError():
                logging.error("[%s] : %s", type(err).__name__, err)
                return API.ExitCodes.PARSE_FAIL
            case errors.MissingGrammarError():
                logging.error("[%s] : %s", type(err).__name__, err)
                return API.ExitCodes.MISSING_GRAMMAR
            case errors.ConfigError():
                logging.error("[%s] : Config Error: %s", type(err).__name__, err)
                return API.ExitCodes.BAD_CONFIG
            case _:
                return self.python_exit(err)

    def python_exit(self, err:Exception) -> int:
        logging.error("[%s] : Python Error:\n%s", type(err).__name__, stackprinter.format(err))
        return API.ExitCodes.PYTHON_FAIL

def main() -> None:
    logmod.basicConfig(format=API.LOG_FORMAT, level=logmod.WARNING)
    sys.exit(ShortoptMain()())

if __name__ == "__main__":
    main()
