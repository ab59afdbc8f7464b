#!/usr/bin/env python3
"""
The main entry point for parsing:
compile a grammar once, then parse any number of arg lists against it.

eg:
    parser = ShortOptParser("{c|x|t}[v]f:")
    parser.parse(["-x", "-v", "-f", "archive.tar"])
    => {"x": "", "v": "", "f": "archive.tar"}
"""
##-- imports
from __future__ import annotations

import logging as logmod
from typing import TYPE_CHECKING

##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

from shortopt._abstract import ArgParser_i
from shortopt.parsers.compiler import compile_grammar
from shortopt.parsers.matcher import validate
from shortopt.parsers.tokenizer import tokenize
from shortopt.utils.check_protocol import check_protocol

if TYPE_CHECKING:
    from collections.abc import Sequence
    from shortopt.structs import GrammarTree

def parse(tree:GrammarTree, args:Sequence[str]) -> dict[str, str]:
    """ Tokenize args and validate them against a compiled grammar """
    return validate(tree, tokenize(args))

@check_protocol
class ShortOptParser(ArgParser_i):
    """
    Parses short options against a grammar spec string.
    The spec is compiled on construction, raising a GrammarError if malformed.
    The compiled grammar is never modified, so a parser can be shared.
    """

    def __init__(self, spec:str):
        self._grammar = compile_grammar(spec)

    @property
    def grammar(self) -> GrammarTree:
        return self._grammar

    def parse(self, args:Sequence[str]) -> dict[str, str]:
        """
          Parses the list of arguments against the grammar.
          Returns a dict of letter -> value, with "" for options without values.
        """
        logging.debug("Parsing args: %s against: %s", args, self._grammar)
        return parse(self._grammar, args)

    def __call__(self, args:Sequence[str]) -> dict[str, str]:
        return self.parse(args)

    def __str__(self):
        return str(self._grammar)

    def __repr__(self):
        return f"<{type(self).__name__}: {self._grammar}>"
