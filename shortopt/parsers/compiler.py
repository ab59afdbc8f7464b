#!/usr/bin/env python3
"""
Compiles a grammar spec string into a GrammarTree.

The grammar, in EBNF:

    spec           = options ;
    options        = option_block, { option_block } ;
    option_block   = option | optional_group | choice_group ;
    option         = letter, [ ":" ] ;
    optional_group = "[", options, "]" ;
    choice_group   = "{", options, { "|", options }, "}" ;
    letter         = "A".."Z" | "a".."z" | "0".."9" ;

Each rule either declines (returns None without moving the cursor),
or succeeds, or raises a GrammarError.
Once a group is opened there is no backtracking: an unclosed bracket is an error.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod

# ##-- end stdlib imports

# ##-- 1st party imports
from shortopt import _interface as API  # noqa: N812
from shortopt import errors
from shortopt.structs import ChoiceNode, GrammarTree, OptionalNode, OptionNode

# ##-- end 1st party imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shortopt.structs import GrammarNode

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class GrammarCompiler:
    """ A single use, recursive descent compiler over one spec string """

    def __init__(self, spec:str):
        match spec:
            case str():
                pass
            case x:
                raise TypeError("Grammar specs must be strings", type(x))

        self._spec   = spec
        self._index  = 0

    def compile(self) -> GrammarTree:
        logging.debug("Compiling Grammar: %s", self._spec)
        nodes = self._parse_options()
        if self._index < len(self._spec):
            raise errors.GrammarError("Unexpected character '%s' at position %s",
                                      self._peek(), self._index)

        logging.debug("Compiled %s top level nodes", len(nodes))
        return GrammarTree(nodes=tuple(nodes), source=self._spec)

    def _peek(self) -> None|str:
        if self._index < len(self._spec):
            return self._spec[self._index]

        return None

    def _skip(self) -> None:
        self._index += 1

    def _parse_options(self) -> list[GrammarNode]:
        """ options = option_block, { option_block } ; """
        nodes = []
        match self._parse_block():
            case None:
                raise errors.GrammarError("Failed to parse any options at position %s", self._index)
            case first:
                nodes.append(first)

        while (block:=self._parse_block()) is not None:
            nodes.append(block)

        return nodes

    def _parse_block(self) -> None|GrammarNode:
        """ option_block = option | optional_group | choice_group ; """
        match self._peek():
            case None:
                return None
            case API.OPTIONAL_OPEN:
                return self._parse_optional()
            case API.CHOICE_OPEN:
                return self._parse_choice()
            case x if x in API.LETTERS:
                return self._parse_option()
            case _:
                return None

    def _parse_option(self) -> OptionNode:
        """ option = letter, [ ":" ] ; """
        letter = self._peek()
        self._skip()
        if self._peek() == API.VALUE_MARK:
            self._skip()
            return OptionNode(letter=letter, requires_value=True)

        return OptionNode(letter=letter)

    def _parse_optional(self) -> OptionalNode:
        """ optional_group = "[", options, "]" ; """
        self._skip()
        children = self._parse_options()
        if self._peek() != API.OPTIONAL_CLOSE:
            raise errors.GrammarError("Optional arguments have to be closed with '%s' before position %s",
                                      API.OPTIONAL_CLOSE, self._index)

        self._skip()
        return OptionalNode(children=tuple(children))

    def _parse_choice(self) -> ChoiceNode:
        """ choice_group = "{", options, { "|", options }, "}" ; """
        self._skip()
        alternatives = [tuple(self._parse_options())]
        while self._peek() == API.CHOICE_SEP:
            self._skip()
            alternatives.append(tuple(self._parse_options()))

        if self._peek() != API.CHOICE_CLOSE:
            raise errors.GrammarError("Choice has to be closed by '%s' before position %s",
                                      API.CHOICE_CLOSE, self._index)

        self._skip()
        return ChoiceNode(alternatives=tuple(alternatives))

def compile_grammar(spec:str) -> GrammarTree:
    """ Compile a spec string, eg: '{c|x|t}[v]f:', into a GrammarTree """
    return GrammarCompiler(spec).compile()
