#!/usr/bin/env python3
"""
The compiled form of a grammar spec string.

A grammar is an ordered conjunction of nodes, each node being one of:
- OptionNode   : a single flag, 'a', or a flag requiring a value, 'a:'
- OptionalNode : a bracketed group that may be absent, '[ab:]'
- ChoiceNode   : a braced set of exclusive alternatives, '{a|bc}'

Nodes are frozen, so a compiled GrammarTree can be shared between parse calls.
Siblings and alternatives are tuples, and are matched in the order declared.
"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod

# ##-- end stdlib imports

# ##-- 3rd party imports
from pydantic import BaseModel, field_validator

# ##-- end 3rd party imports

# ##-- 1st party imports
from shortopt import _interface as API  # noqa: N812

# ##-- end 1st party imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from collections.abc import Iterator

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class OptionNode(BaseModel, frozen=True):
    """ A single accepted option letter """

    letter          : str
    requires_value  : bool = False

    @field_validator("letter")
    def validate_letter(cls, val):
        if val not in API.LETTERS:
            raise ValueError("Option letters must be a single ascii alphanumeric character", val)
        return val

    def __str__(self):
        if self.requires_value:
            return f"{self.letter}{API.VALUE_MARK}"
        return self.letter

class OptionalNode(BaseModel, frozen=True):
    """ A group of nodes which are matched all together, or not at all """

    children : tuple[GrammarNode, ...]

    @field_validator("children")
    def validate_children(cls, val):
        if not bool(val):
            raise ValueError("An optional group needs at least one member")
        return val

    def __str__(self):
        inner = "".join(str(x) for x in self.children)
        return f"{API.OPTIONAL_OPEN}{inner}{API.OPTIONAL_CLOSE}"

class ChoiceNode(BaseModel, frozen=True):
    """ Mutually exclusive alternatives, each a conjunction of nodes.
      The first alternative to fully match is the one taken.
    """

    alternatives : tuple[tuple[GrammarNode, ...], ...]

    @field_validator("alternatives")
    def validate_alternatives(cls, val):
        if not bool(val):
            raise ValueError("A choice needs at least one alternative")
        if not all(bool(x) for x in val):
            raise ValueError("Choice alternatives can not be empty")
        return val

    def __str__(self):
        alts = API.CHOICE_SEP.join("".join(str(x) for x in alt) for alt in self.alternatives)
        return f"{API.CHOICE_OPEN}{alts}{API.CHOICE_CLOSE}"

GrammarNode : TypeAlias = OptionNode | OptionalNode | ChoiceNode

class GrammarTree(BaseModel, frozen=True):
    """ The top level of a compiled grammar. All nodes must match.
      str() of a tree is its canonical spec string.
    """

    nodes   : tuple[GrammarNode, ...]
    source  : str = ""

    def __str__(self):
        return "".join(str(x) for x in self.nodes)

    def options(self) -> Iterator[OptionNode]:
        """ Depth first walk of every OptionNode in the tree """
        queue = list(reversed(self.nodes))
        while bool(queue):
            match queue.pop():
                case OptionNode() as x:
                    yield x
                case OptionalNode(children=children):
                    queue += reversed(children)
                case ChoiceNode(alternatives=alts):
                    queue += reversed([y for alt in alts for y in alt])
                case x:
                    raise TypeError(type(x))

    def letters(self) -> frozenset[str]:
        return frozenset(x.letter for x in self.options())

OptionalNode.model_rebuild()
ChoiceNode.model_rebuild()
GrammarTree.model_rebuild()
