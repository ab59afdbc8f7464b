#!/usr/bin/env python3
"""
Matches tokenized args against a compiled GrammarTree.

Matching consumes entries from a working dict of letter -> value.
Nodes that can fail work on a copy, which is committed back only on success,
so a failed match never leaves the working dict partially consumed.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod

# ##-- end stdlib imports

# ##-- 1st party imports
from shortopt import errors
from shortopt.structs import ChoiceNode, OptionalNode, OptionNode
from shortopt.parsers.tokenizer import detokenize

# ##-- end 1st party imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from shortopt.structs import GrammarNode, GrammarTree, TokenizedArgs

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

def _match_all(nodes:Iterable[GrammarNode], working:dict[str, str]) -> bool:
    """ Match every node in order against a copy of working.
      Commits the copy only if they all matched.
    """
    trial = dict(working)
    for node in nodes:
        if not match_node(node, trial):
            return False

    working.clear()
    working.update(trial)
    return True

def match_node(node:GrammarNode, working:dict[str, str]) -> bool:
    """ Try to consume the part of working that node describes.
      Returns whether the node is satisfied.
    """
    match node:
        case OptionNode(letter=letter, requires_value=requires_value):
            if letter not in working:
                return False
            if bool(working[letter]) != requires_value:
                logging.debug("Option %s found, but value requirement not met", node)
                return False
            del working[letter]
            return True
        case OptionalNode(children=children):
            # Always satisfied. Consumes only if every child matches
            committed = _match_all(children, working)
            logging.debug("Optional %s committed: %s", node, committed)
            return True
        case ChoiceNode(alternatives=alternatives):
            for alt in alternatives:
                if _match_all(alt, working):
                    logging.debug("Choice %s took: %s", node, "".join(str(x) for x in alt))
                    return True
            else:
                return False
        case x:
            raise TypeError("Unknown grammar node", type(x))

def match_tree(tree:GrammarTree, values:Mapping[str, str]) -> None|dict[str, str]:
    """ Match every top level node of the tree against a copy of values.
      Returns the unconsumed entries, or None if a top level node was not satisfied
    """
    working = dict(values)
    for node in tree.nodes:
        if not match_node(node, working):
            logging.debug("Top level node not satisfied: %s", node)
            return None

    return working

def validate(tree:GrammarTree, tokens:TokenizedArgs) -> dict[str, str]:
    """ Check tokens fully satisfy the tree, returning a copy of their values """
    match match_tree(tree, tokens.values):
        case None:
            raise errors.ValidationError("Failed to parse arguments: %s", detokenize(tokens.raw))
        case dict() as leftover if bool(leftover):
            logging.debug("Unconsumed options: %s, undeclared: %s",
                          list(leftover), sorted(set(leftover) - tree.letters()))
            raise errors.ValidationError("Failed to parse arguments: %s", detokenize(tokens.raw),
                                         leftover=leftover)
        case _:
            return dict(tokens.values)
