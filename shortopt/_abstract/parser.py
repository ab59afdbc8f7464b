#!/usr/bin/env python3
"""

"""
##-- imports
from __future__ import annotations

import logging as logmod
from abc import abstractmethod
from typing import TYPE_CHECKING

##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

if TYPE_CHECKING:
    from collections.abc import Sequence
    from shortopt._structs.grammar import GrammarTree

class ArgParser_i:
    """
    A Single standard process point for turning the list of passed in args
    into a dict of option letter -> value,
    validated against a grammar compiled once, at construction.
    """

    @property
    @abstractmethod
    def grammar(self) -> GrammarTree:
        pass

    @abstractmethod
    def parse(self, args:Sequence[str]) -> dict[str, str]:
        pass
