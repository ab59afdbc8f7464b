#!/usr/bin/env python3
"""
Errors raised while compiling a grammar spec string
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod

# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

from ._base import ShortoptError

class GrammarError(ShortoptError):
    """ The grammar spec string could not be compiled.
      the last arg is the character offset of the failure
    """
    general_msg = "Shortopt Grammar Failure:"

    @property
    def position(self) -> int:
        return self.args[-1]
