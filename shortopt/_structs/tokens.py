#!/usr/bin/env python3
"""

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from dataclasses import dataclass, field

# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

@dataclass(frozen=True)
class TokenizedArgs:
    """ Raw cli tokens, split into option letters and their values.
      values : letter -> value, "" when no value was given
      order  : the letters, in the order they were given
      raw    : the original tokens, for error reporting
    """

    values  : dict[str, str]   = field(default_factory=dict)
    order   : tuple[str, ...]  = ()
    raw     : tuple[str, ...]  = ()

    def __len__(self) -> int:
        return len(self.values)

    def __contains__(self, letter) -> bool:
        return letter in self.values
