#!/usr/bin/env python3
"""



"""
# Import:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod

# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# Body:
class ShortoptError(Exception):
    """
      The base class for all shortopt errors
      will try to % format the first argument with remaining args in str()
    """
    general_msg = "Non-Specific Shortopt Error:"

    def __str__(self):
        try:
            return self.args[0] % self.args[1:]
        except (TypeError, ValueError):
            return str(self.args)
