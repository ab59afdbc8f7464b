#!/usr/bin/env python3
"""

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

class ConfigError(ShortoptError):
    """ Config data was malformed """
    general_msg = "Shortopt Config Error:"
    pass

class MissingGrammarError(ConfigError):
    """ A named grammar was requested that the config doesn't declare """
    general_msg = "Shortopt Missing Grammar:"
    pass
