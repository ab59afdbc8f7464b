#!/usr/bin/env python3
"""
Errors raised while parsing cli args against a compiled grammar
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

class ParseError(ShortoptError):
    """ In the course of parsing CLI input, a failure occurred.
      args are (msg, offending), offending being the input responsible
    """
    general_msg = "Shortopt CLI Parsing Failure:"

    @property
    def offending(self) -> str:
        return self.args[1]

class DuplicateOptionError(ParseError):
    """ The same option letter was given more than once """
    pass

class UnrecognizedTokenError(ParseError):
    """ A token was neither an option nor a value for one """
    pass

class ValidationError(ParseError):
    """ The tokens parsed, but did not satisfy the grammar.
      leftover holds any letters the grammar didn't consume
    """

    def __init__(self, *args, leftover:None|dict[str, str]=None):
        super().__init__(*args)
        self.leftover = dict(leftover or {})
