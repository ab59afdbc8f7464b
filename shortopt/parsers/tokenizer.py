#!/usr/bin/env python3
"""
Splits raw cli tokens into option letters and values.

Accepted forms, tried in order:
  -a value    : when the next token doesn't look like an option
  -a          : no value
  -avalue     : value glued to the option
Anything else is unrecognized.
The tokenizer knows nothing of grammars, so '-a value' is always read as
a value for 'a', even if 'a' is a flag. The matcher rejects that later.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import re

# ##-- end stdlib imports

# ##-- 1st party imports
from shortopt import _interface as API  # noqa: N812
from shortopt import errors
from shortopt.structs import TokenizedArgs

# ##-- end 1st party imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

ESCAPE_RE = re.compile(r'(\\|")')

def detokenize(args:Sequence[str]) -> str:
    """ Join args back into a single string, quoting each one """
    if not bool(args):
        return '""'

    return " ".join('"{}"'.format(ESCAPE_RE.sub(r"\\\1", x)) for x in args)

def tokenize(args:Sequence[str]) -> TokenizedArgs:
    """ Convert raw args into a TokenizedArgs of letter -> value """
    logging.debug("Tokenizing args: %s", args)
    args    = list(args)
    values  = {}
    order   = []
    index   = 0

    def _add(letter, value):
        if letter in values:
            raise errors.DuplicateOptionError('Option "%s" was specified more than once', letter)
        values[letter] = value
        order.append(letter)

    while index < len(args):
        current = args[index]
        upcoming = args[index + 1] if index + 1 < len(args) else None
        match API.OPTION_RE.fullmatch(current), upcoming:
            case re.Match() as opt, str() if API.ARGUMENT_RE.fullmatch(upcoming):
                _add(opt[1], upcoming)
                index += 2
                continue
            case re.Match() as opt, _:
                _add(opt[1], API.EMPTY_VALUE)
                index += 1
                continue
            case None, _:
                pass

        match API.OPTION_WITH_VALUE_RE.fullmatch(current):
            case re.Match() as opt:
                _add(opt[1], opt[2])
                index += 1
            case _:
                raise errors.UnrecognizedTokenError("Failed to parse arguments: %s", detokenize(args))

    return TokenizedArgs(values=values, order=tuple(order), raw=tuple(args))
