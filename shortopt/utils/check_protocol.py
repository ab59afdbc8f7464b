#!/usr/bin/env python3
"""

"""

##-- builtin imports
from __future__ import annotations

import logging as logmod

##-- end builtin imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

def check_protocol(cls):
    """ Decorator. Check the class implements all its methods / has no abstractmethods """
    abstracts = [x for x in dir(cls) if getattr(getattr(cls, x, None), "__isabstractmethod__", False)]
    if bool(abstracts):
        raise NotImplementedError(f"Class has Abstract Methods: {cls.__module__} : {cls.__name__} : {abstracts}")

    return cls
