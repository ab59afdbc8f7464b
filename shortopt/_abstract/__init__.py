"""
Interfaces for using shortopt.

Interfaces have names {}_i, and need to be inherited from.
"""

from .parser import ArgParser_i
