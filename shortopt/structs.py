#!/usr/bin/env python3
"""
Public Access point for Shortopt Structures
"""
from __future__ import annotations

from shortopt._structs.grammar import (ChoiceNode, GrammarNode, GrammarTree,
                                       OptionalNode, OptionNode)
from shortopt._structs.tokens import TokenizedArgs
