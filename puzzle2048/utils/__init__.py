# -*- coding: utf-8 -*-
"""
Helpers around the game that are not part of the engine, such as rendering a board as text.
"""

from .render import render_board

__all__ = ["render_board"]
