"""
vimsweeper: a minesweeper engine driven by vim-style keystrokes.
"""
__version__ = "0.1.0"
