"""Headlines application package.

A Tkinter reader for newsapi.org top headlines. Network fetches run in a
background worker; the Tk main loop polls the results each frame.

Updates: v0.1 - 2026-10-18 - Created package scaffold.
"""

from .main import main

__all__ = ["main"]
