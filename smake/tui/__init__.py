from smake.tui.renderers import SMakeConsoleUI

__all__ = ["SMakeConsoleUI"]
