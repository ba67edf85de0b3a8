"""Terminal portfolio: ANSI résumé page over HTTP, interactive TUI with Tetris, and SSH front end."""

__version__ = "0.1.0"