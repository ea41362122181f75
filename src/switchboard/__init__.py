"""switchboard — context-aware command interpreter for system/member chat bots."""

__version__ = "0.3.0"
