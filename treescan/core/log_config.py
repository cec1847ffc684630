"""Centralized logging setup.

Call setup_logging() once at startup (the CLI does this). Library code only
ever does ``logging.getLogger(__name__)``.
"""

import logging

_HANDLER_NAME = "treescan-console"


def setup_logging(level: int = logging.INFO):
    """Configure the root logger with a single console handler.

    Safe to call multiple times: a second call only adjusts the level.
    """
    root = logging.getLogger()
    root.setLevel(level)

    for handler in root.handlers:
        if handler.get_name() == _HANDLER_NAME:
            handler.setLevel(level)
            return

    fmt = logging.Formatter(
        "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        datefmt="%H:%M:%S",
    )

    console = logging.StreamHandler()
    console.set_name(_HANDLER_NAME)
    console.setLevel(level)
    console.setFormatter(fmt)
    root.addHandler(console)


def level_from_name(name: str, debug: bool = False) -> int:
    """Maps a level name (e.g. 'WARNING') to its numeric value. --debug wins."""
    if debug:
        return logging.DEBUG
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO
