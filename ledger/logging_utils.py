"""Logging helpers shared by the ledger modules.

``configure_root_logger`` installs a single stream handler on the root logger;
calling it again only adjusts the level. ``get_logger`` hands out module
loggers.
"""

import logging

_HANDLER_INSTALLED = False


def configure_root_logger(level: int | str = logging.INFO) -> None:
    global _HANDLER_INSTALLED
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if _HANDLER_INSTALLED:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(handler)
    _HANDLER_INSTALLED = True


def get_logger(name: str | None = None) -> logging.Logger:
    return logging.getLogger(name)
