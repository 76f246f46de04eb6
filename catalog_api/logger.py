"""
Logging setup for the catalogue service.

Every module logs through ``logging.getLogger(__name__)``. Those names
all sit under ``catalog_api``, so one handler installed here on the
package logger covers the whole service. Importing this module is
enough; ``main.py`` does so before the catalogue is loaded.
"""

import logging
import sys

from .config import LOG_LEVEL


def _configure(name: str, level: str) -> logging.Logger:
    """Attach a stdout handler to the ``name`` logger, once.

    Parameters
    ----------
    name : str
        Logger to configure; child loggers inherit its handler.
    level : str
        Level name such as ``"INFO"`` or ``"DEBUG"``.

    Returns
    -------
    logging.Logger
        The configured logger.
    """
    log = logging.getLogger(name)
    log.setLevel(level)
    if not log.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        log.addHandler(handler)
    # Records stop here; uvicorn's root setup would print them twice.
    log.propagate = False
    return log


logger = _configure("catalog_api", LOG_LEVEL)
