'''
Logger centralisé du service de recherche.

Loguru est configuré une seule fois à l'import : sortie console colorée sur
stderr et fichiers rotatifs par niveau dans ``settings.LOG_DIR``.
'''

import os
import sys

from loguru import logger

from product_search.config import settings

LOG_FORMAT_CONSOLE = (
    "<white>{time:YYYY-MM-DD HH:mm:ss.SSS}</white> | "
    "<level>{level: <8}</level> | "
    "<light-black>{name}:{function}:{line}</light-black> - "
    "<level><b>{message}</b></level>"
)
LOG_FORMAT_FILE = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | "
    "{name}:{function}:{line} - {message}"
)

# (fichier, niveau minimal, niveaux acceptés ; None = tout à partir du minimal)
LOG_FILES = (
    ("debug.log", "DEBUG", ("DEBUG",)),
    ("info.log", "INFO", ("INFO", "WARNING")),
    ("error.log", "ERROR", None),
)


def _level_filter(accepted):
    if accepted is None:
        return None
    return lambda record: record["level"].name in accepted


def configure_logger(log_dir: str = settings.LOG_DIR, level: str = settings.LOG_LEVEL):
    """Réinitialise les handlers loguru (console + fichiers journaliers)."""
    os.makedirs(log_dir, exist_ok=True)
    logger.remove()

    logger.add(
        sys.stderr,
        level=level,
        format=LOG_FORMAT_CONSOLE,
        colorize=True,
        backtrace=True,
        diagnose=True,
    )
    for filename, min_level, accepted in LOG_FILES:
        logger.add(
            os.path.join(log_dir, filename),
            level=min_level,
            format=LOG_FORMAT_FILE,
            rotation="00:00",
            retention="30 days",
            compression="zip",
            encoding="utf-8",
            filter=_level_filter(accepted),
            backtrace=min_level == "ERROR",
            diagnose=min_level == "ERROR",
        )
    return logger


configure_logger()

# from product_search.logger import logger
# logger.debug("Produits retenus : {count}", count=3)
