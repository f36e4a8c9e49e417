"""
➡️ But : Configurer les logs de l’application (module logging de la stdlib).

Chaque module déclare son logger : logger = logging.getLogger(__name__)

configure_logging() branche un handler unique sur le logger "todo_api" ;
uvicorn garde ses propres loggers (uvicorn.error, uvicorn.access).
"""

import logging

LOGGER_NAME = "todo_api"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())

    # idempotent : create_app() peut être appelé plusieurs fois (tests)
    if not any(h.get_name() == LOGGER_NAME for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.set_name(LOGGER_NAME)
        logger.addHandler(handler)

    logger.propagate = False
    return logger
