import logging
import os
from logging.handlers import TimedRotatingFileHandler
from typing import Optional

from .constants import DAILY_LOG_FILE_KEY, DEFAULT_DAILY_LOG_FILE

DAILY_LOGGER_NAME = "chat_notifier.daily"


def get_daily_logger(path: Optional[str] = None) -> logging.Logger:
    """
    Logger espelho ("daily"): um arquivo por dia, rotacionado à meia-noite.
    Não propaga para o root, senão o próprio GoogleChatHandler receberia o espelho.
    Chamado com outro caminho, passa a gravar no novo arquivo.
    """
    logger = logging.getLogger(DAILY_LOGGER_NAME)
    logger.propagate = False

    path = path or os.getenv(DAILY_LOG_FILE_KEY) or DEFAULT_DAILY_LOG_FILE
    target = os.path.abspath(path)
    # Um único arquivo ativo: troca o handler quando o caminho configurado muda
    for existing in list(logger.handlers):
        if getattr(existing, "baseFilename", None) == target:
            return logger
        existing.close()
        logger.removeHandler(existing)

    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    handler = TimedRotatingFileHandler(path, when="midnight", encoding="utf-8", delay=True)
    handler.setFormatter(logging.Formatter("[%(asctime)s] %(levelname)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    return logger
