import logging
from enum import IntEnum
from typing import Optional

from .constants import SEVERITY_COLORS, FALLBACK_COLOR


class Severity(IntEnum):
    """
    Escala de 8 níveis (debug < ... < emergency) no eixo numérico do módulo logging.
    NOTICE, ALERT e EMERGENCY não existem no stdlib e são registrados por register_level_names().
    """

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    NOTICE = 25
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL
    ALERT = 60
    EMERGENCY = 70


def from_level(level) -> Optional[Severity]:
    try:
        return Severity(int(level))
    except (TypeError, ValueError):
        return None


def color(level) -> str:
    severity = from_level(level)
    if severity is None:
        return FALLBACK_COLOR
    return SEVERITY_COLORS.get(severity.name.lower(), FALLBACK_COLOR)


def notify_key(level) -> Optional[str]:
    """Nome da chave em notify_users para o nível, ou None se o nível não for reconhecido."""
    severity = from_level(level)
    if severity is None:
        return None
    return severity.name.lower()


def register_level_names():
    for severity in (Severity.NOTICE, Severity.ALERT, Severity.EMERGENCY):
        logging.addLevelName(int(severity), severity.name)
