import os
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Union

from .constants import (
    APP_ENV_KEY,
    APP_NAME_KEY,
    APP_URL_KEY,
    DAILY_LOG_FILE_KEY,
    DEFAULT_DAILY_LOG_FILE,
    DEFAULT_HANDLER_LEVEL,
    HANDLER_LEVEL_KEY,
    NOTIFY_USERS_KEY,
    TIMEZONE_KEY,
    WEBHOOK_URL_KEY,
)
from .severity import Severity


@dataclass
class ChatNotifierConfig:
    """
    Configuração explícita do notificador.
    webhook_url aceita string (separada por vírgula) ou lista de URLs.
    """

    webhook_url: Union[str, List[str], None] = None
    timezone: Optional[str] = None
    notify_users: Dict[str, str] = field(default_factory=dict)
    app_name: str = ""
    app_url: str = ""
    app_env: str = ""
    daily_log_file: str = DEFAULT_DAILY_LOG_FILE
    handler_level: str = DEFAULT_HANDLER_LEVEL

    @classmethod
    def from_mapping(cls, mapping: Mapping) -> "ChatNotifierConfig":
        return cls(
            webhook_url=mapping.get(WEBHOOK_URL_KEY),
            timezone=mapping.get(TIMEZONE_KEY),
            notify_users=_notify_users_from_mapping(mapping),
            app_name=mapping.get(APP_NAME_KEY) or "",
            app_url=mapping.get(APP_URL_KEY) or "",
            app_env=mapping.get(APP_ENV_KEY) or "",
            daily_log_file=mapping.get(DAILY_LOG_FILE_KEY) or DEFAULT_DAILY_LOG_FILE,
            handler_level=str(mapping.get(HANDLER_LEVEL_KEY) or DEFAULT_HANDLER_LEVEL).upper(),
        )

    @classmethod
    def from_env(cls) -> "ChatNotifierConfig":
        # Lido a cada chamada: alterações no ambiente valem para o próximo log
        return cls.from_mapping(os.environ)


def _notify_users_from_mapping(mapping: Mapping) -> Dict[str, str]:
    """
    Aceita GOOGLE_CHAT_NOTIFY_USERS como dict (app.config do Flask) e/ou
    chaves planas GOOGLE_CHAT_NOTIFY_USERS_DEFAULT, GOOGLE_CHAT_NOTIFY_USERS_ERROR, ...
    As chaves planas têm precedência.
    """
    users: Dict[str, str] = {}
    nested = mapping.get(NOTIFY_USERS_KEY)
    if isinstance(nested, Mapping):
        for key, value in nested.items():
            if value:
                users[str(key).lower()] = str(value)

    names = ["default"] + [s.name.lower() for s in Severity]
    for name in names:
        value = mapping.get(f"{NOTIFY_USERS_KEY}_{name.upper()}")
        if value:
            users[name] = str(value)
    return users
