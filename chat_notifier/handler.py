import logging
from datetime import datetime
from typing import Callable, Dict, List, Optional, Union

import pytz

from .config import ChatNotifierConfig
from .daily_log import get_daily_logger
from .formatters import build_request_body
from .services import send_chat_payload

logger = logging.getLogger(__name__)

DEFAULT_FORMAT = "[%(asctime)s] %(name)s.%(levelname)s: %(message)s"

# Registros desses loggers nunca vão para o chat (evita laço handler -> requests -> handler)
IGNORED_LOGGER_PREFIXES = ("chat_notifier.handler", "chat_notifier.daily", "chat_notifier.flask_ext", "requests", "urllib3")

# Atributos que todo LogRecord tem; o resto veio de logger.x(..., extra={...})
STANDARD_RECORD_ATTRS = set(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}


class WebhookNotConfiguredError(RuntimeError):
    pass


def get_webhook_urls(config: ChatNotifierConfig) -> List[str]:
    url = config.webhook_url
    if not url:
        raise WebhookNotConfiguredError("Webhook do Google Chat não configurado.")

    if isinstance(url, (list, tuple)):
        return list(url)

    return [each.strip() for each in str(url).split(',')]


class GoogleChatHandler(logging.Handler):
    """
    Handler de logging que envia cada registro como card (cardsV2) para os webhooks do Google Chat.

    config pode ser:
    - ChatNotifierConfig: usado como está
    - callable sem argumentos: chamado a cada registro
    - None: ChatNotifierConfig.from_env() a cada registro

    Erros (webhook ausente, falha de rede) propagam para quem chamou o log,
    em vez de irem para handleError().
    """

    def __init__(self, config: Union[ChatNotifierConfig, Callable[[], ChatNotifierConfig], None] = None,
                 level=logging.NOTSET, daily_logger: Optional[logging.Logger] = None):
        super().__init__(level=level)
        self._config = config
        self._daily_logger = daily_logger
        self.setFormatter(logging.Formatter(DEFAULT_FORMAT))

    def get_config(self) -> ChatNotifierConfig:
        if self._config is None:
            return ChatNotifierConfig.from_env()
        if callable(self._config):
            return self._config()
        return self._config

    def to_params(self, record: logging.LogRecord) -> Dict:
        return {
            'message': record.getMessage(),
            'level': record.levelno,
            'level_name': record.levelname,
            'channel': record.name,
            'datetime': datetime.fromtimestamp(record.created, tz=pytz.utc),
            'extra': {k: v for k, v in record.__dict__.items() if k not in STANDARD_RECORD_ATTRS},
            'formatted': self.format(record),
        }

    def emit(self, record: logging.LogRecord) -> None:
        if record.name.startswith(IGNORED_LOGGER_PREFIXES):
            return
        self.write(self.to_params(record))

    def write(self, params: Dict) -> None:
        config = self.get_config()
        urls = get_webhook_urls(config)
        body = build_request_body(params, config)
        daily = self._daily_logger or get_daily_logger(config.daily_log_file)

        logger.debug(f"Enviando '{params.get('level_name')}' para {len(urls)} webhook(s)")
        # O espelho no log diário é gravado uma vez por destino
        for url in urls:
            daily.error(params['formatted'])
            send_chat_payload(url, body)
