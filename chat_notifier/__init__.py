"""Handler de logging que envia registros como cards para webhooks do Google Chat.

Este pacote contém:
- constants: variáveis de ambiente, cores e limites do card
- severity: escala de 8 níveis, cor e chave de notificação por nível
- config: ChatNotifierConfig (ambiente ou app.config do Flask)
- recipients: montagem das menções <users/...>
- formatters: montagem do payload cardsV2
- services: POST para o webhook
- daily_log: logger espelho com arquivo diário
- handler: GoogleChatHandler (logging.Handler)
- flask_ext / controller: integração com Flask
"""
from .config import ChatNotifierConfig
from .handler import GoogleChatHandler, WebhookNotConfiguredError
from .severity import Severity, register_level_names

__all__ = [
    "ChatNotifierConfig",
    "GoogleChatHandler",
    "Severity",
    "WebhookNotConfiguredError",
    "register_level_names",
]
