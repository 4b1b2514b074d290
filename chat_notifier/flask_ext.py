import logging

from .config import ChatNotifierConfig
from .handler import GoogleChatHandler
from .severity import register_level_names

logger = logging.getLogger(__name__)

EXTENSION_KEY = "google_chat"


def init_app(app):
    """
    Anexa um GoogleChatHandler ao app.logger do Flask.
    A configuração é relida de app.config a cada registro, então mudanças em runtime valem.
    """
    handler = app.extensions.get(EXTENSION_KEY)
    if handler is not None:
        return handler

    register_level_names()
    # app.logger é compartilhado entre apps com o mesmo import_name: mantém um único handler
    for existing in [h for h in app.logger.handlers if isinstance(h, GoogleChatHandler)]:
        app.logger.removeHandler(existing)

    level = ChatNotifierConfig.from_mapping(app.config).handler_level
    handler = GoogleChatHandler(config=lambda: ChatNotifierConfig.from_mapping(app.config), level=level)
    app.logger.addHandler(handler)
    # app.logger precisa deixar passar o nível do handler
    if app.logger.getEffectiveLevel() > handler.level:
        app.logger.setLevel(handler.level)
    app.extensions[EXTENSION_KEY] = handler
    logger.info(f"Google Chat handler anexado ao logger '{app.logger.name}' (nível {level})")
    return handler
