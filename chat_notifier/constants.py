import os

# Configurações globais de ambiente
APP_PORT = int(os.getenv("APP_PORT", "5001"))
DEBUG_MODE = os.getenv("DEBUG_MODE", "False").lower() == "true"

# Fuso usado quando GOOGLE_CHAT_TIMEZONE não está definido
DEFAULT_TIMEZONE = "Asia/Kolkata"
# Formato do widget de horário (equivale a 'Y-m-d h:i: A')
TIMESTAMP_FORMAT = "%Y-%m-%d %I:%M: %p"

# Limite do texto formatado dentro do card
CONTENT_MAX_CHARS = 38000

CARD_ID = "text-card-id"
CARD_SECTION_HEADER = "Details"

DEFAULT_DAILY_LOG_FILE = os.path.join("logs", "chat-notifier.log")
DEFAULT_HANDLER_LEVEL = "ERROR"

# Ícones nativos do Google Chat usados nos widgets
ICON_ENV = "BOOKMARK"
ICON_CONTENT = "TICKET"
ICON_CLOCK = "CLOCK"

ALL_USERS_ID = "all"

# Chaves de configuração (variáveis de ambiente ou app.config do Flask)
WEBHOOK_URL_KEY = "GOOGLE_CHAT_WEBHOOK_URL"
TIMEZONE_KEY = "GOOGLE_CHAT_TIMEZONE"
NOTIFY_USERS_KEY = "GOOGLE_CHAT_NOTIFY_USERS"
DAILY_LOG_FILE_KEY = "GOOGLE_CHAT_DAILY_LOG_FILE"
HANDLER_LEVEL_KEY = "GOOGLE_CHAT_LOG_LEVEL"
APP_NAME_KEY = "APP_NAME"
APP_URL_KEY = "APP_URL"
APP_ENV_KEY = "APP_ENV"

# Cores por severidade
SEVERITY_COLORS = {
    "emergency": "#ff1100",
    "alert": "#ff1100",
    "critical": "#ff1100",
    "error": "#ff1100",
    "warning": "#ffc400",
    "notice": "#00aeff",
    "info": "#48d62f",
    "debug": "#000000",
}
FALLBACK_COLOR = "#ff1100"
