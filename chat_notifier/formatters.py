import re
from datetime import datetime
from typing import Dict, Optional

import pytz

from .config import ChatNotifierConfig
from .constants import (
    CARD_ID,
    CARD_SECTION_HEADER,
    CONTENT_MAX_CHARS,
    DEFAULT_TIMEZONE,
    ICON_CLOCK,
    ICON_CONTENT,
    ICON_ENV,
    TIMESTAMP_FORMAT,
)
from .recipients import get_notifiable_text
from .severity import color


def card_widget(text: str, icon: str) -> Dict:
    return {
        'decoratedText': {
            'startIcon': {
                'knownIcon': icon,
            },
            'text': text,
            'wrapText': True,
        },
    }


def get_level_content(record: Dict) -> str:
    level_color = color(record.get('level'))
    formatted = str(record.get('formatted') or '')[:CONTENT_MAX_CHARS]
    return f"<font color='{level_color}'>{formatted}</font>"


def _to_datetime(value) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value, tz=pytz.utc)
    # string ISO, ex: '2024-01-01T10:00:00Z'
    clean = str(value).strip().replace('Z', '+00:00')
    return datetime.fromisoformat(clean)


def format_record_time(value, timezone: Optional[str] = None) -> str:
    """
    Converte o instante do registro para o fuso configurado e formata como 'YYYY-MM-DD hh:mm: AM'.
    Datas sem fuso são tratadas como UTC.
    """
    tz_name = (timezone or '').strip() or DEFAULT_TIMEZONE
    moment = _to_datetime(value)
    if moment.tzinfo is None:
        moment = pytz.utc.localize(moment)
    return moment.astimezone(pytz.timezone(tz_name)).strftime(TIMESTAMP_FORMAT)


def format_environment(app_env: Optional[str]) -> str:
    # Só a primeira letra de cada palavra vai para maiúscula; o resto fica como veio
    env = re.sub(r'(^|\s)(\S)', lambda m: m.group(1) + m.group(2).upper(), app_env or '')
    return f"{env} [Env]"


def build_request_body(record: Dict, config: ChatNotifierConfig) -> Dict:
    mentions = get_notifiable_text(record.get('level'), config.notify_users)
    app_name = config.app_name

    return {
        'text': f"{mentions} - {app_name}",
        'cardsV2': [
            {
                'cardId': CARD_ID,
                'card': {
                    'header': {
                        'title': f"{app_name}: {record.get('level_name')}: {record.get('message')}",
                        'subtitle': config.app_url,
                    },
                    'sections': {
                        'header': CARD_SECTION_HEADER,
                        'collapsible': True,
                        'uncollapsibleWidgetsCount': 1,
                        'widgets': [
                            card_widget(format_environment(config.app_env), ICON_ENV),
                            card_widget(get_level_content(record), ICON_CONTENT),
                            card_widget(format_record_time(record.get('datetime'), config.timezone), ICON_CLOCK),
                        ],
                    },
                },
            },
        ],
    }
