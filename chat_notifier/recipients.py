from typing import Dict, Optional

from .constants import ALL_USERS_ID
from .severity import notify_key


def _clean(value: Optional[str]) -> str:
    if not value:
        return ""
    return str(value).strip()


def get_notifiable_text(level, notify_users: Optional[Dict[str, str]]) -> str:
    """
    Monta o texto de menções para o nível do registro.
    Os ids do 'default' valem para qualquer nível e vêm antes dos ids específicos do nível.
    """
    notify_users = notify_users or {}
    key = notify_key(level)
    level_ids = _clean(notify_users.get(key)) if key else ""
    default_ids = _clean(notify_users.get("default"))

    if default_ids and level_ids:
        return construct_notifiable_text(f"{default_ids},{level_ids}")
    return construct_notifiable_text(default_ids or level_ids)


def construct_notifiable_text(user_ids: Optional[str]) -> str:
    if not user_ids:
        return ""

    mention_all = False
    seen = set()
    tokens = []
    for raw in user_ids.split(","):
        user_id = raw.strip()
        if not user_id or user_id in seen:
            continue
        seen.add(user_id)
        # 'all' (qualquer caixa) vira uma única menção geral, sempre na frente
        if user_id.lower() == ALL_USERS_ID:
            mention_all = True
            continue
        tokens.append(f"<users/{user_id}>")

    if mention_all:
        tokens.insert(0, f"<users/{ALL_USERS_ID}>")
    return " ".join(tokens)
