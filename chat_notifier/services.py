import requests
from .constants import DEBUG_MODE


def send_chat_payload(url, payload, timeout=None):
    # Sem checagem de status: erros de rede propagam, respostas != 2xx não
    resp = requests.post(url, json=payload, timeout=timeout)
    if DEBUG_MODE:
        try:
            print(f"[DEBUG] Google Chat response: {resp.status_code}")
            if resp.status_code != 200:
                print(f"[DEBUG] Response content: {resp.text}")
        except Exception:
            pass
    return resp
