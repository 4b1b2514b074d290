import logging
import os

from flask import Flask, request

from .constants import DEBUG_MODE
from .flask_ext import init_app

# Chaves copiadas do ambiente para app.config na criação do app
ENV_PREFIXES = ("GOOGLE_CHAT_", "APP_")


def create_app(config=None):
    app = Flask(__name__)
    app.config.update({k: v for k, v in os.environ.items() if k.startswith(ENV_PREFIXES)})
    if config:
        app.config.update(config)

    init_app(app)

    @app.route('/health', methods=['GET'])
    def health():
        return {'status': 'ok', 'service': 'google-chat-notifier'}, 200

    @app.route('/notify-test', methods=['POST'])
    def notify_test():
        try:
            data = request.get_json(silent=True) or {}
            level_name = str(data.get('level', 'error')).upper()
            level = logging.getLevelName(level_name)
            if not isinstance(level, int):
                return f'Error: nível desconhecido {level_name}', 400

            if DEBUG_MODE:
                print(f"[DEBUG] Enviando log de teste nível {level_name}")
            app.logger.log(level, data.get('message', 'Mensagem de teste do Google Chat'))
            return {'status': 'logged', 'level': level_name}, 200
        except Exception as e:
            if DEBUG_MODE:
                print(f"[ERROR] {str(e)}")
            return f'Error: {str(e)}', 500

    return app
