#!/usr/bin/env python3
import unittest
from unittest.mock import patch

from chat_notifier.config import ChatNotifierConfig
from chat_notifier.constants import DEFAULT_DAILY_LOG_FILE


class TestChatNotifierConfig(unittest.TestCase):
    def test_defaults(self):
        config = ChatNotifierConfig.from_mapping({})
        self.assertIsNone(config.webhook_url)
        self.assertIsNone(config.timezone)
        self.assertEqual(config.notify_users, {})
        self.assertEqual(config.app_name, '')
        self.assertEqual(config.daily_log_file, DEFAULT_DAILY_LOG_FILE)
        self.assertEqual(config.handler_level, 'ERROR')

    def test_flat_notify_keys(self):
        config = ChatNotifierConfig.from_mapping({
            'GOOGLE_CHAT_NOTIFY_USERS_DEFAULT': 'all',
            'GOOGLE_CHAT_NOTIFY_USERS_ERROR': 'bob',
            'GOOGLE_CHAT_NOTIFY_USERS_EMERGENCY': 'carol',
            'GOOGLE_CHAT_NOTIFY_USERS_INFO': '',
        })
        self.assertEqual(config.notify_users, {'default': 'all', 'error': 'bob', 'emergency': 'carol'})

    def test_nested_notify_users_with_flat_override(self):
        config = ChatNotifierConfig.from_mapping({
            'GOOGLE_CHAT_NOTIFY_USERS': {'Default': 'all', 'error': 'bob'},
            'GOOGLE_CHAT_NOTIFY_USERS_ERROR': 'dave',
        })
        self.assertEqual(config.notify_users, {'default': 'all', 'error': 'dave'})

    def test_webhook_list_is_kept(self):
        config = ChatNotifierConfig.from_mapping({'GOOGLE_CHAT_WEBHOOK_URL': ['https://a', 'https://b']})
        self.assertEqual(config.webhook_url, ['https://a', 'https://b'])

    def test_from_env_reads_current_environment(self):
        env = {
            'GOOGLE_CHAT_WEBHOOK_URL': 'https://a,https://b',
            'GOOGLE_CHAT_TIMEZONE': 'UTC',
            'APP_NAME': 'MyApp',
            'APP_URL': 'https://myapp.example',
            'APP_ENV': 'production',
            'GOOGLE_CHAT_LOG_LEVEL': 'warning',
        }
        with patch.dict('os.environ', env, clear=True):
            config = ChatNotifierConfig.from_env()
        self.assertEqual(config.webhook_url, 'https://a,https://b')
        self.assertEqual(config.timezone, 'UTC')
        self.assertEqual(config.app_name, 'MyApp')
        self.assertEqual(config.app_url, 'https://myapp.example')
        self.assertEqual(config.app_env, 'production')
        self.assertEqual(config.handler_level, 'WARNING')


if __name__ == '__main__':
    unittest.main()
