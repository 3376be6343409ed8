import os
import unittest
from unittest.mock import patch

from pydantic import ValidationError

from stock_quotes.config.settings import Settings
from stock_quotes.errors import ConfigurationError


class TestQuoteSettings(unittest.TestCase):
    def test_missing_api_key_does_not_fail_loading(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings.from_env()

        self.assertIsNone(settings.FINNHUB_API_KEY)
        with self.assertRaises(ConfigurationError):
            settings.require_api_key()

    def test_blank_api_key_counts_as_missing(self):
        with patch.dict(os.environ, {"FINNHUB_API_KEY": "   "}, clear=True):
            settings = Settings.from_env()

        self.assertIsNone(settings.FINNHUB_API_KEY)

    def test_defaults(self):
        with patch.dict(os.environ, {"FINNHUB_API_KEY": "fh-key"}, clear=True):
            settings = Settings.from_env()

        self.assertEqual(settings.require_api_key(), "fh-key")
        self.assertEqual(settings.FINNHUB_BASE_URL, "https://finnhub.io/api/v1")
        self.assertEqual(settings.FINNHUB_TIMEOUT_SEC, 5.0)
        self.assertEqual(settings.QUOTE_BATCH_SIZE, 10)
        self.assertEqual(settings.QUOTE_BATCH_DELAY_MS, 200)
        self.assertEqual(settings.batch_delay_sec, 0.2)

    def test_overrides_are_parsed(self):
        env = {
            "FINNHUB_API_KEY": "fh-key",
            "FINNHUB_BASE_URL": "https://example.test/v1",
            "FINNHUB_TIMEOUT_SEC": "2.5",
            "QUOTE_BATCH_SIZE": "5",
            "QUOTE_BATCH_DELAY_MS": "0",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings.from_env()

        self.assertEqual(settings.FINNHUB_BASE_URL, "https://example.test/v1")
        self.assertEqual(settings.FINNHUB_TIMEOUT_SEC, 2.5)
        self.assertEqual(settings.QUOTE_BATCH_SIZE, 5)
        self.assertEqual(settings.batch_delay_sec, 0.0)

    def test_invalid_numeric_values_fail_validation(self):
        for env in (
            {"QUOTE_BATCH_SIZE": "0"},
            {"QUOTE_BATCH_SIZE": "ten"},
            {"FINNHUB_TIMEOUT_SEC": "0"},
            {"QUOTE_BATCH_DELAY_MS": "-1"},
        ):
            with patch.dict(os.environ, env, clear=True):
                with self.assertRaises(ValidationError, msg=env):
                    Settings.from_env()


if __name__ == "__main__":
    unittest.main()
