import os
import unittest

from mock import MagicMock, Mock

from awssigner.modules.configuration.readerutils import ReaderUtils


class ReaderUtilsTest(unittest.TestCase):
    CONFIG_DIR = os.path.join(os.path.dirname(__file__), "config_files")
    VALID_CREDENTIALS_FILE_FULL = os.path.join(CONFIG_DIR, "valid_credentials_file_full")
    VALID_CREDENTIALS_FILE_WITH_WHITESPACES = os.path.join(CONFIG_DIR, "valid_credentials_file_with_whitespaces")
    INVALID_CREDENTIALS_FILE_WITH_SYNTAX_ERROR = os.path.join(CONFIG_DIR, "invalid_credentials_file_with_syntax_error")
    MISSING_CONFIG = os.path.join(CONFIG_DIR, "no_config")

    def setUp(self):
        self.logger = MagicMock()
        self.logger.error = Mock()
        ReaderUtils._LOGGER = self.logger

    def test_get_string_with_quotes_and_comments(self):
        reader = ReaderUtils(self.VALID_CREDENTIALS_FILE_FULL)
        self.assertEqual("valid_access_key", reader.get_string("aws_access_key_id"))
        self.assertEqual("valid_secret_key", reader.get_string("aws_secret_access_key"))
        self.assertEqual("valid_region", reader.get_string("region"))

    def test_get_string_with_white_spaces(self):
        reader = ReaderUtils(self.VALID_CREDENTIALS_FILE_WITH_WHITESPACES)
        self.assertEqual("valid_access_key", reader.get_string("aws_access_key_id"))
        self.assertEqual("valid_secret_key", reader.get_string("aws_secret_access_key"))

    def test_missing_key_returns_empty_string(self):
        reader = ReaderUtils(self.VALID_CREDENTIALS_FILE_FULL)
        self.assertEqual("", reader.get_string("unknown_key"))

    def test_syntax_error_raises_value_error(self):
        reader = ReaderUtils(self.INVALID_CREDENTIALS_FILE_WITH_SYNTAX_ERROR)
        with self.assertRaises(ValueError):
            reader.get_string("aws_secret_access_key")
        self.assertTrue(self.logger.error.called)

    def test_missing_file_raises_io_error(self):
        with self.assertRaises(IOError):
            ReaderUtils(self.MISSING_CONFIG)
