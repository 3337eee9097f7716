import re
import os

from ..logger.logger import get_logger


class ReaderUtils(object):
    """
    Reads values from simple configuration files in format:
    key = value
    key2 = "value2"
    """

    _LOGGER = get_logger(__name__)
    _COMMENT_CHARACTER = '#'

    def __init__(self, path):
        self.path = path
        if not os.path.exists(path):
            raise IOError("Configuration file does not exist at: " + path)

    def get_string(self, key):
        return self._find_value_by_key(key)

    def _find_value_by_key(self, key):
        config_list = self._load_config_as_list(self.path)
        for entry in config_list:
            entry = entry.strip()
            if not entry or entry[0] == self._COMMENT_CHARACTER:
                continue  # skip empty and commented lines
            if '=' not in entry:
                self._LOGGER.error("Cannot read configuration entry: " + entry)
                raise ValueError("Invalid syntax for entry '" + entry + "'.")
            entry_key, entry_value = entry.split('=', 1)
            if entry_key.strip() == key:
                return self._strip_quotes(entry_value.strip()).strip()
        return ""

    def _strip_quotes(self, string):
        return re.sub(r"^'|'$|^\"|\"$", '', string)

    def _load_config_as_list(self, path):
        """
        Reads the configuration file and returns it as a list of lines
        """
        with open(path) as config_file:
            return config_file.read().split('\n')
