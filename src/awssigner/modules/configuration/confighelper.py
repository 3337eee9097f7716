import os

from ..logger.logger import get_logger
from .configurationerror import ConfigurationError
from .credentialsreader import CredentialsReader
from .environmentreader import EnvironmentReader


class ConfigHelper(object):
    """
    The configuration helper is responsible for obtaining credentials and region from number
    of sources based on predefined configuration precedence.

    The configuration precedence from highest to lowest:
    1. Values passed explicitly
    2. Environment Variables
    3. Credentials file

    Keyword arguments:
    region -- the explicitly provided region (default None)
    credentials -- the explicitly provided AWSCredentials (default None)
    config_path -- the path to the credentials file (default value of AWS_SIGNER_CONFIG_FILE, if set)
    environ -- the environment mapping to read from (default os.environ)
    """

    _LOGGER = get_logger(__name__)
    CONFIG_PATH_VARIABLE = "AWS_SIGNER_CONFIG_FILE"

    def __init__(self, region=None, credentials=None, config_path=None, environ=None):
        self._environ = os.environ if environ is None else environ
        self._config_path = config_path or self._environ.get(self.CONFIG_PATH_VARIABLE)
        self.credentials = credentials
        self.region = region or ''
        self._load_configuration()

    def _load_configuration(self):
        """ Try and load configuration based on the predefined precedence """
        if not self.credentials or not self.region:
            self._load_from(EnvironmentReader(self._environ))
        if (not self.credentials or not self.region) and self._config_path:
            self._load_from(CredentialsReader(self._config_path))
        self._check_configuration_integrity()

    def _load_from(self, reader):
        if not self.credentials and reader.credentials:
            self.credentials = reader.credentials
        if not self.region and reader.region:
            self.region = reader.region

    def _check_configuration_integrity(self):
        """ Check the state of this configuration helper object to ensure that all required values are loaded """
        if not self.credentials:
            self._raise("AWS credentials are missing.")
        if not self.credentials.access_key:
            self._raise("AWS access key is missing.")
        if not self.credentials.secret_key:
            self._raise("AWS secret key is missing.")
        if not self.region:
            self._raise("Region is missing.")

    def _raise(self, msg):
        self._LOGGER.error(msg)
        raise ConfigurationError(msg)
