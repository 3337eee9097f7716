from ..awscredentials import AWSCredentials
from ..logger.logger import get_logger
from .configurationerror import ConfigurationError
from .readerutils import ReaderUtils


class CredentialsReader(object):
    """
    The credentials file reader class that is responsible for reading and parsing file containing AWS credentials.

    The credentials file is a simple text file in format:
    aws_access_key_id = value
    aws_secret_access_key = value2

    Accepted configuration parameters:
    aws_access_key_id -- the AWS access ID used to build AWSCredentials object
    aws_secret_access_key -- the AWS secret key used to build AWSCredentials object
    aws_session_token -- the optional session token
    region -- the region used for signing

    Keyword arguments:
    creds_path -- the path for the credentials file to be parsed (Required)
    """

    _LOGGER = get_logger(__name__)
    _ACCESS_CONFIG_KEY = "aws_access_key_id"
    _SECRET_CONFIG_KEY = "aws_secret_access_key"
    _TOKEN_CONFIG_KEY = "aws_session_token"
    _REGION_CONFIG_KEY = "region"

    def __init__(self, creds_path):
        self.creds_path = creds_path
        self.credentials = None
        self.region = ''
        try:
            self.reader_utils = ReaderUtils(creds_path)
        except IOError as e:
            self._LOGGER.warning("Cannot read AWS credentials from file. Cause: " + str(e))
            return
        try:
            self._parse_credentials_file()
        except (IOError, ValueError) as e:
            raise CredentialsReaderException("Cannot parse credentials file at: " + creds_path + ". Cause: " + str(e))

    def _parse_credentials_file(self):
        access_key = self.reader_utils.get_string(self._ACCESS_CONFIG_KEY)
        secret_key = self.reader_utils.get_string(self._SECRET_CONFIG_KEY)
        if bool(access_key) != bool(secret_key):
            raise CredentialsReaderException("Access key or secret key is missing in the credentials file.")
        if access_key and secret_key:
            self.credentials = AWSCredentials(access_key, secret_key, self.reader_utils.get_string(self._TOKEN_CONFIG_KEY))
        self.region = self.reader_utils.get_string(self._REGION_CONFIG_KEY)


class CredentialsReaderException(ConfigurationError):
    pass
