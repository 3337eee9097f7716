import os

from ..awscredentials import AWSCredentials


class EnvironmentReader(object):
    """
    Reads credentials and region from the process environment.

    Accepted variables:
    AWS_ACCESS_KEY_ID -- the AWS access key ID
    AWS_SECRET_ACCESS_KEY -- the AWS secret key
    AWS_SESSION_TOKEN -- the optional session token
    AWS_REGION -- the region, AWS_DEFAULT_REGION is used when it is not set

    Keyword arguments:
    environ -- the mapping to read from (default os.environ)
    """
    ACCESS_KEY_VARIABLE = "AWS_ACCESS_KEY_ID"
    SECRET_KEY_VARIABLE = "AWS_SECRET_ACCESS_KEY"
    SESSION_TOKEN_VARIABLE = "AWS_SESSION_TOKEN"
    REGION_VARIABLES = ("AWS_REGION", "AWS_DEFAULT_REGION")

    def __init__(self, environ=None):
        self.environ = os.environ if environ is None else environ
        self.credentials = self._read_credentials()
        self.region = self._read_region()

    def _read_credentials(self):
        access_key = self.environ.get(self.ACCESS_KEY_VARIABLE)
        secret_key = self.environ.get(self.SECRET_KEY_VARIABLE)
        if access_key and secret_key:
            return AWSCredentials(access_key, secret_key, self.environ.get(self.SESSION_TOKEN_VARIABLE))
        return None

    def _read_region(self):
        for variable in self.REGION_VARIABLES:
            if self.environ.get(variable):
                return self.environ[variable]
        return ''
