from collections import namedtuple


class AWSCredentials(namedtuple("AWSCredentials", ["access_key", "secret_key", "token"])):
    """
    The AWSCredentials object encapsulates the credentials used for signing requests.
    Instances are immutable, a new object has to be built to change any of the values.

    Keyword arguments:
    access_key -- the AWS access key ID (default None)
    secret_key -- the AWS secret key, either a string or raw bytes (default None)
    token -- the temporary session token obtained through a call to
             AWS Security Token Service (default None)
    """
    __slots__ = ()

    def __new__(cls, access_key=None, secret_key=None, token=None):
        return super(AWSCredentials, cls).__new__(cls, access_key, secret_key, token or None)

    def __repr__(self):
        return "AWSCredentials(access_key=%r, secret_key=***, token=%s)" % (self.access_key, "***" if self.token else None)
