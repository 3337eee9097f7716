from collections import namedtuple

from .awsutils import get_aws_timestamp, to_utc, utc_now

V4_TERMINATOR = "aws4_request"


class SigningContext(namedtuple("SigningContext", ["region", "service", "timestamp"])):
    """
    The signing context holds the values which scope a single signature.

    Keyword arguments:
    region -- the AWS region the request is sent to
    service -- the AWS service name, e.g. dynamodb
    timestamp -- the signing instant, defaults to the current time (UTC, second precision)
    """
    __slots__ = ()

    def __new__(cls, region, service, timestamp=None):
        timestamp = to_utc(timestamp) if timestamp else utc_now()
        return super(SigningContext, cls).__new__(cls, region, service, timestamp)

    @property
    def amz_date(self):
        return get_aws_timestamp(self.timestamp)

    @property
    def datestamp(self):
        return self.amz_date[:8]

    @property
    def credential_scope(self):
        """ Builds credential scope string used in the string to sign and the Authorization header """
        return self.datestamp + '/' + self.region + '/' + self.service + '/' + V4_TERMINATOR
