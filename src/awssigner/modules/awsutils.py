from datetime import datetime, timezone

AWS_TIMESTAMP_FORMAT = '%Y%m%dT%H%M%SZ'


def utc_now():
    """ Returns the current instant as a timezone aware UTC datetime truncated to whole seconds """
    return to_utc(datetime.now(timezone.utc))


def to_utc(timestamp):
    """
    Converts a datetime to UTC with second precision. Naive datetimes are assumed to be UTC already.
    """
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    return timestamp.astimezone(timezone.utc).replace(microsecond=0)


def get_aws_timestamp(timestamp=None):
    """
    Returns timestamp expressed in the format YYYYMMDDThhmmssZ,
    as specified in the ISO 8601 standard.
    """
    return to_utc(timestamp or utc_now()).strftime(AWS_TIMESTAMP_FORMAT)
