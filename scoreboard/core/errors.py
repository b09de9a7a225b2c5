"""
Upstream error types raised by the ESPN client
"""


class UpstreamError(Exception):
    """Base class for failures talking to the statistics API"""

    def __init__(self, message, url=None):
        super().__init__(message)
        self.message = message
        self.url = url


class UpstreamHTTPError(UpstreamError):
    """The API answered with a non-2xx status"""

    def __init__(self, message, url=None, status_code=None, reason=''):
        super().__init__(message, url=url)
        self.status_code = status_code
        self.reason = reason


class UpstreamUnavailable(UpstreamError):
    """The API could not be reached (DNS, connect, timeout)"""


class UpstreamResponseError(UpstreamError):
    """The API answered but the body is not what we expect"""
