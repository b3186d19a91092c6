# -*- coding: utf-8 -*-
"""
minicurl/common/exceptions
~~~~~~~~~~~~~~~~~~~~~~~~~~

Contains minicurl's exceptions.
"""
class CLIError(Exception):
    """
    A problem with the user's input or with the server's answer that ends the
    invocation cleanly. The message is printed after ``Error:``.
    """
    pass


class RequestFailedError(CLIError):
    """
    The server answered with a status code outside the 2xx range.
    """
    def __init__(self, status_code):
        self.status_code = status_code
        super(RequestFailedError, self).__init__(
            'Request failed with status code: %d.' % status_code
        )


class URLParseError(ValueError):
    """
    The URL could not be parsed.
    """
    pass


class InvalidIPv6AddressError(URLParseError):
    """
    The URL host is a bracketed literal that is not a valid IPv6 address.
    """
    pass


class InvalidIPv4AddressError(URLParseError):
    """
    The URL host looks numeric but is not a valid IPv4 address.
    """
    pass


class InvalidPortError(URLParseError):
    """
    The URL port is not a number between 0 and 65535.
    """
    pass


class InvalidJSONError(ValueError):
    """
    The ``--json`` argument is not valid JSON. Not a ``CLIError``: it
    propagates and aborts the process.
    """
    pass
