# -*- coding: utf-8 -*-
"""
minicurl/planner
~~~~~~~~~~~~~~~~

Turns the parsed command line into a request shape: the scheme guard, URL
validation, the resolution probe and the choice between GET, form POST and
JSON POST.
"""
import logging
import socket
from collections import namedtuple

from minicurl.common.exceptions import (
    CLIError, InvalidIPv4AddressError, InvalidIPv6AddressError,
    InvalidJSONError, InvalidPortError, URLParseError
)
from minicurl.common.util import (
    loads_strict, split_form_data, to_host_port_tuple
)
from minicurl.url import parse_url

log = logging.getLogger(__name__)

GetRequest = namedtuple('GetRequest', ['url'])
PostFormRequest = namedtuple('PostFormRequest', ['url', 'pairs'])
PostJsonRequest = namedtuple('PostJsonRequest', ['url', 'body'])

_SCHEME_PREFIXES = ('http://', 'https://')

# Exception class, fallback text to look for in the message, diagnostic.
_URL_ERRORS = [
    (InvalidIPv6AddressError, 'invalid IPv6 address',
     'The URL contains an invalid IPv6 address.'),
    (InvalidIPv4AddressError, 'invalid IPv4 address',
     'The URL contains an invalid IPv4 address.'),
    (InvalidPortError, 'invalid port number',
     'The URL contains an invalid port number.'),
]


def check_scheme(url):
    """
    Rejects URLs that do not start with ``http://`` or ``https://``. The test
    is on the raw string and is case-sensitive.
    """
    if not url.startswith(_SCHEME_PREFIXES):
        raise CLIError('The URL does not have a valid base protocol.')


def describe_url_error(error):
    """
    Maps a URL parse error to the message shown to the user.
    """
    text = str(error)
    for error_class, fragment, message in _URL_ERRORS:
        if isinstance(error, error_class) or fragment in text:
            return message

    return text


def probe_host(host, port):
    """
    Checks that ``host`` resolves. The addresses are thrown away: this exists
    only to fail early with a friendlier message than the HTTP client's.
    """
    log.debug("Resolving %s:%d", host, port)
    try:
        addresses = socket.getaddrinfo(host, port, 0, socket.SOCK_STREAM)
    except (OSError, UnicodeError) as e:
        log.debug("Resolution of %s failed: %s", host, e)
        raise CLIError(
            'Unable to connect to the server. Perhaps the network is offline '
            'or the server hostname cannot be resolved.'
        )

    log.debug("%s resolved to %d address(es)", host, len(addresses))


def plan_request(args):
    """
    Validates ``args.url`` and builds the request shape for ``args``.

    :param args: The namespace returned by
        :func:`minicurl.cli.parse_argument`. ``args.method`` must already be
        the effective method.
    :returns: A :class:`GetRequest`, :class:`PostFormRequest` or
        :class:`PostJsonRequest`.
    :raises CLIError: for anything the user should be told about.
    :raises InvalidJSONError: if ``args.json`` does not parse.
    """
    url = args.url
    check_scheme(url)

    try:
        parsed = parse_url(url)
    except URLParseError as e:
        raise CLIError(describe_url_error(e))

    if parsed.host:
        probe_host(*to_host_port_tuple(parsed.host, parsed.port,
                                       parsed.scheme))

    if args.json is not None:
        try:
            loads_strict(args.json)
        except ValueError as e:
            raise InvalidJSONError('Invalid JSON: Error("%s")' % e)

        return PostJsonRequest(url, args.json)

    if args.method == 'POST':
        if args.data is None:
            raise CLIError(
                'POST method requires data to be specified with -d.'
            )

        return PostFormRequest(url, split_form_data(args.data))

    return GetRequest(url)
