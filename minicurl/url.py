# -*- coding: utf-8 -*-
"""
minicurl/url
~~~~~~~~~~~~

Parses request URLs and reports what is wrong with the bad ones.

The heavy lifting of splitting a URI into its components is done by
``rfc3986``. The authority is then checked by hand so that a bad IPv6
literal, a bad IPv4 address and a bad port each raise their own exception
class rather than a single generic "invalid authority".
"""
import ipaddress
import logging
import re
from collections import namedtuple

import rfc3986
from rfc3986 import validators

from minicurl.common.exceptions import (
    URLParseError, InvalidIPv4AddressError, InvalidIPv6AddressError,
    InvalidPortError
)

log = logging.getLogger(__name__)

ParsedURL = namedtuple('ParsedURL', ['scheme', 'host', 'port'])

_PORT_RE = re.compile(r'^[0-9]+$')
_NUMERIC_LABEL_RE = re.compile(r'^(?:[0-9]+|0[xX][0-9a-fA-F]*)$')
_MAX_PORT = 65535
_IPV4_DIGITS = {
    8: re.compile(r'^[0-7]+$'),
    10: re.compile(r'^[0-9]+$'),
    16: re.compile(r'^[0-9a-fA-F]+$'),
}


def parse_url(url):
    """
    Parses an absolute URL into a :class:`ParsedURL`.

    :param url: The URL as given on the command line.
    :returns: A :class:`ParsedURL`. ``host`` has any IPv6 brackets removed,
        numeric IPv4 hosts are given in dotted-quad form and ``port`` is an
        ``int`` or ``None``.
    :raises URLParseError: (or one of its subclasses) if the URL is not
        usable.
    """
    reference = rfc3986.uri_reference(url)

    if not reference.scheme:
        raise URLParseError('relative URL without a base')

    if not reference.authority:
        raise URLParseError('empty host')

    hostport = reference.authority.rpartition('@')[2]
    host, port = _split_host_port(hostport)

    parsed = ParsedURL(
        scheme=reference.scheme,
        host=host,
        port=port,
    )
    log.debug("Parsed %s as %r", url, parsed)
    return parsed


def _split_host_port(hostport):
    if hostport.startswith('['):
        end = hostport.find(']')
        if end == -1:
            raise InvalidIPv6AddressError('invalid IPv6 address')

        host = hostport[1:end]
        rest = hostport[end + 1:]
        if rest and not rest.startswith(':'):
            raise InvalidPortError('invalid port number')

        _check_ipv6(host)
        return host, _parse_port(rest[1:])

    host, _, port = hostport.partition(':')
    if not host:
        raise URLParseError('empty host')

    if _ends_in_number(host):
        host = _parse_ipv4(host)
    elif not validators.host_is_valid(_to_ascii(host)):
        raise URLParseError('invalid domain character')

    return host, _parse_port(port)


def _to_ascii(host):
    # rfc3986 only knows ASCII reg-names, so internationalised hosts are
    # checked in their IDNA form.
    try:
        return host.encode('idna').decode('ascii')
    except UnicodeError:
        return host


def _parse_port(port):
    # An empty port after the colon is the same as no port at all.
    if not port:
        return None

    if not _PORT_RE.match(port) or int(port) > _MAX_PORT:
        raise InvalidPortError('invalid port number')

    return int(port)


def _ends_in_number(host):
    labels = host.split('.')
    if len(labels) > 1 and labels[-1] == '':
        labels.pop()

    return bool(_NUMERIC_LABEL_RE.match(labels[-1]))


def _parse_ipv4_part(part):
    if part[:2] in ('0x', '0X'):
        digits, base = part[2:] or '0', 16
    elif len(part) > 1 and part.startswith('0'):
        digits, base = part[1:], 8
    else:
        digits, base = part, 10

    if not _IPV4_DIGITS[base].match(digits):
        raise InvalidIPv4AddressError('invalid IPv4 address')

    return int(digits, base)


def _parse_ipv4(host):
    """
    Parses a numeric host the way browsers do: one to four dot-separated
    parts, each decimal, octal (leading ``0``) or hex (leading ``0x``), the
    last part filling all the remaining bytes. ``127.1``, ``2130706433`` and
    ``0x7f.0.0.1`` all mean ``127.0.0.1``.
    """
    parts = host.split('.')
    if len(parts) > 1 and parts[-1] == '':
        parts.pop()

    if len(parts) > 4 or '' in parts:
        raise InvalidIPv4AddressError('invalid IPv4 address')

    numbers = [_parse_ipv4_part(part) for part in parts]
    last = numbers.pop()
    if any(n > 255 for n in numbers) or last >= 256 ** (4 - len(numbers)):
        raise InvalidIPv4AddressError('invalid IPv4 address')

    address = last
    for i, n in enumerate(numbers):
        address += n << (8 * (3 - i))

    return str(ipaddress.IPv4Address(address))


def _check_ipv6(host):
    try:
        ipaddress.IPv6Address(host)
    except ValueError:
        raise InvalidIPv6AddressError('invalid IPv6 address')
