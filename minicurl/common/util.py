# -*- coding: utf-8 -*-
"""
minicurl/common/util
~~~~~~~~~~~~~~~~~~~~

General utility functions for use with minicurl.
"""
import json

#: Ports used by the resolution probe when the URL names none.
DEFAULT_PORTS = {
    'http': 80,
    'https': 443,
}


def default_port(scheme):
    """
    Returns the well-known port for ``scheme``, falling back to 80.
    """
    return DEFAULT_PORTS.get(scheme, 80)


def to_host_port_tuple(host, port, scheme):
    """
    Converts a parsed host and optional port to the tuple handed to the
    resolver, filling in the scheme's default port.
    """
    if port is None:
        port = default_port(scheme)

    return host, port


def split_form_data(data):
    """
    Splits ``k=v&k=v`` form data into an ordered list of ``(key, value)``
    tuples.

    Each token is split at its first ``=``. A token without ``=`` becomes a
    key with an empty value, and empty tokens are skipped. Nothing is
    percent-decoded: encoding is left to the HTTP client.
    """
    pairs = []

    for token in data.split('&'):
        if not token:
            continue

        key, _, value = token.partition('=')
        pairs.append((key, value))

    return pairs


def _reject_constant(name):
    raise ValueError('%s is not valid JSON' % name)


def loads_strict(text):
    """
    Parses ``text`` as JSON, refusing the ``NaN`` and ``Infinity`` extensions
    that the json module accepts by default.
    """
    return json.loads(text, parse_constant=_reject_constant)
