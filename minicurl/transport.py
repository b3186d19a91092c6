# -*- coding: utf-8 -*-
"""
minicurl/transport
~~~~~~~~~~~~~~~~~~

Hands a request shape to requests and brings back the response.
"""
import logging
from collections import namedtuple

import requests

from minicurl.common.exceptions import RequestFailedError
from minicurl.planner import PostFormRequest, PostJsonRequest

log = logging.getLogger(__name__)

#: ``status`` is the status code, ``body`` the raw bytes and ``text`` the
#: body decoded by requests using the response's charset (or its guess).
Response = namedtuple('Response', ['status', 'body', 'text'])

JSON_HEADERS = {'Content-Type': 'application/json'}


def send(shape):
    """
    Issues the single HTTP request described by ``shape``.

    Errors raised by requests (refused connections, TLS failures and so on)
    are not caught.
    """
    with requests.Session() as session:
        if isinstance(shape, PostJsonRequest):
            log.debug("POST %s (json, %d chars)", shape.url, len(shape.body))
            resp = session.post(
                shape.url,
                data=shape.body.encode('utf-8'),
                headers=JSON_HEADERS,
            )
        elif isinstance(shape, PostFormRequest):
            log.debug("POST %s (form, %d pairs)", shape.url, len(shape.pairs))
            resp = session.post(shape.url, data=shape.pairs)
        else:
            log.debug("GET %s", shape.url)
            resp = session.get(shape.url)

        response = Response(resp.status_code, resp.content, resp.text)

    log.debug("Received %d (%d bytes)", response.status, len(response.body))
    return response


def check_status(response):
    """
    Raises :class:`RequestFailedError` unless ``response`` has a 2xx status.
    """
    if not 200 <= response.status < 300:
        raise RequestFailedError(response.status)
