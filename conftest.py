# -*- coding: utf-8 -*-
import socket

import pytest

_PROXY_VARIABLES = (
    'http_proxy', 'HTTP_PROXY', 'https_proxy', 'HTTPS_PROXY',
    'all_proxy', 'ALL_PROXY',
)


@pytest.fixture(autouse=True)
def no_proxies(monkeypatch):
    """
    Keeps requests from routing the socket-level tests through a proxy
    configured in the environment.
    """
    for name in _PROXY_VARIABLES:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def resolvable(monkeypatch):
    """
    Makes every host resolve, recording the ``(host, port)`` pairs that the
    resolution probe asked about.
    """
    probed = []

    def getaddrinfo(host, port, *args, **kwargs):
        probed.append((host, port))
        return [(socket.AF_INET, socket.SOCK_STREAM, 6, '',
                 ('127.0.0.1', port))]

    monkeypatch.setattr('minicurl.planner.socket.getaddrinfo', getaddrinfo)
    return probed


@pytest.fixture
def unresolvable(monkeypatch):
    """
    Makes every host fail to resolve.
    """
    def getaddrinfo(host, port, *args, **kwargs):
        raise socket.gaierror(socket.EAI_NONAME, 'Name or service not known')

    monkeypatch.setattr('minicurl.planner.socket.getaddrinfo', getaddrinfo)
