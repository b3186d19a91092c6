# -*- coding: utf-8 -*-
"""
test/server
~~~~~~~~~~~

This module defines some testing infrastructure that is very useful for
integration-type testing of minicurl. It works by spinning up background
threads that run test-defined logic while listening to a background thread.

The idea and most of its implementation come from Andrey Petrov's urllib3
project.
"""

import threading
import socket
import sys


def read_request(sock):
    """
    Reads one HTTP/1.1 request from ``sock`` and returns the head and body as
    bytes. Only ``Content-Length`` framing is understood, which is all the
    client under test sends.
    """
    data = b''
    while b'\r\n\r\n' not in data:
        chunk = sock.recv(65535)
        if not chunk:
            break
        data += chunk

    head, _, body = data.partition(b'\r\n\r\n')

    length = 0
    for line in head.split(b'\r\n')[1:]:
        name, _, value = line.partition(b':')
        if name.strip().lower() == b'content-length':
            length = int(value.strip())

    while len(body) < length:
        chunk = sock.recv(65535)
        if not chunk:
            break
        body += chunk

    return head, body


def build_response(status, body=b'', content_type=b'application/json'):
    """
    Builds a complete ``Connection: close`` HTTP/1.1 response.
    """
    return (
        b'HTTP/1.1 ' + status + b'\r\n'
        b'Server: socket-level-server\r\n'
        b'Content-Type: ' + content_type + b'\r\n'
        b'Content-Length: ' + str(len(body)).encode('ascii') + b'\r\n'
        b'Connection: close\r\n'
        b'\r\n' + body
    )


class SocketServerThread(threading.Thread):
    """
    :param socket_handler: Callable which receives a socket argument for one
        request.
    :param ready_event: Event which gets set when the socket handler is
        ready to receive requests.
    """
    def __init__(self, socket_handler, host='127.0.0.1', ready_event=None):
        threading.Thread.__init__(self)

        self.socket_handler = socket_handler
        self.host = host
        self.ready_event = ready_event
        self.daemon = True

    def _start_server(self):
        sock = socket.socket()
        if sys.platform != 'win32':
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)

        sock.bind((self.host, 0))
        self.port = sock.getsockname()[1]

        # Once listen() returns, the server socket is ready
        sock.listen(1)

        if self.ready_event:
            self.ready_event.set()

        self.socket_handler(sock)
        sock.close()

    def run(self):
        self.server = self._start_server()


class SocketLevelTest(object):
    """
    A test-class that defines a few helper methods for running socket-level
    tests.
    """
    def set_up(self):
        self.host = None
        self.port = None
        self.server_thread = None

    def _start_server(self, socket_handler):
        """
        Starts a background thread that runs the given socket handler.
        """
        ready_event = threading.Event()
        self.server_thread = SocketServerThread(
            socket_handler=socket_handler,
            ready_event=ready_event,
        )
        self.server_thread.start()
        ready_event.wait()

        self.host = self.server_thread.host
        self.port = self.server_thread.port

    def url(self, path='/'):
        return 'http://%s:%d%s' % (self.host, self.port, path)

    def tear_down(self):
        """
        Tears down the testing thread.
        """
        self.server_thread.join(0.1)
