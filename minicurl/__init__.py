# -*- coding: utf-8 -*-
"""
minicurl
~~~~~~~~

A minimal command-line HTTP client: one request, light validation and
key-sorted JSON output.
"""
__version__ = '0.1.0'

from .planner import (
    GetRequest, PostFormRequest, PostJsonRequest, plan_request
)
from .transport import Response, send
from .render import render_body

__all__ = [
    'GetRequest', 'PostFormRequest', 'PostJsonRequest', 'Response',
    'plan_request', 'render_body', 'send',
]

# Set default logging handler.
import logging
logging.getLogger(__name__).addHandler(logging.NullHandler())
