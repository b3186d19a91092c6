# -*- coding: utf-8 -*-
"""
minicurl/render
~~~~~~~~~~~~~~~

Formats a response body for the terminal.
"""
import json
from collections import OrderedDict

from minicurl.common.exceptions import CLIError
from minicurl.common.util import loads_strict

#: Containers nested this deep are shown as text.
_MAX_DEPTH = 128

JSON_HEADER = 'Response body (JSON with sorted keys):'
TEXT_HEADER = 'Response body:'


def sort_json_object(value):
    """
    Returns a copy of a decoded JSON object with its top-level keys in
    codepoint order. Nested values are left alone. Anything that is not an
    object becomes an empty object.
    """
    if not isinstance(value, dict):
        return OrderedDict()

    return OrderedDict((key, value[key]) for key in sorted(value))


def _nesting_depth(value):
    depth = 0
    stack = [(value, 1)]
    while stack:
        item, level = stack.pop()
        if isinstance(item, dict):
            children = item.values()
        elif isinstance(item, list):
            children = item
        else:
            continue

        depth = max(depth, level)
        stack.extend((child, level + 1) for child in children)

    return depth


def load_body(text):
    """
    Decodes a response body as JSON, raising ``ValueError`` for anything that
    should be shown as text instead: invalid JSON, nesting deeper than
    ``_MAX_DEPTH`` and strings holding lone surrogates, which cannot be
    written out as UTF-8.
    """
    try:
        value = loads_strict(text)
    except RecursionError:
        raise ValueError('recursion limit exceeded')

    if _nesting_depth(value) >= _MAX_DEPTH:
        raise ValueError('recursion limit exceeded')

    # UnicodeEncodeError is a ValueError.
    json.dumps(value, ensure_ascii=False).encode('utf-8')
    return value


def render_body(text):
    """
    Renders a decoded response body.

    If ``text`` is JSON it is shown pretty-printed with its top-level keys
    sorted; otherwise it is shown as-is with trailing whitespace removed.
    """
    try:
        value = load_body(text)
    except ValueError:
        return '%s\n%s' % (TEXT_HEADER, text.rstrip())

    try:
        pretty = json.dumps(
            sort_json_object(value), indent=2, ensure_ascii=False
        )
    except (TypeError, ValueError) as e:
        raise CLIError('Failed to format JSON: %s' % e)

    return '%s\n%s' % (JSON_HEADER, pretty)
