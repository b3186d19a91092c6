# -*- coding: utf-8 -*-
"""
minicurl/cli
~~~~~~~~~~~~

Command line interface for minicurl.
"""
import argparse
import logging
import sys

from minicurl import __version__
from minicurl.common.exceptions import CLIError
from minicurl.planner import plan_request
from minicurl.render import render_body
from minicurl.transport import check_status, send

log = logging.getLogger('minicurl')

_ARGUMENT_DEFAULTS = {
    'data': None,
    'json': None,
    'method': 'GET',
    'verbose': False,
}


def parse_argument(argv=None):
    parser = argparse.ArgumentParser(prog='minicurl')
    parser.set_defaults(**_ARGUMENT_DEFAULTS)

    # positional arguments
    parser.add_argument('url', metavar='URL', help='set url to request')

    # optional arguments
    parser.add_argument(
        '-X', '--request', dest='method',
        help='set http method (default: GET)')
    parser.add_argument(
        '-d', '--data',
        help='send form data (k=v&k=v) in a POST request')
    parser.add_argument(
        '--json',
        help='send a JSON body in a POST request')
    parser.add_argument(
        '-v', '--verbose', action='store_true',
        help='set verbose mode (loglevel=DEBUG)')
    parser.add_argument(
        '--version', action='version',
        version='%(prog)s {}'.format(__version__))

    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    # A JSON body always goes out as a POST.
    if args.json is not None:
        args.method = 'POST'
    else:
        args.method = args.method.upper()

    return args


def echo_arguments(args):
    print('Requesting URL: %s' % args.url)
    print('Method: %s' % args.method)
    if args.data is not None:
        print('Data: %s' % args.data)
    if args.json is not None:
        print('JSON: %s' % args.json)


def request(args):
    shape = plan_request(args)
    response = send(shape)
    check_status(response)
    return response


def main(argv=None):
    args = parse_argument(argv)
    if args.verbose:
        handler = logging.StreamHandler()
        handler.setLevel(logging.DEBUG)
        log.addHandler(handler)
        log.setLevel(logging.DEBUG)

    echo_arguments(args)

    try:
        response = request(args)
        print(render_body(response.text))
    except CLIError as e:
        print('Error: %s' % e)
        sys.exit(1)


if __name__ == '__main__':
    main()
