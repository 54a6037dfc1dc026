#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
pyurl - CLI script for PyURL
"""
import json
import logging
import sys

import pyurl

log = logging.getLogger()


def split_url(url, options):
    """
    Split a URL and generate a JSON string of its components

    :param url: the URL to split
    :param options: options dict
    :returns: JSON string, or None if the URL cannot be parsed
    :rtype: str
    """
    log.debug("split_url: %r, %r" % (url, options))
    parts = pyurl.split(url, decode=options.get('decode', True))
    if parts is None:
        return None

    # absent components are left out
    output = dict((k, v) for k, v in parts._asdict().items() if v is not None)
    return json.dumps(output, indent=options.get('indent', 1))


def join_url(options):
    """
    Join the components given as options into a URL

    :param options: options dict
    :returns: URL string
    :rtype: str
    """
    log.debug("join_url: %r" % (options,))
    parts = pyurl.UrlComponents(
        *(options.get(field) for field in pyurl.UrlComponents._fields))
    return pyurl.join(parts, encode=options.get('encode', True))


def main(*argv):
    """
    pyurl main function
    """
    import argparse

    prs = argparse.ArgumentParser(
        prog="pyurl",
        description="Split, join, normalize and resolve URLs (RFC 3986)",
    )
    prs.add_argument('-v', '--verbose',
                     dest='verbose',
                     action='store_true',)
    prs.add_argument('-q', '--quiet',
                     dest='quiet',
                     action='store_true',)
    prs.add_argument('--indent',
                     help='split: indent JSON output by N spaces',
                     dest='indent',
                     type=int,
                     default=1)

    subprs = prs.add_subparsers(dest='action', metavar='ACTION')
    subprs.required = True

    split_prs = subprs.add_parser('split',
                                  help='Print the components of a URL')
    split_prs.add_argument('url')
    split_prs.add_argument('--no-decode',
                           help='Keep components percent-encoded',
                           dest='decode',
                           action='store_false',
                           default=True)

    join_prs = subprs.add_parser('join',
                                 help='Build a URL from its components')
    for field in pyurl.UrlComponents._fields:
        join_prs.add_argument('--' + field,
                              dest=field,
                              action='store',
                              default=None)
    join_prs.add_argument('--no-encode',
                          help='Do not percent-encode components',
                          dest='encode',
                          action='store_false',
                          default=True)

    normalize_prs = subprs.add_parser(
        'normalize', help='Remove dot segments from a path')
    normalize_prs.add_argument('path')

    resolve_prs = subprs.add_parser(
        'resolve', help='Resolve a reference against a base URL')
    resolve_prs.add_argument('base')
    resolve_prs.add_argument('reference')

    if not argv:
        _argv = sys.argv[1:]
    else:
        _argv = list(argv)
    opts = prs.parse_args(args=_argv)

    if not opts.quiet:
        logging.basicConfig()

        if opts.verbose:
            logging.getLogger().setLevel(logging.DEBUG)

    if opts.action == 'split':
        output = split_url(opts.url, {
            'decode': opts.decode,
            'indent': opts.indent,
        })
        if output is None:
            log.error("cannot parse URL %r" % opts.url)
            return 1

    elif opts.action == 'join':
        options = dict(
            (field, getattr(opts, field))
            for field in pyurl.UrlComponents._fields)
        options['encode'] = opts.encode
        output = join_url(options)

    elif opts.action == 'normalize':
        output = pyurl.remove_dot_segments(opts.path)

    else:
        output = pyurl.to_absolute(opts.base, opts.reference)
        if output is None:
            log.error("cannot resolve %r against %r" % (
                opts.reference, opts.base))
            return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:]))
