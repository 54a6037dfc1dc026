"""
Reference resolution as described in RFC 3986, section 5.

- 'remove_dot_segments()' implements the "remove_dot_segments" algorithm
  (section 5.2.4) on whole path segments.
- 'to_absolute()' implements the "transform references" algorithm
  (sections 5.2.2 and 5.3) on top of 'split()' and 'join()'.
"""

import logging
from typing import Optional

from pyurl.url import _assert_string, join, split

__all__ = ['remove_dot_segments', 'to_absolute']

log = logging.getLogger(__name__)


def remove_dot_segments(path: str) -> str:
    """
    Removes dot segments ('.' and '..') from a URL path,
    as described in https://www.ietf.org/rfc/rfc3986.txt (page 33).

    Empty segments are dropped as well, a '..' above the root is ignored.
    A leading '/' is kept, and a trailing '/' is kept or added when the
    path ends in a directory ('/', '/.' or '/..').

    The path is split on characters, not octets, so a multi-byte character
    is never cut in half.

    :param path: the path to remove dot segments from.

    :return: the path with dot segments removed.
    """
    _assert_string(path, 'path')

    in_segments = path.split('/')
    out_segments = []
    for segment in in_segments:
        if segment in ('', '.'):
            continue
        if segment == '..':
            if out_segments:
                out_segments.pop()
        else:
            out_segments.append(segment)

    out_path = '/'.join(out_segments)
    if path.startswith('/'):
        out_path = '/' + out_path

    # keep the path a directory if it named one
    if (out_path != '/' and len(in_segments) > 1 and
            in_segments[-1] in ('', '.', '..')):
        out_path += '/'

    return out_path


def to_absolute(base_url: str, relative_url: str) -> Optional[str]:
    """
    Resolves a relative URL against an absolute base URL.

    The base URL is typically the URL of a document and the relative URL
    a link found in it. An absolute relative_url is returned with its
    dot segments removed, the base being irrelevant. Both URLs are
    resolved in their encoded form, their percent-encoding is kept as is.

    The fragment of the base is never carried over.

    :param base_url: the absolute base URL, with a scheme and an authority
      ("http://www.example.com/a/b").
    :param relative_url: the URL to resolve.

    :return: the absolute URL, or None if either URL cannot be parsed or
      the base URL is not absolute.
    """
    _assert_string(base_url, 'base_url')
    _assert_string(relative_url, 'relative_url')

    r = split(relative_url, decode=False)
    if r is None:
        return None

    # already absolute
    if r.scheme:
        if r.path and r.path.startswith('/'):
            r = r._replace(path=remove_dot_segments(r.path))
        return join(r, encode=False)

    b = split(base_url, decode=False)
    if b is None or not b.scheme or b.host is None:
        log.debug('to_absolute: base %r is not an absolute URL', base_url)
        return None
    r = r._replace(scheme=b.scheme)

    # network-path reference, the base authority and path are discarded
    if r.host is not None:
        if r.path:
            r = r._replace(path=remove_dot_segments(r.path))
        return join(r, encode=False)

    # copy the base authority, a port or user info without a host is
    # meaningless
    r = r._replace(host=b.host, port=b.port, user=b.user, password=b.password)

    if not r.path:
        r = r._replace(path=b.path)
        if r.query is None:
            r = r._replace(query=b.query)
        return join(r, encode=False)

    path = r.path
    if not path.startswith('/'):
        # merge with everything up to the last '/' of the base path
        base_path = b.path.rpartition('/')[0] if b.path else ''
        path = base_path + '/' + path

    return join(r._replace(path=remove_dot_segments(path)), encode=False)
