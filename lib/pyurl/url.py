"""
Splitting and joining of URL references as described in RFC 3986.

.. module:: url
  :synopsis: RFC 3986 component split and recomposition

A URL reference is decomposed into the components of a
:class:`UrlComponents` tuple. Each component is either absent (``None``)
or present, possibly as the empty string: ``http://a?`` has an empty
query, ``http://a`` has none.
"""

import ipaddress
import logging
import re
from collections import namedtuple
from urllib.parse import quote, unquote

__all__ = ['UrlComponents', 'split', 'join']

log = logging.getLogger(__name__)


UrlComponents = namedtuple(
    'UrlComponents',
    ['scheme', 'host', 'port', 'user', 'password', 'path', 'query',
     'fragment'],
    defaults=(None,) * 8)
UrlComponents.__doc__ = """
The components of a URL reference.

Every field is a string or None. "port" may also be an int when the
tuple is built by hand for join(). "user", "password" and "port" are only
used when "host" is not None.
"""


# character sets from RFC 3986
_UNRESERVED_SUB_DELIMS = r"a-zA-Z0-9\-._~!$&'()*+,;="
_PCHAR = _UNRESERVED_SUB_DELIMS + r':@%'

_SCHEME = r'(?P<scheme>[a-zA-Z][a-zA-Z0-9+\-.]*)'

# user info, the password may itself contain ':'
_USERINFO = (
    r'(?P<userinfo>(?P<user>[' + _UNRESERVED_SUB_DELIMS + r'%]*)'
    r'(?P<colon>:(?P<password>[' + _UNRESERVED_SUB_DELIMS + r':%]*))?@)')

# IPv4 without range checks, IPv6 from RFC 2732 without grouping checks
_IPV4 = r'(?P<ipv4>[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3})'
_IPV6 = r'\[(?P<ipv6>[a-fA-F0-9.:]+)\]'

# host names may start with a digit here, name validation is left to the
# application
_HOST_NAME = r'(?P<name>[a-zA-Z0-9\-.%]+)'

# IP-future is not supported
_HOST = '(?:' + _IPV4 + '|' + _IPV6 + '|' + _HOST_NAME + ')'
_PORT = r'(?P<port_sep>:(?P<port>[0-9]*))'
_AUTHORITY = _USERINFO + '?' + _HOST + '?' + _PORT + '?'

# the three path forms are mutually exclusive alternatives
_PATH_ABEMPTY = r'(?P<abempty>(?:/[' + _PCHAR + r']*)*)'
_PATH_AUTHORITY = r'(?P<slashes>//)' + _AUTHORITY + _PATH_ABEMPTY
_PATH_ABSOLUTE = (
    r'(?P<absolute>/(?:[' + _PCHAR + r']+(?:/[' + _PCHAR + r']*)*)?)')
_PATH_ROOTLESS = (
    r'(?P<rootless>[' + _PCHAR + r']+(?:/[' + _PCHAR + r']*)*)')
_PATH = (
    '(?:' + _PATH_AUTHORITY + '|' + _PATH_ABSOLUTE + '|' +
    _PATH_ROOTLESS + ')')

_QUERY_FRAGMENT_CHARS = '[' + _PCHAR + '/?]*'

_URL = re.compile(
    '(?:' + _SCHEME + ':)?' + _PATH + '?' +
    r'(?:\?(?P<query>' + _QUERY_FRAGMENT_CHARS + '))?' +
    r'(?:#(?P<fragment>' + _QUERY_FRAGMENT_CHARS + '))?')


def split(url, decode=True):
    """
    Parses an absolute or relative URL and splits it into its components.

    The URL has to match the URI-reference grammar of RFC 3986::

        URI-reference = URI / relative-ref
        URI           = scheme ":" hier-part [ "?" query ] [ "#" fragment ]
        relative-ref  = relative-part [ "?" query ] [ "#" fragment ]
        hier-part     = "//" authority path-abempty / path-absolute
                        / path-rootless / path-empty
        authority     = [ userinfo "@" ] host [ ":" port ]

    The grammar is deliberately permissive: host names are not validated
    and a bare path is a valid reference. IPv6 hosts are returned without
    their brackets.

    :param url: the URL to parse.
    :param decode: True to percent-decode the "user", "password", "path",
      "query", "fragment" and, if it is a name rather than an IP address,
      the "host" component (default: True). The "scheme" and "port" never
      contain percent-encoded characters.

    :return: the UrlComponents of the URL, or None if the URL does not
      match the grammar.
    """
    _assert_string(url, 'url')

    m = _URL.fullmatch(url)
    if m is None:
        log.debug('split: %r does not match the URL grammar', url)
        return None

    parts = {}
    if m.group('scheme'):
        parts['scheme'] = m.group('scheme').lower()

    if m.group('userinfo') is not None:
        parts['user'] = m.group('user')
        if m.group('colon') is not None:
            parts['password'] = m.group('password')

    if m.group('name') is not None:
        parts['host'] = m.group('name')
    elif m.group('ipv4') is not None:
        parts['host'] = m.group('ipv4')
    elif m.group('ipv6') is not None:
        parts['host'] = m.group('ipv6')
    elif m.group('slashes') is not None:
        parts['host'] = ''
    if m.group('port_sep') is not None:
        parts['port'] = m.group('port')

    # an empty path is reported as absent
    path = m.group('abempty') or m.group('absolute') or m.group('rootless')
    if path:
        parts['path'] = path

    if m.group('query') is not None:
        parts['query'] = m.group('query')
    if m.group('fragment') is not None:
        parts['fragment'] = m.group('fragment')

    if decode:
        for key in ('user', 'password', 'path', 'query', 'fragment'):
            if parts.get(key):
                parts[key] = _decode(parts[key])
        # IP literals are never decoded
        if m.group('name') is not None:
            parts['host'] = _decode(parts['host'])

    return UrlComponents(**parts)


def join(parts, encode=True):
    """
    Joins URL components together to form a complete URL.

    This implements the "component recomposition" algorithm of RFC 3986.
    The "port", "user" and "password" components are only used when a
    "host" is present; an IPv6 host is wrapped in brackets.

    :param parts: the UrlComponents to join. A dict keyed by component
      name ("pass" is accepted for "password") or a sequence in
      UrlComponents field order is converted first.
    :param encode: True to percent-encode the "user", "password", "host"
      (if it is a name, not an IP address), "path", "query" and
      "fragment" components (default: True). The "/" separators of the
      path are left alone. "scheme" and "port" are never encoded.

    :return: the assembled URL; absolute if a scheme is given, relative if
      not, and the empty string if no component is present.
    """
    parts = _as_components(parts)

    if encode:
        changes = {}
        for key in ('user', 'password', 'query', 'fragment'):
            value = getattr(parts, key)
            if value is not None:
                changes[key] = _encode(value)
        if parts.host is not None and _ip_address(parts.host) is None:
            changes['host'] = _encode(parts.host)
        if parts.path:
            changes['path'] = _encode(parts.path, safe='/')
        parts = parts._replace(**changes)

    rval = ''
    if parts.scheme:
        rval += parts.scheme + ':'
    if parts.host is not None:
        rval += '//'
        if parts.user is not None:
            rval += parts.user
            if parts.password is not None:
                rval += ':' + parts.password
            rval += '@'
        if isinstance(_ip_address(parts.host, brackets=False),
                      ipaddress.IPv6Address):
            rval += '[' + parts.host + ']'
        else:
            rval += parts.host
        if parts.port is not None:
            rval += ':' + str(parts.port)
        if parts.path and not parts.path.startswith('/'):
            rval += '/'
    if parts.path:
        rval += parts.path
    if parts.query is not None:
        rval += '?' + parts.query
    if parts.fragment is not None:
        rval += '#' + parts.fragment
    return rval


def _as_components(parts):
    if isinstance(parts, UrlComponents):
        return parts
    if isinstance(parts, dict):
        parts = dict(parts)
        if 'pass' in parts:
            parts.setdefault('password', parts.pop('pass'))
        return UrlComponents(**parts)
    if isinstance(parts, (list, tuple)):
        return UrlComponents(*parts)
    raise TypeError(
        'URL components must be UrlComponents, a dict or a sequence, '
        'not %s' % type(parts).__name__)


def _ip_address(host, brackets=True):
    # an IPv4 or IPv6 literal, optionally in brackets, or None for a name
    if brackets and host.startswith('[') and host.endswith(']'):
        host = host[1:-1]
    try:
        return ipaddress.ip_address(host)
    except ValueError:
        return None


def _decode(value):
    # surrogateescape keeps octets that are not UTF-8 so that _encode()
    # restores them
    return unquote(value, errors='surrogateescape')


def _encode(value, safe=''):
    return quote(value, safe=safe, errors='surrogateescape')


def _assert_string(value, name):
    if not isinstance(value, str):
        raise TypeError(
            '%s must be a str, not %s' % (name, type(value).__name__))
