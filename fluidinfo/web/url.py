from urllib.parse import quote, urlsplit

from fluidinfo.common import error
from fluidinfo.common.defaults import charset, sep


def checkBaseURL(url):
    """Ensure C{url} can be used as the root of every request.

    @param url: The candidate base URL.
    @raise InvalidBaseURL: Raised if C{url} isn't an absolute C{http} or
        C{https} URL with a host and a trailing slash.
    @return: C{url}, unchanged.
    """
    if not isinstance(url, str):
        raise error.InvalidBaseURL(url)
    parts = urlsplit(url)
    if (parts.scheme not in ('http', 'https') or not parts.netloc or
            not url.startswith(parts.scheme + '://') or
            not url.endswith('/')):
        raise error.InvalidBaseURL(url)
    return url


def encodeComponent(value):
    """Percent-encode a single URL component.

    Every reserved character is escaped, including C{/}, and a space
    becomes C{%20}.
    """
    if isinstance(value, bool):
        value = 'true' if value else 'false'
    elif not isinstance(value, (str, bytes)):
        value = str(value)
    return quote(value, safe='', encoding=charset)


def encodePath(path):
    """Encode a request path.

    @param path: Either a C{str} path, whose slashes separate segments, or
        a sequence of segments that are encoded individually.
    @return: The encoded path, without a leading slash.
    """
    if isinstance(path, str):
        segments = path.lstrip(sep).split(sep)
    else:
        segments = path
    return sep.join(encodeComponent(segment) for segment in segments)


def encodeArgs(args):
    """Encode query arguments.

    @param args: A mapping of argument names to a single value or a
        sequence of values.  A sequence produces one repeated argument per
        value, in order.
    @return: The encoded query string, without the leading C{?}.
    """
    pairs = []
    for key, values in args.items():
        if not isinstance(values, (list, tuple)):
            values = [values]
        encodedKey = encodeComponent(key)
        for value in values:
            pairs.append('%s=%s' % (encodedKey, encodeComponent(value)))
    return '&'.join(pairs)


def buildURL(base, path, args=None):
    """Build the URL for a request.

    @param base: The absolute base URL, ending in a slash.
    @param path: A C{str} path or a sequence of path segments.
    @param args: Optionally, a mapping of query arguments.
    @raise InvalidBaseURL: Raised if C{base} is not acceptable.
    @return: The fully encoded URL.
    """
    url = checkBaseURL(base) + encodePath(path)
    if args:
        query = encodeArgs(args)
        if query:
            url = '%s?%s' % (url, query)
    return url
