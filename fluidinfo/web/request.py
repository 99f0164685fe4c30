from base64 import b64encode

from fluidinfo.common import defaults
from fluidinfo.web.payloads import negotiate
from fluidinfo.web.primitive import UNDEFINED
from fluidinfo.web.url import buildURL


class RequestOptions(object):
    """The caller-supplied description of a request.

    @param path: A C{str} path or a sequence of path segments, relative to
        the session's base URL.
    @param args: Optionally, a mapping of query argument names to a value
        or a sequence of values.
    @param data: Optionally, the payload.  L{UNDEFINED} means there's no
        payload, C{None} is sent as JSON C{null}.
    @param contentType: Optionally, an explicit MIME type for C{data}.
    """

    def __init__(self, path, args=None, data=UNDEFINED, contentType=None):
        self.path = path
        self.args = {} if args is None else args
        self.data = data
        self.contentType = contentType


class Request(object):
    """A transport-agnostic description of an HTTP request.

    @param method: The HTTP method, such as C{GET}.
    @param url: The fully encoded URL.
    @param headers: A C{dict} of header names to values.
    @param body: The C{bytes} payload or C{None}.
    """

    def __init__(self, method, url, headers, body=None):
        self.method = method
        self.url = url
        self.headers = headers
        self.body = body

    def __repr__(self):
        return '<Request method=%s url=%s>' % (self.method, self.url)


def getAuthorizationHeader(username, password):
    """Build an HTTP Basic C{Authorization} header value."""
    credentials = '%s:%s' % (username, password or '')
    encoded = b64encode(credentials.encode(defaults.charset))
    return 'Basic %s' % encoded.decode('ascii')


def buildRequest(session, method, options):
    """Build a L{Request} for C{session}.

    @param session: A L{Session} providing the base URL and credentials.
    @param method: The HTTP method to use.
    @param options: A L{RequestOptions} instance.
    @raise InvalidBaseURL: Raised if the session's base URL is unusable.
    @raise UnknownContentType: Raised if a content type can't be inferred
        for the payload.
    @return: A L{Request} ready to be passed to a transport.
    """
    method = method.upper()
    url = buildURL(session.baseURL, options.path, options.args)
    headers = {}
    body = None
    if method not in defaults.methodsWithoutPayload:
        payload = negotiate(options.path, options.data, options.contentType)
        if payload.contentType is not None:
            headers['Content-Type'] = payload.contentType
        body = payload.body
    if session.isAuthenticated:
        headers['Authorization'] = getAuthorizationHeader(session.username,
                                                          session.password)
    return Request(method, url, headers, body)
