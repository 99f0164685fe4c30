from fluidinfo.common import defaults
from fluidinfo.web.payloads import parseContentType, parseJSONPayload
from fluidinfo.web.util import buildHeader, getHeader


class Response(object):
    """The normalized result of an HTTP request.

    @param status: The C{int} HTTP status code.
    @param statusText: The reason phrase, such as C{Created}.
    @param headers: A C{dict} of response headers, with names in the case
        the transport provided them.
    @param data: The parsed JSON payload, the raw body for non-JSON
        responses or C{''}.
    @param rawData: The body exactly as it was received.
    @param request: An opaque handle on the underlying transport exchange.
    """

    def __init__(self, status, statusText, headers, data, rawData,
                 request=None):
        self.status = status
        self.statusText = statusText
        self.headers = headers
        self.data = data
        self.rawData = rawData
        self.request = request

    @property
    def ok(self):
        """C{True} if the request succeeded."""
        return 200 <= self.status < 300

    @property
    def errorClass(self):
        """The name of the Fluidinfo error class reported by the service.

        This is C{None} if the response didn't come with one.
        """
        return getHeader(self.headers, buildHeader('Error-Class'))

    def __repr__(self):
        return '<Response status=%d statusText=%r>' % (self.status,
                                                       self.statusText)


def _decodeBody(body, charset):
    if body is None:
        return ''
    if isinstance(body, str):
        return body
    try:
        return body.decode(charset or defaults.charset)
    except (UnicodeDecodeError, LookupError):
        # Opaque values are binary, so they stay as bytes.
        return body


def _isJSON(contentType):
    contentType = contentType.lower()
    return any(jsonType in contentType
               for jsonType in defaults.jsonContentTypes)


def normalizeResponse(status, statusText, headers, body, request=None):
    """Convert a raw transport response into a L{Response}.

    JSON payloads are parsed.  A payload that claims to be JSON but is
    empty or malformed results in C{''} data, while any other payload is
    left as the raw body text.

    @param status: The HTTP status code.
    @param statusText: The reason phrase.
    @param headers: A C{dict} of response headers.
    @param body: The response payload as C{str} or C{bytes}, or C{None}.
    @param request: Optionally, the handle for the transport exchange.
    @return: A L{Response} instance.
    """
    headers = dict(headers or {})
    contentType = getHeader(headers, 'Content-Type')
    if not isinstance(contentType, str):
        contentType = ''
    _, charset = parseContentType(contentType)
    rawData = _decodeBody(body, charset)
    if _isJSON(contentType):
        if isinstance(rawData, str):
            data = parseJSONPayload(rawData)
        else:
            data = ''
    else:
        data = rawData
    return Response(int(status), statusText or '', headers, data, rawData,
                    request)
