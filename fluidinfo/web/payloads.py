import json
import logging
import re

from fluidinfo.common import defaults, error
from fluidinfo.web.primitive import UNDEFINED, PayloadKind, classifyPayload
from fluidinfo.web.url import encodePath
from fluidinfo.web.util import payloadSerializer

CONTENT_TYPE_RE = re.compile(
    r'\s*([\w\d.+-]+/[\w\d.+-]+)\s*(?:;?\s*charset=([\w\d-]+);?)?',
    re.UNICODE)


class Payload(object):
    """The outbound body of a request.

    @param contentType: The C{Content-Type} to send, or C{None} if the
        request has no body.
    @param body: The C{bytes} to send, or C{None}.
    """

    def __init__(self, contentType, body):
        self.contentType = contentType
        self.body = body

    def __repr__(self):
        return '<Payload contentType=%r body=%r>' % (self.contentType,
                                                     self.body)


def isValueEndpoint(path):
    """Determine if C{path} addresses a single tag value.

    @param path: A C{str} path or a sequence of path segments.
    @return: C{True} if the path is under C{objects/} or C{about/}.
    """
    encodedPath = encodePath(path)
    for category in defaults.valueEndpointCategories:
        if encodedPath.startswith(category + defaults.sep):
            return True
    return False


def _encodeVerbatim(data):
    if data is UNDEFINED:
        return b''
    if isinstance(data, bytes):
        return data
    if not isinstance(data, str):
        data = str(data)
    return data.encode(defaults.charset)


def buildPayload(contentType, data):
    builder = payloadSerializer[contentType]
    return builder(data).encode(defaults.charset)


def negotiate(path, data, contentType=None):
    """Determine the C{Content-Type} and body to send with a request.

    @param path: The request path, as a C{str} or a sequence of segments.
    @param data: The payload, or L{UNDEFINED} if there isn't one.
    @param contentType: Optionally, an explicit MIME type.  When it's
        provided C{data} is sent as-is.
    @raise UnknownContentType: Raised if C{data} isn't primitive, no
        explicit content type is given and C{path} is a value endpoint.
    @return: A L{Payload} instance.
    """
    if contentType is not None:
        return Payload(contentType, _encodeVerbatim(data))

    kind = classifyPayload(data)
    if kind is PayloadKind.UNDEFINED:
        return Payload(None, None)
    if isValueEndpoint(path):
        if kind is PayloadKind.STRUCTURED:
            raise error.UnknownContentType(path, data)
        contentType = defaults.contentTypeForPrimitiveJSON
    else:
        contentType = defaults.contentTypeForJSON
    return Payload(contentType, buildPayload(contentType, data))


def parseContentType(value):
    """Split a C{Content-Type} header into a MIME type and a charset.

    @param value: The header value or C{None}.
    @return: A C{(mimeType, charset)} 2-tuple.  The MIME type is lower case
        and either part may be C{None}.
    """
    if not value:
        return None, None
    match = CONTENT_TYPE_RE.match(value)
    if match is None:
        return None, None
    mimeType, charset = match.groups()
    return mimeType.lower(), charset


def parseJSONPayload(data):
    """Parse a JSON response payload.

    @param data: The C{str} payload.
    @return: The decoded value, or C{''} if C{data} is empty or isn't valid
        JSON.
    """
    if not data:
        return ''
    try:
        return json.loads(data)
    except ValueError:
        logging.info('Ignoring malformed JSON payload: %r', data[:200])
        return ''
