import json

from fluidinfo.common.defaults import (
    contentTypeForJSON, contentTypeForPrimitiveJSON)


def buildHeader(name):
    return "X-FluidDB-%s" % name


def getHeader(headers, name):
    """Get a header value, ignoring the case of its name.

    @param headers: A C{dict} of header names to values.
    @param name: The name of the header to find.
    @return: The header value or C{None} if the header isn't present.
    """
    name = name.lower()
    for key, value in headers.items():
        if key.lower() == name:
            return value


def _serializeToJSON(value):
    if isinstance(value, (set, frozenset, tuple)):
        value = list(value)
    return json.dumps(value)


payloadSerializer = {
    contentTypeForPrimitiveJSON: _serializeToJSON,
    contentTypeForJSON: _serializeToJSON,
}
