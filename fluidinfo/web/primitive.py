"""Classification of request payloads.

Fluidinfo stores primitive values (C{None}, booleans, numbers, strings and
lists of strings) verbatim.  Anything else has to be sent as JSON to an
endpoint that understands it, or with an explicit MIME type.
"""

from fluidinfo.util.constant import Constant


class _Undefined(object):
    """The type of L{UNDEFINED}."""

    def __repr__(self):
        return 'UNDEFINED'

    def __bool__(self):
        return False


# Marks the absence of a payload.  C{None} can't be used for this because
# it's a perfectly good primitive value (JSON C{null}).
UNDEFINED = _Undefined()


class PayloadKind(object):
    """The kinds of payload a request can carry."""

    UNDEFINED = Constant(1, 'UNDEFINED')
    SCALAR = Constant(2, 'SCALAR')
    STRING_LIST = Constant(3, 'STRING_LIST')
    STRUCTURED = Constant(4, 'STRUCTURED')


_scalarTypes = (type(None), bool, int, float, str)
_sequenceTypes = (list, tuple, set, frozenset)


def classifyPayload(value):
    """Decide what kind of payload C{value} is.

    @param value: Any value, or L{UNDEFINED}.
    @return: A L{PayloadKind} constant.
    """
    if value is UNDEFINED:
        return PayloadKind.UNDEFINED
    if isinstance(value, _scalarTypes):
        return PayloadKind.SCALAR
    if isinstance(value, _sequenceTypes):
        if all(isinstance(item, str) for item in value):
            return PayloadKind.STRING_LIST
    return PayloadKind.STRUCTURED


def isPrimitive(value):
    """Determine if C{value} is a Fluidinfo primitive value.

    @param value: Any value, or L{UNDEFINED}.
    @return: C{True} if C{value} can be stored verbatim, otherwise C{False}.
    """
    return classifyPayload(value) is not PayloadKind.STRUCTURED
