"""Helpers that translate simple declarative calls into C{/values} requests.

Each helper class checks its arguments when it's created, so mistakes are
reported before any request is built, and describes the request to make
with its C{method}, C{path}, C{args} and C{data} attributes.  Successful
responses can be post-processed with L{ValuesCall.processResult}.
"""

from fluidinfo.api.results import flattenMany, flattenSingle
from fluidinfo.common import defaults, error
from fluidinfo.web.primitive import UNDEFINED, isPrimitive
from fluidinfo.web.request import RequestOptions


def _isMissing(value):
    return value is None or (isinstance(value, (str, list, tuple)) and
                             not value)


def _checkRequired(name, value):
    if _isMissing(value):
        raise error.MissingArgument(name)
    return value


def _checkTagPaths(name, paths):
    _checkRequired(name, paths)
    if isinstance(paths, str):
        return [paths]
    return list(paths)


def _checkValues(values):
    if values is None:
        raise error.MissingArgument('values')
    if not isinstance(values, dict):
        raise error.BadArgument('Values must be a mapping of tag paths to '
                                'values, got %r.' % (values,))
    for path, value in values.items():
        if value is UNDEFINED or not isPrimitive(value):
            raise error.BadArgument(
                'The value for %r is not a primitive value: %r.'
                % (path, value))
    return values


def getObjectQuery(id=None, about=None):
    """Build a query that matches a single object.

    @param id: Optionally, the ID of the object.
    @param about: Optionally, the about value of the object.
    @raise MissingArgument: Raised if neither C{id} nor C{about} is
        provided.  Empty strings count as missing.
    @raise BadArgument: Raised if both are provided.
    @return: A query such as C{fluiddb/about="foo"}.
    """
    if _isMissing(id):
        id = None
    if _isMissing(about):
        about = None
    if id is None and about is None:
        raise error.MissingArgument(
            'id', 'Either an id or an about value must be provided.')
    if id is not None and about is not None:
        raise error.BadArgument(
            'Only one of id and about may be provided.')
    if id is not None:
        return '%s="%s"' % (defaults.idTagPath, id)
    return '%s="%s"' % (defaults.aboutTagPath, about)


def buildUpdatePayload(where, values):
    """Build the payload for a C{PUT} to C{/values}.

    @param where: The query matching the objects to update.
    @param values: A C{dict} mapping tag paths to primitive values.
    @return: A C{dict} ready to be encoded as JSON.
    """
    tagsAndValues = {}
    for path, value in values.items():
        if isinstance(value, (set, frozenset, tuple)):
            value = list(value)
        tagsAndValues[path] = {defaults.valueKey: value}
    return {defaults.queriesKey: [[where, tagsAndValues]]}


class ValuesCall(object):
    """Base class for the helpers.

    @ivar method: The HTTP method to use.
    @ivar path: The request path.
    @ivar args: A C{dict} of query arguments.
    @ivar data: The payload or L{UNDEFINED}.
    @ivar requiresAuthentication: C{True} if the call can't be made by an
        anonymous session.
    """

    method = None
    path = defaults.httpValueCategoryName
    requiresAuthentication = False

    def __init__(self):
        self.args = {}
        self.data = UNDEFINED

    def getRequestOptions(self):
        """Get the L{RequestOptions} describing this call."""
        return RequestOptions(self.path, args=self.args, data=self.data)

    def processResult(self, response, baseURL):
        """Post-process a successful L{Response}.

        @param response: The successful L{Response}.
        @param baseURL: The base URL of the session making the call.
        @return: The L{Response}, possibly with transformed data.
        """
        return response


class Query(ValuesCall):
    """Get tag values from the objects that match a query.

    @param select: A sequence of tag paths to fetch.
    @param where: The query matching the objects to fetch values from.
    """

    method = 'GET'

    def __init__(self, select=None, where=None):
        super(Query, self).__init__()
        self.select = _checkTagPaths('select', select)
        self.where = _checkRequired('where', where)
        self.args = {defaults.tagArg: self.select,
                     defaults.queryArg: self.where}

    def processResult(self, response, baseURL):
        response.data = flattenMany(response.data, baseURL)
        return response


class Update(ValuesCall):
    """Set tag values on the objects that match a query.

    @param values: A C{dict} mapping tag paths to primitive values.
    @param where: The query matching the objects to update.
    """

    method = 'PUT'

    def __init__(self, values=None, where=None):
        super(Update, self).__init__()
        self.values = _checkValues(values)
        self.where = _checkRequired('where', where)
        self.data = buildUpdatePayload(self.where, self.values)


class Tag(ValuesCall):
    """Set tag values on a single object.

    @param values: A C{dict} mapping tag paths to primitive values.
    @param id: Optionally, the ID of the object.
    @param about: Optionally, the about value of the object.  Exactly one of
        C{id} and C{about} must be provided.
    """

    method = 'PUT'

    def __init__(self, values=None, id=None, about=None):
        super(Tag, self).__init__()
        self.values = _checkValues(values)
        self.where = getObjectQuery(id, about)
        self.data = buildUpdatePayload(self.where, self.values)


class Delete(ValuesCall):
    """Remove tag values from the objects that match a query.

    @param tags: A sequence of the tag paths to remove.
    @param where: The query matching the objects to remove values from.
    """

    method = 'DELETE'

    def __init__(self, tags=None, where=None):
        super(Delete, self).__init__()
        self.tags = _checkTagPaths('tags', tags)
        self.where = _checkRequired('where', where)
        self.args = {defaults.tagArg: self.tags,
                     defaults.queryArg: self.where}


class GetObject(ValuesCall):
    """Get tag values from a single object.

    @param select: A sequence of tag paths to fetch.
    @param id: Optionally, the ID of the object.
    @param about: Optionally, the about value of the object.  Exactly one of
        C{id} and C{about} must be provided.
    """

    method = 'GET'

    def __init__(self, select=None, id=None, about=None):
        super(GetObject, self).__init__()
        self.select = _checkTagPaths('select', select)
        self.where = getObjectQuery(id, about)
        self.args = {defaults.tagArg: self.select,
                     defaults.queryArg: self.where}

    def processResult(self, response, baseURL):
        response.data = flattenSingle(response.data, baseURL)
        return response


class CreateObject(ValuesCall):
    """Create a new object.

    @param about: Optionally, the about value for the new object.  An
        anonymous object is created if it isn't provided.
    """

    method = 'POST'
    requiresAuthentication = True

    def __init__(self, about=None):
        super(CreateObject, self).__init__()
        self.about = about
        if about is None:
            self.path = defaults.httpObjectCategoryName
        else:
            self.path = [defaults.httpAboutCategoryName, about]

    def processResult(self, response, baseURL):
        result = {defaults.idKey: None}
        if isinstance(response.data, dict):
            result[defaults.idKey] = response.data.get(defaults.idKey)
        if self.about is not None:
            result[defaults.aboutTagPath] = self.about
        response.data = result
        return response
