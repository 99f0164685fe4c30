import logging

from fluidinfo.api.query import (
    CreateObject, Delete, GetObject, Query, Tag, Update)
from fluidinfo.common import defaults, error
from fluidinfo.web.primitive import UNDEFINED
from fluidinfo.web.request import RequestOptions, buildRequest
from fluidinfo.web.response import Response, normalizeResponse
from fluidinfo.web.transport import HTTPTransport
from fluidinfo.web.url import checkBaseURL


def getFailedResponse(request, message):
    """Build the L{Response} delivered when a transport fails.

    @param request: The L{Request} that couldn't be completed.
    @param message: A description of the failure.
    @return: A L{Response} with a C{0} status code.
    """
    return Response(0, message, {}, '', '', request)


class Session(object):
    """A connection to a Fluidinfo instance.

    A session is read-only once it's created, so it can be shared by any
    number of concurrent calls.

    @param baseURL: Optionally, the absolute URL of the Fluidinfo instance,
        ending in a slash.  The main instance is used by default.
    @param username: Optionally, the name of the user to authenticate as.
        The session is anonymous if it isn't provided.
    @param password: Optionally, the password for C{username}.
    @param transport: Optionally, the L{ITransport} provider used to
        execute requests.  An L{HTTPTransport} is used by default.
    @raise InvalidBaseURL: Raised if C{baseURL} is not acceptable.
    """

    def __init__(self, baseURL=None, username=None, password=None,
                 transport=None):
        if baseURL is None:
            baseURL = defaults.instances[defaults.defaultInstance]
        self._baseURL = checkBaseURL(baseURL)
        self._username = username
        self._password = password
        self._transport = HTTPTransport() if transport is None else transport
        self._api = API(self)

    @property
    def baseURL(self):
        return self._baseURL

    @property
    def username(self):
        return self._username

    @property
    def password(self):
        return self._password

    @property
    def transport(self):
        return self._transport

    @property
    def api(self):
        """The L{API} for making direct calls to REST endpoints."""
        return self._api

    @property
    def isAuthenticated(self):
        """C{True} if requests are sent with credentials."""
        return self._username is not None

    def request(self, method, path, args=None, data=UNDEFINED,
                contentType=None, onSuccess=None, onError=None, async_=True):
        """Make a request to the Fluidinfo instance.

        @param method: The HTTP method to use.
        @param path: A C{str} path or a sequence of path segments.
        @param args: Optionally, a mapping of query arguments.
        @param data: Optionally, the payload to send.
        @param contentType: Optionally, an explicit MIME type for C{data}.
        @param onSuccess: Optionally, a function called with the L{Response}
            if the request succeeds.
        @param onError: Optionally, a function called with the L{Response}
            if the request fails.
        @param async_: C{True} by default, in which case a C{Deferred} that
            fires with the L{Response} is returned.  If it's C{False} the
            call blocks and returns the L{Response} without calling
            C{onSuccess} or C{onError}.
        @raise BadArgument: Raised if the request can't be built.
        """
        options = RequestOptions(path, args=args, data=data,
                                 contentType=contentType)
        return self._execute(method, options, onSuccess, onError, async_)

    def call(self, call, onSuccess=None, onError=None, async_=True):
        """Make the request described by a L{ValuesCall}.

        @param call: A L{ValuesCall} instance.
        @raise AuthorizationError: Raised if C{call} requires credentials
            and this session is anonymous.
        """
        if call.requiresAuthentication and not self.isAuthenticated:
            raise error.AuthorizationError(
                'You must be logged in to use %s.' % type(call).__name__)
        return self._execute(call.method, call.getRequestOptions(),
                             onSuccess, onError, async_, call.processResult)

    def query(self, select=None, where=None, **kwargs):
        """Get tag values from the objects that match a query.

        The L{Response} data is a C{list} of C{dict}s mapping tag paths to
        values, each with the object's C{id}.
        """
        return self.call(Query(select, where), **kwargs)

    def update(self, values=None, where=None, **kwargs):
        """Set tag values on the objects that match a query."""
        return self.call(Update(values, where), **kwargs)

    def tag(self, values=None, id=None, about=None, **kwargs):
        """Set tag values on the object with the given id or about value."""
        return self.call(Tag(values, id=id, about=about), **kwargs)

    def delete(self, tags=None, where=None, **kwargs):
        """Remove tag values from the objects that match a query."""
        return self.call(Delete(tags, where), **kwargs)

    def getObject(self, select=None, id=None, about=None, **kwargs):
        """Get tag values from the object with the given id or about value.

        The L{Response} data is a single C{dict} mapping tag paths to values.
        Its C{id} is C{None} if no object matched.
        """
        return self.call(GetObject(select, id=id, about=about), **kwargs)

    def createObject(self, about=None, **kwargs):
        """Create an object, with an about value if one is given."""
        return self.call(CreateObject(about), **kwargs)

    def _execute(self, method, options, onSuccess, onError, async_,
                 processResult=None):
        request = buildRequest(self, method, options)
        if not async_:
            try:
                rawResponse = self._transport.execute(request)
            except error.TransportError as e:
                response = getFailedResponse(request, e.message)
            else:
                response = self._normalize(rawResponse)
            response, _ = self._process(request, response, processResult)
            return response

        def handleFailure(failure):
            return getFailedResponse(request, failure.getErrorMessage())

        deferred = self._transport.executeAsync(request)
        deferred.addCallbacks(self._normalize, handleFailure)
        deferred.addCallback(self._dispatch, request, processResult,
                             onSuccess, onError)
        return deferred

    def _normalize(self, rawResponse):
        return normalizeResponse(rawResponse.status, rawResponse.statusText,
                                 rawResponse.headers, rawResponse.body,
                                 rawResponse.request)

    def _process(self, request, response, processResult):
        """Post-process a normalized L{Response}.

        @return: A C{(response, succeeded)} 2-tuple.  A successful response
            whose result can't be processed is returned unchanged, with
            C{succeeded} set to C{False}.
        """
        if not response.ok:
            logging.info('%s %s failed: %d %s', request.method, request.url,
                         response.status, response.statusText)
            return response, False
        if processResult is not None:
            try:
                response = processResult(response, self._baseURL)
            except error.UnexpectedResult as e:
                logging.info('%s %s returned an unexpected result: %s',
                             request.method, request.url, e)
                return response, False
        return response, True

    def _dispatch(self, response, request, processResult, onSuccess,
                  onError):
        response, succeeded = self._process(request, response,
                                            processResult)
        if succeeded:
            if onSuccess is not None:
                onSuccess(response)
        elif onError is not None:
            onError(response)
        return response


class API(object):
    """Direct access to the Fluidinfo REST API.

    Each method takes the same arguments as L{Session.request}, apart from
    the HTTP method.

    @param session: The L{Session} to make requests with.
    """

    def __init__(self, session):
        self._session = session

    def get(self, path, **kwargs):
        return self._session.request('GET', path, **kwargs)

    def post(self, path, **kwargs):
        return self._session.request('POST', path, **kwargs)

    def put(self, path, **kwargs):
        return self._session.request('PUT', path, **kwargs)

    def delete(self, path, **kwargs):
        return self._session.request('DELETE', path, **kwargs)

    def head(self, path, **kwargs):
        return self._session.request('HEAD', path, **kwargs)
