"""Transports execute L{Request}s built by L{fluidinfo.web.request}.

The rest of the package never talks to the network directly, it hands
requests to an L{ITransport} provider.  L{HTTPTransport} is the default
provider: it uses a Twisted C{Agent} for asynchronous requests and
C{httplib2} for blocking ones.
"""

from io import BytesIO

import httplib2
from twisted.python import log
from twisted.web.client import FileBodyProducer
from twisted.web.http_headers import Headers
from zope.interface import Interface, implementer

from fluidinfo.common import error
from fluidinfo.util.agent import ResponseConsumer


class ITransport(Interface):
    """Something that can execute a L{Request}."""

    def execute(request):
        """Execute C{request}, blocking until the response arrives.

        @param request: A L{Request} instance.
        @raise TransportError: Raised if the exchange fails before a
            response is received.
        @return: A L{RawResponse} instance.
        """

    def executeAsync(request):
        """Execute C{request} without blocking.

        @param request: A L{Request} instance.
        @return: A C{Deferred} that fires with a L{RawResponse}, or errbacks
            if the exchange fails before a response is received.
        """


class RawResponse(object):
    """A response as received by a transport.

    @param status: The C{int} HTTP status code.
    @param statusText: The reason phrase.
    @param headers: A C{dict} of header names to values.
    @param body: The response payload, as C{bytes} or C{str}.
    @param request: The transport's own handle for the exchange.
    """

    def __init__(self, status, statusText, headers, body, request=None):
        self.status = status
        self.statusText = statusText
        self.headers = headers
        self.body = body
        self.request = request


def logRequest(request):
    """Log the details of C{request}, without its credentials."""
    log.msg('Method: %s' % request.method)
    log.msg('URI: %s' % request.url)
    headers = dict(request.headers)
    if 'Authorization' in headers:
        headers['Authorization'] = '<sanitized>'
    log.msg('Headers: %r' % headers)
    if request.body is not None:
        log.msg('Payload: %r' % request.body)


def getResponseHeaders(headers):
    """Convert Twisted C{Headers} into a C{dict}.

    Multiple values for the same header are joined with commas.
    """
    result = {}
    for name, values in headers.getAllRawHeaders():
        if isinstance(name, bytes):
            name = name.decode('latin-1')
        values = [value.decode('latin-1') if isinstance(value, bytes)
                  else value for value in values]
        result[name] = ', '.join(values)
    return result


@implementer(ITransport)
class HTTPTransport(object):
    """Execute requests over HTTP.

    @param agent: Optionally, the Twisted C{Agent} used by
        L{executeAsync}.  One using the global reactor is created when
        it's first needed.
    @param http: Optionally, the C{httplib2.Http} instance used by
        L{execute}.
    """

    def __init__(self, agent=None, http=None):
        self._agent = agent
        self._http = http

    @property
    def agent(self):
        if self._agent is None:
            from twisted.internet import reactor
            from twisted.web.client import Agent

            self._agent = Agent(reactor)
        return self._agent

    @property
    def http(self):
        if self._http is None:
            self._http = httplib2.Http()
        return self._http

    def execute(self, request):
        """Execute C{request} with C{httplib2}, blocking until it's done.

        @param request: A L{Request} instance.
        @raise TransportError: Raised if no response could be received.
        @return: A L{RawResponse} instance.
        """
        logRequest(request)
        try:
            response, content = self.http.request(
                request.url, request.method, body=request.body,
                headers=request.headers)
        except (httplib2.HttpLib2Error, OSError) as e:
            log.msg('Failed.')
            log.err(e)
            raise error.TransportError(request, str(e))
        # httplib2 puts the status code among the headers.
        headers = dict((name, value) for name, value in response.items()
                       if name != 'status')
        return RawResponse(response.status, response.reason, headers,
                           content, response)

    def executeAsync(self, request):
        """Execute C{request} with a Twisted C{Agent}.

        @param request: A L{Request} instance.
        @return: A C{Deferred} that fires with a L{RawResponse}.
        """
        logRequest(request)
        headers = Headers()
        for name, value in request.headers.items():
            headers.setRawHeaders(name.encode('ascii'),
                                  [value.encode('latin-1')])
        bodyProducer = None
        if request.body is not None:
            bodyProducer = FileBodyProducer(BytesIO(request.body))
        deferred = self.agent.request(request.method.encode('ascii'),
                                      request.url.encode('utf-8'), headers,
                                      bodyProducer)

        def readBody(response):
            consumer = ResponseConsumer()
            response.deliverBody(consumer)

            def buildResponse(body):
                phrase = response.phrase
                if isinstance(phrase, bytes):
                    phrase = phrase.decode('latin-1')
                return RawResponse(response.code, phrase,
                                   getResponseHeaders(response.headers),
                                   body, response)

            return consumer.deferred.addCallback(buildResponse)

        def logFailure(failure):
            log.msg('Failed.')
            log.err(failure)
            return failure

        return deferred.addCallback(readBody).addErrback(logFailure)
