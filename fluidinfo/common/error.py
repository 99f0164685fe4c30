class Error(Exception):
    pass


class BadArgument(Error, ValueError):
    """Raised when a caller passes malformed or missing input."""


class InvalidBaseURL(BadArgument):

    def __init__(self, url):
        self.url = url

    def __str__(self):
        return ('%r is not an absolute http:// or https:// URL ending in '
                'a slash.' % (self.url,))


class MissingArgument(BadArgument):

    def __init__(self, argument, message=None):
        self.argument = argument
        self.message = message

    def __str__(self):
        if self.message:
            return self.message
        return 'Missing required argument %r.' % (self.argument,)


class UnknownContentType(BadArgument):

    def __init__(self, path, data):
        self.path = path
        self.data = data

    def __str__(self):
        return ('Unable to infer a content type for %r sent to %r.  Pass '
                'an explicit content type.' % (self.data, self.path))


class UnknownInstance(BadArgument):

    def __init__(self, instance):
        self.instance = instance

    def __str__(self):
        return 'Unknown Fluidinfo instance %r.' % (self.instance,)


class AuthorizationError(Error):
    """Raised when an operation requires an authenticated session."""

    def __init__(self, message):
        self.message = message

    def __str__(self):
        return self.message


class TransportError(Error):
    """Raised when a request couldn't be completed by a transport."""

    def __init__(self, request, message):
        self.request = request
        self.message = message

    def __str__(self):
        return self.message


class UnexpectedResult(Error):

    def __init__(self, message):
        self.message = message

    def __str__(self):
        return self.message
