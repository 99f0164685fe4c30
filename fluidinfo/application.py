"""Logic needed to configure a Fluidinfo client."""

from configparser import RawConfigParser
from logging import getLogger, getLevelName, Formatter, StreamHandler, INFO
from logging.handlers import WatchedFileHandler
import sys

from twisted.python.log import PythonLoggingObserver

from fluidinfo.common import defaults, error
from fluidinfo.session import Session
from fluidinfo.web.url import checkBaseURL


__all__ = ['createSession', 'getBaseURL', 'getConfig', 'setConfig',
           'setupApplication', 'setupConfig', 'setupLogging',
           'setupSession', 'setupTwistedLogging']


_config = None


def getConfig():
    """Get the configuration.

    @return: A configuration instance or C{None} if one hasn't been
        registered.
    """
    return _config


def setConfig(config):
    """Set the configuration.

    @param: A configuration instance.
    """
    global _config
    _config = config


def getBaseURL(instance=None):
    """Resolve a Fluidinfo instance to its base URL.

    @param instance: Optionally, the name of a well-known instance, such as
        C{main} or C{sandbox}, or the absolute URL of any other instance.
        The main instance is used by default.
    @raise UnknownInstance: Raised if C{instance} isn't a known name or a
        URL.
    @raise InvalidBaseURL: Raised if C{instance} is a URL without an
        C{http://} or C{https://} scheme or a trailing slash.
    @return: The base URL.
    """
    if instance is None:
        instance = defaults.defaultInstance
    baseURL = defaults.instances.get(instance)
    if baseURL is not None:
        return baseURL
    if '://' in instance or defaults.sep in instance:
        return checkBaseURL(instance)
    raise error.UnknownInstance(instance)


def createSession(instance=None, username=None, password=None,
                  transport=None):
    """Create a L{Session}.

    @param instance: Optionally, the name or URL of the Fluidinfo instance
        to use.  The main instance is used by default.
    @param username: Optionally, the user to authenticate as.  The session
        is anonymous if it isn't provided.
    @param password: Optionally, the password for C{username}.
    @param transport: Optionally, the L{ITransport} provider to use.
    @return: A new L{Session} instance.
    """
    return Session(getBaseURL(instance), username=username,
                   password=password, transport=transport)


def setupConfig(path=None, instance=None, username=None, password=None):
    """Load a configuration for a Fluidinfo client.

    The following fields are read from the C{fluidinfo} section:

      * instance - The name of a well-known instance (C{main} or
        C{sandbox}) or the absolute URL of another one.
      * username - Optionally, the user to authenticate as.
      * password - Optionally, the password for the user.

    The following fields are read from the C{logging} section:

      * level - The name of the log level, such as C{INFO}.

    Field values are always strings.  Explicit keyword arguments override
    the values loaded from the configuration file.

    @param path: Optionally, the location of the configuration file to load.
        Default values will be used if a path isn't provided.
    @param instance: Optionally, the instance to use.
    @param username: Optionally, the user to authenticate as.
    @param password: Optionally, the password for C{username}.
    @return: A configuration instance.
    """
    config = RawConfigParser()
    config.add_section('fluidinfo')
    config.set('fluidinfo', 'instance', defaults.defaultInstance)
    config.add_section('logging')
    config.set('logging', 'level', 'INFO')
    if path:
        with open(path, 'r') as configFile:
            config.read_file(configFile)

    overrides = {'instance': instance, 'username': username,
                 'password': password}
    for name, value in overrides.items():
        if value is not None:
            config.set('fluidinfo', name, value)
    return config


def setupSession(config, transport=None):
    """Create a L{Session} from a configuration.

    @param config: A configuration instance, as returned by L{setupConfig}.
    @param transport: Optionally, the L{ITransport} provider to use.
    @return: A new L{Session} instance.
    """
    username = None
    password = None
    if config.has_option('fluidinfo', 'username'):
        username = config.get('fluidinfo', 'username')
        if config.has_option('fluidinfo', 'password'):
            password = config.get('fluidinfo', 'password')
    return createSession(config.get('fluidinfo', 'instance'),
                         username=username, password=password,
                         transport=transport)


def getLogLevel(config):
    """Get the log level named in a configuration.

    @param config: A configuration instance.
    @return: The C{int} log level, C{logging.INFO} if the name is unknown.
    """
    level = getLevelName(config.get('logging', 'level').upper())
    return level if isinstance(level, int) else INFO


def setupApplication(path=None, logPath=None, transport=None):
    """Setup a Fluidinfo client.

    The configuration is loaded and registered with L{setConfig}, and
    logging is set up with the level named in its C{logging} section.

    @param path: Optionally, the location of the configuration file to load.
    @param logPath: Optionally, the path to write log output to.  Output is
        written to C{stderr} by default.
    @param transport: Optionally, the L{ITransport} provider to use.
    @return: A new L{Session} instance.
    """
    config = setupConfig(path)
    setConfig(config)
    level = getLogLevel(config)
    if logPath:
        setupLogging(path=logPath, level=level)
    else:
        setupLogging(stream=sys.stderr, level=level)
    return setupSession(config, transport)


def setupLogging(stream=None, path=None, level=None, format=None):
    """Setup logging.

    Either a stream or a path can be provided.  When a path is provided a log
    handler that works correctly with C{logrotate} is used.  Generally
    speaking, C{stream} should only be used for non-file streams that don't
    need log rotation.

    @param stream: The stream to write output to.
    @param path: The path to write output to.
    @param level: Optionally, the log level to set on the logger.  Default is
        C{logging.INFO}.
    @param format: A format string for the logger.
    @raise RuntimeError: Raised if neither C{stream} nor C{path} are provided,
        or if both are provided.
    @return: The configured logger, ready to use.
    """
    if (not stream and not path) or (stream and path):
        raise RuntimeError('A stream or path must be provided.')
    if stream:
        handler = StreamHandler(stream)
    else:
        handler = WatchedFileHandler(path)

    if format is None:
        format = '%(asctime)s %(levelname)8s  %(message)s'

    formatter = Formatter(format)
    handler.setFormatter(formatter)
    log = getLogger()
    log.addHandler(handler)
    log.propagate = False
    log.setLevel(level or INFO)
    return log


def setupTwistedLogging():
    """Send messages logged with C{twisted.python.log} to C{logging}.

    @return: The started L{PythonLoggingObserver}.
    """
    observer = PythonLoggingObserver()
    observer.start()
    return observer
