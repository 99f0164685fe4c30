from fluidinfo.common.error import InvalidBaseURL
from fluidinfo.testing.basic import FluidinfoTestCase
from fluidinfo.web.url import (
    buildURL, checkBaseURL, encodeArgs, encodeComponent, encodePath)


BASE_URL = 'https://fluiddb.fluidinfo.com/'


class CheckBaseURLTest(FluidinfoTestCase):

    def testValidURL(self):
        """L{checkBaseURL} returns acceptable URLs unchanged."""
        self.assertEqual(BASE_URL, checkBaseURL(BASE_URL))
        self.assertEqual('http://localhost:9000/',
                         checkBaseURL('http://localhost:9000/'))

    def testMissingTrailingSlash(self):
        """
        L{checkBaseURL} raises L{InvalidBaseURL} if the URL doesn't end with
        a slash.
        """
        self.assertRaises(InvalidBaseURL, checkBaseURL,
                          'https://fluiddb.fluidinfo.com')

    def testUnsupportedScheme(self):
        """Only C{http} and C{https} URLs are accepted."""
        self.assertRaises(InvalidBaseURL, checkBaseURL,
                          'ftp://fluiddb.fluidinfo.com/')

    def testRelativeURL(self):
        """Relative URLs are rejected."""
        self.assertRaises(InvalidBaseURL, checkBaseURL,
                          'fluiddb.fluidinfo.com/')
        self.assertRaises(InvalidBaseURL, checkBaseURL, '/')

    def testNotAString(self):
        """Values that aren't strings are rejected."""
        self.assertRaises(InvalidBaseURL, checkBaseURL, None)
        self.assertRaises(InvalidBaseURL, checkBaseURL, b'http://x/')


class EncodeComponentTest(FluidinfoTestCase):

    def testReservedCharacters(self):
        """Every reserved character is escaped, including C{/}."""
        self.assertEqual('a%2Fb%3F%26%3D%23', encodeComponent('a/b?&=#'))

    def testSpace(self):
        """A space is encoded as C{%20}, not C{+}."""
        self.assertEqual('has%20ntoll%2Frating',
                         encodeComponent('has ntoll/rating'))

    def testUnicode(self):
        """Non-ASCII characters are encoded as UTF-8."""
        self.assertEqual('%C3%A4n', encodeComponent(u'\xe4n'))

    def testNumbersAndBooleans(self):
        """Numbers and booleans are converted to strings first."""
        self.assertEqual('7', encodeComponent(7))
        self.assertEqual('true', encodeComponent(True))
        self.assertEqual('false', encodeComponent(False))


class EncodePathTest(FluidinfoTestCase):

    def testStringPath(self):
        """
        A C{str} path is split on slashes and each segment is encoded, so
        the slashes are kept.
        """
        self.assertEqual('tags/ntoll/rating', encodePath('tags/ntoll/rating'))
        self.assertEqual('about/two%20words', encodePath('about/two words'))

    def testLeadingSlash(self):
        """A leading slash is dropped."""
        self.assertEqual('values', encodePath('/values'))

    def testSegments(self):
        """
        A sequence of segments is encoded one segment at a time, so slashes
        inside a segment are escaped.
        """
        path = ['about', u'\xe4n/- object', 'namespace', 'tag']
        self.assertEqual('about/%C3%A4n%2F-%20object/namespace/tag',
                         encodePath(path))


class EncodeArgsTest(FluidinfoTestCase):

    def testSingleValue(self):
        """A single value produces a single argument."""
        self.assertEqual('query=has%20a%2Fb',
                         encodeArgs({'query': 'has a/b'}))

    def testRepeatedValues(self):
        """A list of values repeats the argument once per value, in order."""
        self.assertEqual('tag=a%2Fb&tag=c%2Fd',
                         encodeArgs({'tag': ['a/b', 'c/d']}))

    def testEmpty(self):
        """No arguments produce an empty query string."""
        self.assertEqual('', encodeArgs({}))


class BuildURLTest(FluidinfoTestCase):

    def testWithoutArguments(self):
        """L{buildURL} appends the encoded path to the base URL."""
        self.assertEqual(BASE_URL + 'objects/1234',
                         buildURL(BASE_URL, 'objects/1234'))

    def testWithSegments(self):
        """Path segments containing slashes are escaped."""
        path = ['about', u'\xe4n/- object', 'namespace', 'tag']
        self.assertEqual(
            BASE_URL + 'about/%C3%A4n%2F-%20object/namespace/tag',
            buildURL(BASE_URL, path))

    def testWithArguments(self):
        """Query arguments are appended after a C{?}."""
        args = {'tag': ['ntoll/foo', 'terrycojones/bar', 'fluiddb/about'],
                'query': 'has ntoll/rating > 7'}
        self.assertEqual(
            BASE_URL + 'values?tag=ntoll%2Ffoo&tag=terrycojones%2Fbar'
            '&tag=fluiddb%2Fabout&query=has%20ntoll%2Frating%20%3E%207',
            buildURL(BASE_URL, 'values', args))

    def testWithEmptyArguments(self):
        """An empty mapping of arguments doesn't add a C{?}."""
        self.assertEqual(BASE_URL + 'values',
                         buildURL(BASE_URL, 'values', {}))

    def testInvalidBaseURL(self):
        """L{buildURL} raises L{InvalidBaseURL} for an unusable base URL."""
        self.assertRaises(InvalidBaseURL, buildURL,
                          'https://fluiddb.fluidinfo.com', 'values')
