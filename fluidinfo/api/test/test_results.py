from fluidinfo.api.results import (
    flattenMany, flattenSingle, flattenTagValue)
from fluidinfo.common.error import UnexpectedResult
from fluidinfo.testing.basic import FluidinfoTestCase


BASE_URL = 'https://fluiddb.fluidinfo.com/'


class FlattenTagValueTest(FluidinfoTestCase):

    def testPrimitiveValue(self):
        """The value of a primitive tag is returned as-is."""
        self.assertEqual(7, flattenTagValue(BASE_URL, 'X', 'ntoll/rating',
                                            {'value': 7}))
        self.assertIdentical(None, flattenTagValue(BASE_URL, 'X', 'a/b',
                                                   {'value': None}))

    def testOpaqueValue(self):
        """
        Opaque values are described by their type, their size and the URL
        they can be fetched from.
        """
        entry = {'value-type': 'image/png', 'size': 179393}
        self.assertEqual(
            {'value-type': 'image/png', 'size': 179393,
             'url': BASE_URL + 'objects/X/terrycojones/bar'},
            flattenTagValue(BASE_URL, 'X', 'terrycojones/bar', entry))


class FlattenManyTest(FluidinfoTestCase):

    def testFlatten(self):
        """
        L{flattenMany} produces one C{dict} per object, mapping tag paths to
        values, with the object's C{id}.
        """
        result = {'results': {'id': {
            'X': {'ntoll/rating': {'value': 7},
                  'fluiddb/about': {'value': 'paris'},
                  'terrycojones/bar': {'value-type': 'image/png',
                                       'size': 179393}},
            'Y': {'ntoll/rating': {'value': 9}}}}}
        self.assertEqual(
            [{'id': 'X', 'ntoll/rating': 7, 'fluiddb/about': 'paris',
              'terrycojones/bar': {
                  'value-type': 'image/png', 'size': 179393,
                  'url': BASE_URL + 'objects/X/terrycojones/bar'}},
             {'id': 'Y', 'ntoll/rating': 9}],
            flattenMany(result, BASE_URL))

    def testNoObjects(self):
        """An empty result produces an empty C{list}."""
        self.assertEqual([], flattenMany({'results': {'id': {}}}, BASE_URL))

    def testUnexpectedShape(self):
        """Results that aren't C{/values} results produce an empty list."""
        self.assertEqual([], flattenMany('', BASE_URL))
        self.assertEqual([], flattenMany({'results': []}, BASE_URL))


class FlattenSingleTest(FluidinfoTestCase):

    def testSingleObject(self):
        """L{flattenSingle} flattens the only object in a result."""
        result = {'results': {'id': {'X': {'ntoll/rating': {'value': 7}}}}}
        self.assertEqual({'id': 'X', 'ntoll/rating': 7},
                         flattenSingle(result, BASE_URL))

    def testNoObjects(self):
        """
        L{flattenSingle} returns a C{dict} with a C{None} C{id} if no object
        matched.
        """
        self.assertEqual({'id': None},
                         flattenSingle({'results': {'id': {}}}, BASE_URL))

    def testSeveralObjects(self):
        """
        L{flattenSingle} raises L{UnexpectedResult} if the result contains
        more than one object.
        """
        result = {'results': {'id': {'X': {}, 'Y': {}}}}
        self.assertRaises(UnexpectedResult, flattenSingle, result, BASE_URL)
