from twisted.internet.error import ConnectionLost
from twisted.python.failure import Failure
from twisted.web.client import ResponseDone
from twisted.web.http import PotentialDataLoss

from fluidinfo.testing.basic import FluidinfoTestCase
from fluidinfo.util.agent import ResponseConsumer


class ResponseConsumerTest(FluidinfoTestCase):

    def testConnectionLostWithResponseDone(self):
        """
        The L{ResponseConsumer}'s C{Deferred} fires with the data received
        when the connection is closed cleanly.
        """
        consumer = ResponseConsumer()
        consumer.dataReceived(b'hello ')
        consumer.dataReceived(b'world')
        consumer.connectionLost(Failure(ResponseDone()))
        self.assertEqual(b'hello world',
                         self.successResultOf(consumer.deferred))

    def testConnectionLostWithPotentialDataLoss(self):
        """
        A response without a C{Content-Length} ends with
        C{PotentialDataLoss}, which is treated as a clean close.
        """
        consumer = ResponseConsumer()
        consumer.dataReceived(b'data')
        consumer.connectionLost(Failure(PotentialDataLoss()))
        self.assertEqual(b'data', self.successResultOf(consumer.deferred))

    def testConnectionLostWithoutData(self):
        """An empty response body fires the C{Deferred} with C{b''}."""
        consumer = ResponseConsumer()
        consumer.connectionLost(Failure(ResponseDone()))
        self.assertEqual(b'', self.successResultOf(consumer.deferred))

    def testConnectionLostWithError(self):
        """
        The L{ResponseConsumer}'s C{Deferred} errbacks if the connection is
        lost for any other reason.
        """
        consumer = ResponseConsumer()
        consumer.dataReceived(b'partial')
        consumer.connectionLost(Failure(ConnectionLost()))
        failure = self.failureResultOf(consumer.deferred)
        failure.trap(ConnectionLost)
