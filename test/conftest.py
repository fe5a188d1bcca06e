import pytest

from mocks import QUEUE_URL, StubSQSClient
from sns_forwarder import Forwarder


@pytest.fixture
def sqs_stub():
    return StubSQSClient()


@pytest.fixture
def forwarder(sqs_stub):
    return Forwarder(sqs_stub, QUEUE_URL)
