"""Forward SNS notification records onto an SQS queue."""

from .errors import SubmissionError
from .forwarder import Forwarder
from .schemas import BatchOutcome, ForwardedMessage, NotificationBatch, NotificationRecord, RecordOutcome
from .sqs_client import SQSClient

__all__ = [
    "BatchOutcome",
    "ForwardedMessage",
    "Forwarder",
    "NotificationBatch",
    "NotificationRecord",
    "RecordOutcome",
    "SQSClient",
    "SubmissionError",
]
