import logging

from .errors import SubmissionError
from .schemas import BatchOutcome, ForwardedMessage, NotificationBatch, NotificationRecord, RecordOutcome

logger = logging.getLogger(__name__)


class Forwarder:
    """Forwards SNS notification records onto an SQS queue."""

    def __init__(self, sqs_client, queue_url: str):
        """
        Initialize the forwarder.

        Args:
            sqs_client: Anything with send_message(queue_url, message_body)
                returning a message ID and raising SubmissionError on failure
            queue_url: The destination queue URL
        """
        self.sqs = sqs_client
        self.queue_url = queue_url

    def forward_record(self, record: NotificationRecord, index: int = 0) -> RecordOutcome:
        """Submit one record to the destination queue and log the result."""
        message = ForwardedMessage.from_record(record, self.queue_url)
        try:
            message_id = self.sqs.send_message(message.queue_url, message.body)
        except SubmissionError as e:
            logger.error(f"Error sending message to SQS: {e}")
            return RecordOutcome(index=index, error=e)

        logger.info(f"Message sent to SQS: {message_id}")
        return RecordOutcome(index=index, message_id=message_id)

    def handle(self, batch: NotificationBatch) -> BatchOutcome:
        """
        Forward every record of the batch, in order.

        Stops at the first record that fails; the records after it are not
        attempted.

        Args:
            batch: The notification batch of one invocation

        Returns:
            Outcomes of the attempted records
        """
        result = BatchOutcome()
        for index, record in enumerate(batch.Records):
            outcome = self.forward_record(record, index)
            result.outcomes.append(outcome)
            if not outcome.ok:
                break
        return result
