import logging
from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .config import Settings, settings as default_settings
from .errors import SubmissionError

logger = logging.getLogger(__name__)


class SQSClient:
    """SQS client used to submit forwarded messages."""

    def __init__(self, sqs=None, config: Optional[Settings] = None, **kwargs):
        """
        Initialize the SQS client.

        Args:
            sqs: An existing boto3 SQS client; built from settings when omitted
            config: Settings to build the client from
            **kwargs: Extra arguments passed through to boto3.client
        """
        if sqs is None:
            config = config or default_settings
            sqs = boto3.client(
                'sqs',
                region_name=config.sqs_region,
                endpoint_url=config.sqs_endpoint_url,
                **kwargs
            )
        self.sqs = sqs
        logger.debug("SQS client initialized")

    def send_message(self, queue_url: str, message_body: str) -> str:
        """
        Send a message to an SQS queue.

        Args:
            queue_url: The SQS queue URL
            message_body: Message body, already serialized

        Returns:
            The queue-assigned message ID

        Raises:
            SubmissionError: if the message could not be sent
        """
        try:
            logger.debug(f"Sending message to SQS queue: {queue_url}")
            response = self.sqs.send_message(
                QueueUrl=queue_url,
                MessageBody=message_body
            )
        except ClientError as e:
            code = e.response.get('Error', {}).get('Code', 'Unknown')
            raise SubmissionError(f"SQS rejected message ({code}): {e}", queue_url, e) from e
        except BotoCoreError as e:
            raise SubmissionError(f"Could not reach SQS: {e}", queue_url, e) from e
        except Exception as e:
            raise SubmissionError(f"Unexpected error sending message to SQS: {e}", queue_url, e) from e

        message_id = response.get('MessageId')
        logger.debug(f"SQS accepted message with MessageId: {message_id}")
        return message_id
