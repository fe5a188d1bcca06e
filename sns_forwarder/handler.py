"""AWS Lambda handler forwarding SNS notifications to SQS."""

from typing import Any, Callable, Dict, Optional

from .config import settings
from .forwarder import Forwarder
from .logging_config import setup_logging
from .schemas import NotificationBatch
from .sqs_client import SQSClient


# Built on first invocation and reused for the lifetime of the process
_forwarder: Optional[Forwarder] = None


def get_forwarder() -> Forwarder:
    """Return the process-wide forwarder, creating it on first use."""
    global _forwarder
    if _forwarder is None:
        setup_logging(settings)
        _forwarder = Forwarder(SQSClient(config=settings), settings.queue_url)
    return _forwarder


def make_handler(forwarder: Forwarder) -> Callable[[Dict[str, Any], Any], None]:
    """Build a Lambda handler bound to the given forwarder."""

    def handler(event: Dict[str, Any], context: Any) -> None:
        batch = NotificationBatch.model_validate(event)
        outcome = forwarder.handle(batch)
        if outcome.error is not None:
            # Fail the invocation so the runtime applies its own retry policy
            raise outcome.error

    return handler


def lambda_handler(event, context):
    """
    AWS Lambda handler - triggered by SNS.

    Input payload:
    {
        "Records": [
            {
                "EventVersion": "1.0",
                "EventSubscriptionArn": "arn:aws:sns:...",
                "EventSource": "aws:sns",
                "Sns": {"Message": "...", ...}
            }
        ]
    }

    Each record is sent to the configured queue as a JSON message. The first
    failure is raised and the remaining records are skipped.
    """
    return make_handler(get_forwarder())(event, context)
