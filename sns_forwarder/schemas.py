import json
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .errors import SubmissionError


class NotificationRecord(BaseModel):
    """A single SNS delivery record"""
    model_config = ConfigDict(frozen=True, extra="ignore")

    EventVersion: str
    EventSubscriptionArn: str
    EventSource: str
    Sns: Dict[str, Any]

    def to_message_body(self) -> str:
        """Compact JSON projection of the four record fields, in field order."""
        return json.dumps(
            {
                "EventVersion": self.EventVersion,
                "EventSubscriptionArn": self.EventSubscriptionArn,
                "EventSource": self.EventSource,
                "Sns": self.Sns,
            },
            separators=(",", ":"),
            ensure_ascii=False,
        )


class NotificationBatch(BaseModel):
    """The records handed to one invocation, in delivery order"""
    model_config = ConfigDict(frozen=True, extra="ignore")

    Records: List[NotificationRecord] = Field(default_factory=list)


class ForwardedMessage(BaseModel):
    """Message submitted to the destination queue for one record"""
    model_config = ConfigDict(frozen=True)

    queue_url: str
    body: str

    @classmethod
    def from_record(cls, record: NotificationRecord, queue_url: str) -> "ForwardedMessage":
        return cls(queue_url=queue_url, body=record.to_message_body())


class RecordOutcome(BaseModel):
    """Result of forwarding one record"""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    index: int
    message_id: Optional[str] = None
    error: Optional[SubmissionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class BatchOutcome(BaseModel):
    """Outcomes of the records attempted in one batch, in order"""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    outcomes: List[RecordOutcome] = Field(default_factory=list)

    @property
    def error(self) -> Optional[SubmissionError]:
        for outcome in self.outcomes:
            if not outcome.ok:
                return outcome.error
        return None

    @property
    def succeeded(self) -> bool:
        return self.error is None

    @property
    def message_ids(self) -> List[str]:
        return [o.message_id for o in self.outcomes if o.ok]
