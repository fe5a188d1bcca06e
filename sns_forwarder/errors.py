from typing import Optional


class SubmissionError(Exception):
    """A message could not be delivered to the destination queue.

    Wraps whatever the underlying transport or service raised. Failures are
    not classified further: throttling, auth and connection errors all end up
    here.
    """

    def __init__(self, message: str, queue_url: Optional[str] = None, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.queue_url = queue_url
        self.cause = cause
