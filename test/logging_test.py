import json
import logging

import pytest

from sns_forwarder.config import Settings
from sns_forwarder.logging_config import CustomJsonFormatter, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    level = root.level
    yield root
    for h in list(root.handlers):
        if isinstance(h.formatter, CustomJsonFormatter):
            root.removeHandler(h)
    root.setLevel(level)


def test_json_lines_carry_service_identity(restore_root_logger, capsys):
    config = Settings(service_name="forwarder-test", environment="staging", log_level="INFO")

    handler = setup_logging(config)
    logging.getLogger("sns_forwarder.forwarder").info("Message sent to SQS: abc")
    handler.flush()

    line = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    assert line["message"] == "Message sent to SQS: abc"
    assert line["levelname"] == "INFO"
    assert line["service"] == "forwarder-test"
    assert line["environment"] == "staging"
    assert line["name"] == "sns_forwarder.forwarder"
    assert line["timestamp"].endswith("+00:00")


def test_replaces_existing_handlers(restore_root_logger):
    root = restore_root_logger
    root.addHandler(logging.NullHandler())

    handler = setup_logging(Settings(log_level="WARNING"))

    assert root.handlers == [handler]
    assert root.level == logging.WARNING
    assert logging.getLogger("botocore").level == logging.WARNING
