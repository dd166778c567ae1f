import json
import logging
from datetime import date

import pytest

from object_verifier.logger import LogController


def _messages(caplog) -> list[str]:
    return [r.getMessage() for r in caplog.records if r.name == "object_verifier.logger"]


def test_log_verification_error_emits_emf_payload(caplog) -> None:
    controller = LogController("crm_import", namespace="ns_test")

    with caplog.at_level(logging.INFO):
        line = controller.log_verification_error({"a": "oops", "when": date(2024, 5, 1)}, ["a"])

    payload = json.loads(line)
    assert payload["Outcome"] == "verification_error"
    assert payload["Source"] == "crm_import"
    assert payload["VerificationFailureCount"] == 1
    assert payload["FailingKeys"] == ["a"]
    assert payload["item"]["when"] == "2024-05-01"
    assert payload["_aws"]["CloudWatchMetrics"][0]["Namespace"] == "ns_test"
    assert line in _messages(caplog)


def test_log_verification_error_requires_list_of_keys() -> None:
    controller = LogController("crm_import")
    with pytest.raises(ValueError, match="'failing_keys'"):
        controller.log_verification_error({}, "a")


def test_log_processing_error(caplog) -> None:
    controller = LogController("crm_import")

    with caplog.at_level(logging.INFO):
        line = controller.log_processing_error("boom")

    payload = json.loads(line)
    assert payload["Outcome"] == "processing_error"
    assert payload["message"] == "boom"
    assert payload["_aws"]["CloudWatchMetrics"][0]["Namespace"] == "object_verifier"


def test_log_info_and_stats(caplog) -> None:
    controller = LogController("crm_import")

    with caplog.at_level(logging.INFO):
        controller.log_info("starting")
        controller.log_stats({"total_objects": 2})

    messages = _messages(caplog)
    assert "Info: starting" in messages
    assert any('Stats: {"total_objects": 2}' in m for m in messages)


def test_handler_is_installed_once() -> None:
    LogController("a")
    LogController("b")
    assert len(logging.getLogger("object_verifier.logger").handlers) == 1
