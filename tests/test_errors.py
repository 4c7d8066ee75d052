from content_toolkit.services.errors import (
    ErrorKind,
    FormatError,
    QUOTA_FAILURE_TYPE,
    classify_raw_error,
    decode_upstream_error,
)
from tests.conftest import UpstreamFailure, zero_quota_payload


def test_decode_nested_error_mapping():
    decoded = decode_upstream_error(zero_quota_payload())
    assert decoded.status == "RESOURCE_EXHAUSTED"
    assert decoded.code == 429
    assert decoded.details[0]["@type"] == QUOTA_FAILURE_TYPE


def test_decode_flat_mapping():
    decoded = decode_upstream_error({"status": "UNAVAILABLE", "message": "overloaded"})
    assert decoded.status == "UNAVAILABLE"
    assert decoded.message == "overloaded"
    assert decoded.details == []


def test_decode_plain_exception_keeps_message_only():
    decoded = decode_upstream_error(RuntimeError("socket closed"))
    assert decoded.message == "socket closed"
    assert decoded.status is None


def test_zero_quota_is_billing():
    assert classify_raw_error(UpstreamFailure(zero_quota_payload())) is ErrorKind.BILLING_REQUIRED
    assert classify_raw_error(zero_quota_payload()) is ErrorKind.BILLING_REQUIRED


def test_rate_limit_without_zero_limit_is_transient():
    payload = zero_quota_payload()
    payload["error"]["message"] = "Resource has been exhausted (e.g. check quota)."
    assert classify_raw_error(payload) is ErrorKind.TRANSIENT


def test_paid_tier_metric_is_transient():
    payload = zero_quota_payload()
    payload["error"]["details"][0]["violations"] = [
        {"quotaMetric": "generativelanguage.googleapis.com/generate_content_paid_tier_requests"}
    ]
    assert classify_raw_error(payload) is ErrorKind.TRANSIENT


def test_other_status_is_transient():
    payload = zero_quota_payload()
    payload["error"]["status"] = "INTERNAL"
    assert classify_raw_error(payload) is ErrorKind.TRANSIENT
    assert classify_raw_error(ValueError("boom")) is ErrorKind.TRANSIENT


def test_format_error_message_names_stage():
    err = FormatError("recipe sections")
    assert str(err) == "Error generating recipe sections: Invalid JSON format received."
    assert err.stage == "recipe sections"
