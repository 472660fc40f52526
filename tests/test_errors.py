from app.errors import GENERIC_ANALYSIS_ERROR, REMOTE_ERROR_MESSAGES, RemoteOperationError, ValidationError


def test_remote_error_exposes_raw_message_by_default():
    err = RemoteOperationError("Input image is too large.", kind="invalid_image")

    assert err.status_code == 500
    assert err.public_message() == "Input image is too large."


def test_remote_error_hides_raw_message_on_request():
    err = RemoteOperationError("key 1234 rejected", kind="authentication")

    assert err.public_message(expose=False) == REMOTE_ERROR_MESSAGES["authentication"]


def test_blank_remote_message_uses_generic_fallback():
    assert RemoteOperationError("").public_message() == GENERIC_ANALYSIS_ERROR


def test_validation_error_carries_kind():
    err = ValidationError("missing", "Image URL is required")

    assert err.status_code == 400
    assert err.kind == "missing"
    assert str(err) == "Image URL is required"
