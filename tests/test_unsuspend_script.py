import json
from unittest.mock import patch

import pytest

from okta_lifecycle.api.okta_api import OktaAPIError
from okta_lifecycle.scripts import unsuspend_user

CONTEXT = {"secrets": {"BEARER_AUTH_TOKEN": "SSWS t"}, "environment": {"ADDRESS": "https://example.okta.com"}}


def run(monkeypatch, capsys, argv):
    monkeypatch.setattr("sys.argv", ["unsuspend_user.py", *argv])
    unsuspend_user.main()
    return json.loads(capsys.readouterr().out)


def test_missing_argument(monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc_info:
        run(monkeypatch, capsys, [])
    assert exc_info.value.code == 1
    assert json.loads(capsys.readouterr().out)["success"] is False


def test_success(monkeypatch, capsys):
    result = {
        "userId": "user123",
        "unsuspended": True,
        "address": "https://other.okta.com",
        "unsuspendedAt": None,
        "status": "ACTIVE",
    }
    with patch.object(unsuspend_user, "load_context", return_value=CONTEXT), \
            patch.object(unsuspend_user, "invoke", return_value=result) as invoke:
        output = run(monkeypatch, capsys, ["user123", "https://other.okta.com"])

    invoke.assert_called_once_with({"userId": "user123", "address": "https://other.okta.com"}, CONTEXT)
    assert output == {"success": True, "message": "User user123 unsuspended successfully", "result": result}


def test_failure(monkeypatch, capsys):
    failure = OktaAPIError("Failed to unsuspend user: HTTP 403", status_code=403)
    with patch.object(unsuspend_user, "load_context", return_value=CONTEXT), \
            patch.object(unsuspend_user, "invoke", side_effect=failure):
        with pytest.raises(SystemExit) as exc_info:
            run(monkeypatch, capsys, ["user123"])

    assert exc_info.value.code == 1
    output = json.loads(capsys.readouterr().out)
    assert output["success"] is False
    assert output["status_code"] == 403
    assert output["error"] == "Failed to unsuspend user: HTTP 403"
