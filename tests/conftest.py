import json
from unittest.mock import Mock, patch

import pytest
import requests


def make_response(status_code, body=None, invalid_json=False):
    """Build a stand-in for requests.Response."""
    response = Mock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    if invalid_json or body is None:
        response.text = "" if body is None else "<html>"
        response.json.side_effect = ValueError("Expecting value")
    else:
        response.text = json.dumps(body)
        response.json.return_value = body
    return response


@pytest.fixture
def mock_request():
    """Patch Session.request; the recorded first argument is the session."""
    with patch.object(requests.Session, "request", autospec=True) as request:
        yield request


@pytest.fixture
def bearer_context():
    return {"secrets": {"BEARER_AUTH_TOKEN": "SSWS test-token"}, "environment": {}}


@pytest.fixture
def active_user():
    return {
        "id": "user123",
        "status": "ACTIVE",
        "profile": {"firstName": "John", "lastName": "Doe", "email": "john.doe@example.com"},
        "statusChanged": "2024-01-15T10:30:00.000Z",
    }
