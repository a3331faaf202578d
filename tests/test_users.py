import logging
from unittest.mock import patch

import pytest
import requests

from okta_lifecycle.api.okta_api import UsersClient, encode_user_id

from conftest import make_response


@pytest.mark.parametrize("user_id,expected", [
    ("00u1abcd", "00u1abcd"),
    ("user@test.com/../../admin", "user%40test.com%2F..%2F..%2Fadmin"),
    ("john doe", "john%20doe"),
    ("a?b#c", "a%3Fb%23c"),
    ("..", "%2E%2E"),
    (".", "%2E"),
])
def test_encode_user_id(user_id, expected):
    assert encode_user_id(user_id) == expected


def test_encoded_id_stays_one_segment():
    client = UsersClient("https://example.okta.com/", {"Authorization": "SSWS t"})
    path = client.user_path("user@test.com/../../admin")

    assert path.split("/") == ["api", "v1", "users", "user%40test.com%2F..%2F..%2Fadmin"]
    assert client.url(path) == "https://example.okta.com/api/v1/users/user%40test.com%2F..%2F..%2Fadmin"


def test_client_does_not_keep_reference_to_headers():
    headers = {"Authorization": "SSWS t"}
    client = UsersClient("https://example.okta.com", headers)
    client.session.headers["Authorization"] = "changed"

    assert headers == {"Authorization": "SSWS t"}


def test_logs_lifecycle_and_read_calls(mock_request, caplog):
    mock_request.side_effect = [make_response(200, {}), make_response(200, {"status": "ACTIVE"})]
    client = UsersClient("https://example.okta.com", {"Authorization": "SSWS t"})

    with caplog.at_level(logging.INFO):
        client.unsuspend_user("user123")
        response = client.get_user("user123")

    assert response.data == {"status": "ACTIVE"}
    assert "POST lifecycle/unsuspend for user user123" in caplog.text
    assert "GET user user123" in caplog.text


def test_client_closes_session_on_exit():
    with patch.object(requests.Session, "close", autospec=True) as close:
        with UsersClient("https://example.okta.com", {}) as client:
            pass

    close.assert_called_once_with(client.session)
