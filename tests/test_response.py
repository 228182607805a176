from __future__ import annotations

import base64

import pytest

from lsif_upload.errors import AuthError, AuthScopeError, ParseError, RemoteError
from lsif_upload.response import interpret_response, upload_reference


def test_success(config) -> None:
    result = interpret_response(200, "OK", b'{"id":"abc"}', "github.com/gorilla/mux", config)

    assert result.upload_id == "abc"
    assert base64.urlsafe_b64decode(result.reference) == b'LSIFUpload:"abc"'
    assert result.status_url == (
        "https://sourcegraph.example.com/github.com/gorilla/mux"
        f"/-/settings/code-intelligence/lsif-uploads/{result.reference}"
    )


def test_any_2xx_is_success(config) -> None:
    result = interpret_response(202, "Accepted", b'{"id":"7","extra":true}', "r", config)

    assert result.upload_id == "7"


def test_reference_is_url_safe() -> None:
    reference = upload_reference("??>>")

    assert "+" not in reference and "/" not in reference
    assert base64.urlsafe_b64decode(reference) == b'LSIFUpload:"??>>"'


@pytest.mark.parametrize("body", [b"<html>not json</html>", b"{}", b'{"id": 1}', b""])
def test_malformed_success_body(config, body: bytes) -> None:
    with pytest.raises(ParseError):
        interpret_response(200, "OK", body, "r", config)


@pytest.mark.parametrize("body", [b"must provide github_token", b"Error: Must Provide GITHUB_TOKEN\n"])
def test_missing_github_token(config, body: bytes, capsys) -> None:
    with pytest.raises(AuthScopeError) as excinfo:
        interpret_response(401, "Unauthorized", body, "r", config, interactive=True)

    assert "-github-token=TOKEN" in excinfo.value.message
    assert capsys.readouterr().out == ""


def test_unauthorized_in_terminal_prints_hint(config, capsys) -> None:
    with pytest.raises(AuthError) as excinfo:
        interpret_response(401, "Unauthorized", b"Invalid access token.", "r", config, interactive=True)

    assert excinfo.value.message == "401 Unauthorized\n\nInvalid access token."
    assert "update your GitHub access token" in capsys.readouterr().out


def test_unauthorized_without_terminal(config, capsys) -> None:
    with pytest.raises(AuthError):
        interpret_response(401, "Unauthorized", b"nope", "r", config, interactive=False)

    assert capsys.readouterr().out == ""


def test_remote_error_keeps_status_and_body(config) -> None:
    with pytest.raises(RemoteError) as excinfo:
        interpret_response(500, "Internal Server Error", b"something broke", "r", config)

    assert "500 Internal Server Error" in excinfo.value.message
    assert "something broke" in excinfo.value.message


def test_redirect_is_not_success(config) -> None:
    with pytest.raises(RemoteError, match="302 Found"):
        interpret_response(302, "Found", b"", "r", config)
