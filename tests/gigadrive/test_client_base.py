import json
from unittest.mock import MagicMock

import pytest
import requests

from gigadrive.client_base import HttpClient, first_record
from gigadrive.config import ClientConfig
from gigadrive.credentials import StaticCredentialProvider
from gigadrive.errors import APIClientConfigError, APIClientError, APIClientHTTPError


@pytest.mark.unit
def test_client_sends_default_headers(http, respond, make_response):
    mock_request = respond(make_response(200, {}))

    http.request("/test")

    sent = mock_request.call_args[1]["headers"]
    assert sent["Accept"] == "application/json"
    assert "gigadrive-python" in sent["User-Agent"]


@pytest.mark.unit
def test_supplied_session_headers_are_left_untouched(make_response):
    session = requests.Session()
    session.headers.clear()
    session.request = MagicMock(return_value=make_response(200, {}))
    client = HttpClient(
        base_url="https://api.example.com",
        session=session,
        default_headers={"X-Client": "tests"},
        config=ClientConfig(),
    )

    client.request("/test")

    assert dict(session.headers) == {}
    assert session.request.call_args[1]["headers"]["X-Client"] == "tests"


@pytest.mark.unit
def test_base_url_trailing_slash_is_stripped():
    client = HttpClient(base_url="https://api.example.com/", config=ClientConfig())
    assert client.base_url == "https://api.example.com"


@pytest.mark.unit
def test_get_json_response_is_decoded(http, respond, make_response):
    mock_request = respond(make_response(200, {"foo": "bar"}))

    data = http.request("/test", "GET")

    assert data == {"foo": "bar"}
    mock_request.assert_called_once()
    args, kwargs = mock_request.call_args
    assert args == ("GET", "https://api.example.com/test")


@pytest.mark.unit
def test_non_json_content_type_returns_raw_text(http, respond, make_response):
    respond(make_response(200, text='{"foo": "bar"}', content_type="text/plain"))

    assert http.request("/test") == '{"foo": "bar"}'


@pytest.mark.unit
def test_json_content_type_with_charset_is_decoded(http, respond, make_response):
    respond(make_response(200, {"a": 1}, content_type="application/json; charset=utf-8"))

    assert http.request("/test") == {"a": 1}


@pytest.mark.unit
def test_no_content_returns_none(http, respond, make_response):
    respond(make_response(204, content_type=None, reason="No Content"))

    assert http.request("/test", "DELETE") is None


@pytest.mark.unit
def test_head_request_returns_none(http, respond, make_response):
    respond(make_response(200, text="", content_type="application/json"))

    assert http.request("/fastcache", "HEAD") is None


@pytest.mark.unit
@pytest.mark.parametrize("status_code", [200, 201])
def test_empty_json_body_returns_none(http, respond, make_response, status_code):
    respond(make_response(status_code, text="", content_type="application/json"))

    assert http.request("/test", "POST") is None


@pytest.mark.unit
def test_empty_text_body_is_returned_as_text(http, respond, make_response):
    respond(make_response(200, text="", content_type="text/plain"))

    assert http.request("/test") == ""


@pytest.mark.unit
def test_invalid_json_on_success_raises(http, respond, make_response):
    respond(make_response(200, text="{not json"))

    with pytest.raises(APIClientError) as e:
        http.request("/test")

    assert "Invalid JSON" in str(e.value)


@pytest.mark.unit
def test_query_is_appended_with_question_mark(http, respond, make_response):
    mock_request = respond(make_response(200, []))

    http.request("/web-reputation/domain", query={"domain": ["a.com", "b.com"]})

    assert mock_request.call_args[0][1] == (
        "https://api.example.com/web-reputation/domain?domain=a.com&domain=b.com"
    )


@pytest.mark.unit
def test_query_is_appended_with_ampersand_when_path_has_query(http, respond, make_response):
    mock_request = respond(make_response(200, {}))

    http.request("/whois/domain?raw=true", query={"domain": "x.com"})

    assert mock_request.call_args[0][1] == (
        "https://api.example.com/whois/domain?raw=true&domain=x.com"
    )


@pytest.mark.unit
def test_unauthenticated_request_has_no_authorization_header(http, respond, make_response):
    mock_request = respond(make_response(200, {}))

    http.request("/test")

    assert "Authorization" not in mock_request.call_args[1]["headers"]


@pytest.mark.unit
def test_explicit_api_key_wins_over_provider(respond, make_response, http):
    http.credential_provider = StaticCredentialProvider("from-provider")
    mock_request = respond(make_response(200, {}))

    http.request("/test", api_key="explicit")

    assert mock_request.call_args[1]["headers"]["Authorization"] == "Bearer explicit"


@pytest.mark.unit
def test_provider_key_is_used_when_no_explicit_key(respond, make_response, http):
    http.credential_provider = StaticCredentialProvider("from-provider")
    mock_request = respond(make_response(200, {}))

    http.request("/test")

    assert mock_request.call_args[1]["headers"]["Authorization"] == "Bearer from-provider"


@pytest.mark.unit
def test_environment_key_is_sent_by_default(monkeypatch, make_response):
    monkeypatch.setenv("GIGADRIVE_API_KEY", "secret")
    client = HttpClient(base_url="https://api.example.com", config=ClientConfig())
    client.session.request = MagicMock(return_value=make_response(200, {}))

    client.request("/test")

    assert client.session.request.call_args[1]["headers"]["Authorization"] == "Bearer secret"


@pytest.mark.unit
def test_headers_are_passed_through(http, respond, make_response):
    mock_request = respond(make_response(200, {}))

    http.request("/test", headers={"X-Trace": "abc"})

    assert mock_request.call_args[1]["headers"]["X-Trace"] == "abc"


@pytest.mark.unit
def test_transport_options_are_passed_through(http, respond, make_response):
    mock_request = respond(make_response(200, {}))

    http.request("/test", timeout=3, verify=False)

    assert mock_request.call_args[1]["timeout"] == 3
    assert mock_request.call_args[1]["verify"] is False


@pytest.mark.unit
def test_configured_timeout_is_handed_to_transport(make_response):
    client = HttpClient(base_url="https://api.example.com", config=ClientConfig(timeout=7.5))
    client.session.request = MagicMock(return_value=make_response(200, {}))

    client.request("/test")

    assert client.session.request.call_args[1]["timeout"] == 7.5


@pytest.mark.unit
def test_no_timeout_is_imposed_by_default(http, respond, make_response):
    mock_request = respond(make_response(200, {}))

    http.request("/test")

    assert "timeout" not in mock_request.call_args[1]


@pytest.mark.unit
def test_unsupported_method_raises(http):
    with pytest.raises(APIClientConfigError):
        http.request("/test", "TRACE")


@pytest.mark.unit
def test_http_error_is_normalized(http, respond, make_response):
    respond(make_response(400, {"errors": [{"message": "Bad request"}]}, reason="Bad Request"))

    with pytest.raises(APIClientHTTPError) as e:
        http.request("/test")

    assert str(e.value) == "Encountered errors: 'Bad request'"


@pytest.mark.unit
def test_transport_errors_propagate_unchanged(http):
    http.session.request = MagicMock(side_effect=requests.Timeout("timeout"))

    with pytest.raises(requests.Timeout):
        http.request("/test")


@pytest.mark.unit
def test_exactly_one_call_on_server_error(http, respond, make_response):
    mock_request = respond(make_response(503, text="", reason="Service Unavailable"))

    with pytest.raises(APIClientHTTPError):
        http.request("/test")

    assert mock_request.call_count == 1


# ---------------------------------------------------
# request_nullable
# ---------------------------------------------------
@pytest.mark.unit
def test_nullable_returns_none_on_404(http, respond, make_response):
    respond(make_response(404, {"errors": [{"message": "Not found"}]}, reason="Not Found"))

    assert http.request_nullable("/test") is None


@pytest.mark.unit
def test_nullable_returns_value_on_success(http, respond, make_response):
    respond(make_response(200, {"id": 1}))

    assert http.request_nullable("/test") == {"id": 1}


@pytest.mark.unit
def test_nullable_propagates_500(http, respond, make_response):
    respond(make_response(500, text="boom", reason="Internal server error"))

    with pytest.raises(APIClientHTTPError) as e:
        http.request_nullable("/test")

    assert str(e.value) == (
        "Request failed with status code 500 and response text 'Internal server error'"
    )


@pytest.mark.unit
def test_nullable_treats_statusless_not_ok_response_as_not_found(http):
    class StatuslessResponse:
        ok = False
        text = json.dumps({"errors": [{"message": "Not found"}]})

    http.session.request = MagicMock(return_value=StatuslessResponse())

    assert http.request_nullable("/test") is None


@pytest.mark.unit
def test_nullable_does_not_swallow_transport_errors(http):
    http.session.request = MagicMock(side_effect=requests.ConnectionError("down"))

    with pytest.raises(requests.ConnectionError):
        http.request_nullable("/test")


# ---------------------------------------------------
# Verb helpers
# ---------------------------------------------------
@pytest.mark.unit
@pytest.mark.parametrize("verb", ["post", "put", "patch"])
def test_body_verbs_send_json(http, respond, make_response, verb):
    mock_request = respond(make_response(200, {"ok": True}))

    result = getattr(http, verb)("/things", {"a": 1})

    assert result == {"ok": True}
    args, kwargs = mock_request.call_args
    assert args[0] == verb.upper()
    assert kwargs["headers"]["Content-Type"] == "application/json"
    assert json.loads(kwargs["data"]) == {"a": 1}


@pytest.mark.unit
def test_delete_sets_json_content_type(http, respond, make_response):
    mock_request = respond(make_response(204, content_type=None))

    http.delete("/things", query={"key": "k"})

    args, kwargs = mock_request.call_args
    assert args == ("DELETE", "https://api.example.com/things?key=k")
    assert kwargs["headers"]["Content-Type"] == "application/json"
    assert kwargs["data"] is None


@pytest.mark.unit
def test_caller_headers_override_json_defaults(http, respond, make_response):
    mock_request = respond(make_response(200, {}))

    http.post("/things", {"a": 1}, headers={"Content-Type": "application/vnd.custom+json"})

    assert mock_request.call_args[1]["headers"]["Content-Type"] == "application/vnd.custom+json"


@pytest.mark.unit
def test_context_manager_closes_session():
    with HttpClient(base_url="https://api.example.com", config=ClientConfig()) as client:
        client.session.close = MagicMock()
    client.session.close.assert_called_once()


@pytest.mark.unit
def test_first_record():
    assert first_record([{"a": 1}, {"a": 2}], "thing") == {"a": 1}
    with pytest.raises(APIClientError):
        first_record([], "thing")
    with pytest.raises(APIClientError):
        first_record({"a": 1}, "thing")
