import json
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from requests.structures import CaseInsensitiveDict

# Make "src/" importable without installing the package
SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from gigadrive.client_base import HttpClient  # noqa: E402
from gigadrive.config import ClientConfig  # noqa: E402
from gigadrive.credentials import NoCredentialProvider  # noqa: E402


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests that never touch the network")


class FakeResponse:
    """Just enough of requests.Response for the request core."""

    def __init__(
        self,
        status_code=200,
        body=None,
        text=None,
        content_type="application/json",
        reason="OK",
    ):
        self.status_code = status_code
        self.reason = reason
        if text is None:
            text = "" if body is None else json.dumps(body)
        self.text = text
        self.headers = CaseInsensitiveDict()
        if content_type:
            self.headers["Content-Type"] = content_type

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        return json.loads(self.text)


@pytest.fixture
def make_response():
    return FakeResponse


@pytest.fixture
def http():
    """HttpClient against a fake base URL, unauthenticated, no env lookups."""
    client = HttpClient(
        base_url="https://api.example.com",
        credential_provider=NoCredentialProvider(),
        config=ClientConfig(),
    )
    client.session.request = MagicMock(return_value=FakeResponse(200, {}))
    return client


@pytest.fixture
def respond(http):
    """Queue the response(s) the next request(s) will receive."""

    def _respond(*responses):
        if len(responses) == 1:
            http.session.request.return_value = responses[0]
            http.session.request.side_effect = None
        else:
            http.session.request.side_effect = list(responses)
        return http.session.request

    return _respond
