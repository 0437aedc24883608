import httpx
import pytest

from eztvapi.config import Settings
from eztvapi.errors import InvalidEndpoint, TransportError, UnexpectedStatus
from eztvapi.transport import build_url, create_client, fetch, path_segment


def test_build_url_sorts_params():
    """Query parameters come out sorted by name."""
    params = {"page": 1, "limit": 100, "imdb_id": "0383795"}
    url = build_url("https://eztv.test", "/api/get-torrents", params)
    assert url == "https://eztv.test/api/get-torrents?imdb_id=0383795&limit=100&page=1"


def test_build_url_skips_none_params():
    """Test build url skips none params."""
    url = build_url("https://eztv.test", "/shows/1", {"keywords": None})
    assert url == "https://eztv.test/shows/1"


def test_build_url_encodes_params():
    """Test percent-encoding of query values."""
    url = build_url("https://eztv.test", "/shows/1", {"keywords": "game of thrones&co"})
    parsed = httpx.URL(url)
    assert parsed.params["keywords"] == "game of thrones&co"
    assert "&co" not in url


def test_build_url_keeps_base_path():
    """A path prefix and a trailing slash on the base are handled."""
    assert build_url("http://host.test/v2/", "/show/tt1") == "http://host.test/v2/show/tt1"
    assert build_url("http://host.test", "/") == "http://host.test/"


@pytest.mark.parametrize(
    "base_url", ["", "not a url", "ftp://host.test", "http://", "//host.test"]
)
def test_build_url_invalid_endpoint(base_url):
    """Test build url invalid endpoint."""
    with pytest.raises(InvalidEndpoint):
        build_url(base_url, "/")


def test_path_segment():
    """Test path segment."""
    assert path_segment("tt0944947") == "tt0944947"
    assert path_segment("a/b c") == "a%2Fb%20c"
    assert path_segment(3) == "3"


def test_fetch_returns_body_and_status():
    """Test fetch returns body and status."""
    client = httpx.Client(
        transport=httpx.MockTransport(lambda request: httpx.Response(200, content=b"{}"))
    )
    assert fetch(client, "http://host.test/") == (b"{}", 200)


def test_fetch_accepts_any_2xx():
    """Test fetch accepts any 2xx."""
    client = httpx.Client(
        transport=httpx.MockTransport(lambda request: httpx.Response(203, content=b"[]"))
    )
    assert fetch(client, "http://host.test/") == (b"[]", 203)


@pytest.mark.parametrize("status_code", [301, 404, 500, 503])
def test_fetch_unexpected_status(status_code):
    """Test fetch unexpected status."""
    client = httpx.Client(
        transport=httpx.MockTransport(lambda request: httpx.Response(status_code))
    )
    with pytest.raises(UnexpectedStatus) as exc_info:
        fetch(client, "http://host.test/show/tt1")

    assert exc_info.value.status_code == status_code
    assert exc_info.value.url == "http://host.test/show/tt1"


def test_fetch_transport_error():
    """Test fetch transport error."""
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = httpx.Client(transport=httpx.MockTransport(handler))
    with pytest.raises(TransportError) as exc_info:
        fetch(client, "http://host.test/")

    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


def test_create_client():
    """Test create client."""
    settings = Settings(timeout_seconds=5.0, user_agent="test-agent/2.0")
    with create_client(settings) as client:
        assert client.headers["User-Agent"] == "test-agent/2.0"
        assert client.timeout.read == 5.0
        assert client.follow_redirects


def test_fetch_expected_status():
    """Test that a 2xx other than the expected status is rejected."""
    client = httpx.Client(
        transport=httpx.MockTransport(lambda request: httpx.Response(203, content=b"{}"))
    )

    with pytest.raises(UnexpectedStatus) as exc_info:
        fetch(client, "http://host.test/", expected_status=200)

    assert exc_info.value.status_code == 203
