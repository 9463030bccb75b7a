from pagecrawl.services.http_service import HttpService
from pagecrawl.exceptions import HttpFetchError
from unittest.mock import Mock
import requests


def test_fetch_success():
    mock_http_client = Mock()
    mock_http_client.return_value.status_code = 200
    mock_http_client.return_value.text = 'hello world'
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client)
    response = http.fetch('http://example.com')
    assert response.status_code == 200
    assert response.text == 'hello world'
    assert response.ok


def test_fetch_sends_user_agent_and_timeout():
    mock_http_client = Mock()
    mock_http_client.return_value.status_code = 200
    mock_http_client.return_value.text = ''
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client, timeout=7)
    http.fetch('http://example.com')
    mock_http_client.assert_called_once_with('http://example.com', headers={'User-Agent': 'TestAgent'}, timeout=7)


def test_fetch_wraps_requests_exception():
    mock_http_client = Mock()
    mock_http_client.side_effect = requests.exceptions.Timeout("timed out")
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client)

    try:
        http.fetch('http://example.com')
        assert False, "expected HttpFetchError"
    except HttpFetchError as e:
        assert "http://example.com" in str(e)
        assert isinstance(e.original, requests.exceptions.Timeout)


def test_fetch_wraps_connection_error():
    mock_http_client = Mock()
    mock_http_client.side_effect = requests.exceptions.ConnectionError("refused")
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client)

    try:
        http.fetch('http://example.com')
        assert False, "expected HttpFetchError"
    except HttpFetchError as e:
        assert "refused" in str(e)


def test_non_success_status_is_returned_not_raised():
    mock_http_client = Mock()
    mock_http_client.return_value.status_code = 503
    mock_http_client.return_value.text = 'unavailable'
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client)
    response = http.fetch('http://example.com')
    assert response.status_code == 503
    assert not response.ok


def test_fetch_bubbles_non_requests_exceptions():
    """Only requests errors are transport failures; anything else is a bug and propagates."""
    mock_http_client = Mock()
    mock_http_client.side_effect = RuntimeError("Real bug in client")
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client)

    try:
        http.fetch('http://example.com')
        assert False, "expected RuntimeError to bubble up"
    except RuntimeError as e:
        assert "Real bug" in str(e)
