"""Unit tests for src/tools/search_tools.py and src/tools/weather_tools.py"""
from __future__ import annotations

import urllib.error
from unittest.mock import MagicMock, patch


def _settings():
    from src.utils.config import Settings
    return Settings(
        web_search_url="https://hook.test/search",
        news_search_url="https://hook.test/news",
        weather_url="https://hook.test/weather",
    )


class TestWebSearch:

    @patch("src.tools.search_tools.post_json")
    def test_success_has_banner_and_body(self, mock_post):
        from src.core.protocol import SearchArgs
        from src.tools.search_tools import web_search
        mock_post.return_value = {"results": []}
        result = web_search(SearchArgs(query="cats"), settings=_settings())
        assert result.is_error is False
        assert result.text == 'Search Results:\n\n{"results":[]}'

    @patch("src.tools.search_tools.post_json")
    def test_posts_query_to_search_hook(self, mock_post):
        from src.core.protocol import SearchArgs
        from src.tools.search_tools import web_search
        mock_post.return_value = {}
        web_search(SearchArgs(query="cats"), settings=_settings())
        url, body, _ = mock_post.call_args[0]
        assert url == "https://hook.test/search"
        assert body == {"q": "cats"}

    @patch("src.tools.search_tools.post_json")
    def test_freshness_forwarded(self, mock_post):
        from src.core.protocol import SearchArgs
        from src.tools.search_tools import web_search
        mock_post.return_value = {}
        web_search(SearchArgs(query="cats", freshness="pw"), settings=_settings())
        assert mock_post.call_args[0][1] == {"q": "cats", "freshness": "pw"}

    @patch("urllib.request.urlopen")
    def test_http_500_is_error_result(self, mock_urlopen):
        from src.core.protocol import SearchArgs
        from src.tools.search_tools import web_search
        mock_urlopen.side_effect = urllib.error.HTTPError(
            "https://hook.test/search", 500, "Internal Server Error", hdrs=None, fp=None
        )
        result = web_search(SearchArgs(query="cats"), settings=_settings())
        assert result.is_error is True
        assert result.text == "Error performing search: Webhook error: 500 Internal Server Error"

    @patch("src.tools.search_tools.post_json")
    def test_unexpected_exception_is_error_result(self, mock_post):
        from src.core.protocol import SearchArgs
        from src.tools.search_tools import web_search
        mock_post.side_effect = RuntimeError("connection reset")
        result = web_search(SearchArgs(query="cats"), settings=_settings())
        assert result.is_error is True
        assert result.text.startswith("Error performing search: ")
        assert "connection reset" in result.text

    def test_unconfigured_url_is_error_result(self):
        from src.core.protocol import SearchArgs
        from src.tools.search_tools import web_search
        from src.utils.config import Settings
        result = web_search(SearchArgs(query="cats"), settings=Settings())
        assert result.is_error is True
        assert "not configured" in result.text


class TestNewsSearch:

    @patch("src.tools.search_tools.post_json")
    def test_success_uses_news_banner_and_hook(self, mock_post):
        from src.core.protocol import SearchArgs
        from src.tools.search_tools import news_search
        mock_post.return_value = {"articles": [{"title": "Cats win"}]}
        result = news_search(SearchArgs(query="cats", freshness="pd"), settings=_settings())
        assert result.is_error is False
        assert result.text == 'News Results:\n\n{"articles":[{"title":"Cats win"}]}'
        assert mock_post.call_args[0][0] == "https://hook.test/news"

    @patch("src.tools.search_tools.post_json")
    def test_failure_message(self, mock_post):
        from src.core.protocol import SearchArgs
        from src.tools.search_tools import news_search
        from src.tools.webhook import WebhookError
        mock_post.side_effect = WebhookError("Webhook error: 502 Bad Gateway")
        result = news_search(SearchArgs(query="cats"), settings=_settings())
        assert result.is_error is True
        assert result.text == "Error performing search: Webhook error: 502 Bad Gateway"


class TestWeatherLookup:

    @patch("urllib.request.urlopen")
    def test_body_posted_verbatim(self, mock_urlopen):
        from src.core.protocol import WeatherArgs
        from src.tools.weather_tools import weather_lookup
        resp = MagicMock(status=200, reason="OK")
        resp.read.return_value = b'{"temp_C": "21"}'
        mock_urlopen.return_value.__enter__.return_value = resp

        result = weather_lookup(WeatherArgs(location="NYC", options="1m"), settings=_settings())

        req = mock_urlopen.call_args[0][0]
        assert req.full_url == "https://hook.test/weather"
        assert req.data == b'{"location":"NYC","options":"1m"}'
        assert result.is_error is False
        assert result.text == '{"temp_C":"21"}'

    @patch("src.tools.weather_tools.post_json")
    def test_options_omitted_when_missing(self, mock_post):
        from src.core.protocol import WeatherArgs
        from src.tools.weather_tools import weather_lookup
        mock_post.return_value = {}
        weather_lookup(WeatherArgs(location="LHR"), settings=_settings())
        assert mock_post.call_args[0][1] == {"location": "LHR"}

    @patch("src.tools.weather_tools.post_json")
    def test_no_banner(self, mock_post):
        from src.core.protocol import WeatherArgs
        from src.tools.weather_tools import weather_lookup
        mock_post.return_value = [1, 2]
        assert weather_lookup(WeatherArgs(location="NYC"), settings=_settings()).text == "[1,2]"

    @patch("src.tools.weather_tools.post_json")
    def test_failure_is_error_result(self, mock_post):
        from src.core.protocol import WeatherArgs
        from src.tools.weather_tools import weather_lookup
        mock_post.side_effect = ValueError("bad json")
        result = weather_lookup(WeatherArgs(location="NYC"), settings=_settings())
        assert result.is_error is True
        assert result.text == "Error performing search: bad json"
