"""
Tests for the completion client, with HTTP mocked out.
"""

import json
from unittest.mock import patch

import requests

from wiseowl.llm import CompletionClient, build_messages

OK_BODY = {"choices": [{"message": {"role": "assistant", "content": "Готово"}}]}


def make_response(status_code, body):
    resp = requests.Response()
    resp.status_code = status_code
    resp._content = json.dumps(body).encode("utf-8") if not isinstance(body, bytes) else body
    resp.url = "http://completions.test/v1/chat/completions"
    return resp


def make_client(**kwargs):
    kwargs.setdefault("base_url", "http://completions.test/v1/chat/completions")
    kwargs.setdefault("model", "test-model")
    kwargs.setdefault("api_key", "")
    return CompletionClient(**kwargs)


class TestCompletionClient:
    """CompletionClient.chat."""

    @patch("wiseowl.llm.requests.post")
    def test_payload_with_tools(self, mock_post):
        mock_post.return_value = make_response(200, OK_BODY)
        tools = [{"type": "function", "function": {"name": "stopAgent", "parameters": {}}}]

        result = make_client().chat([{"role": "user", "content": "стоп"}], tools=tools, temperature=0.2)

        assert result == OK_BODY
        payload = mock_post.call_args.kwargs["json"]
        assert payload["model"] == "test-model"
        assert payload["tools"] == tools
        assert payload["tool_choice"] == "auto"
        assert payload["temperature"] == 0.2

    @patch("wiseowl.llm.requests.post")
    def test_no_tools_key_when_empty(self, mock_post):
        mock_post.return_value = make_response(200, OK_BODY)

        make_client().chat([{"role": "user", "content": "привет"}], tools=[])

        payload = mock_post.call_args.kwargs["json"]
        assert "tools" not in payload
        assert "tool_choice" not in payload

    @patch("wiseowl.llm.requests.post")
    def test_bearer_auth(self, mock_post):
        mock_post.return_value = make_response(200, OK_BODY)

        make_client(api_key="sk-test").chat([])

        headers = mock_post.call_args.kwargs["headers"]
        assert headers["Authorization"] == "Bearer sk-test"

    @patch("wiseowl.llm.requests.post")
    def test_no_auth_without_key(self, mock_post):
        mock_post.return_value = make_response(200, OK_BODY)

        make_client().chat([])

        assert "Authorization" not in mock_post.call_args.kwargs["headers"]

    @patch("wiseowl.llm.time.sleep")
    @patch("wiseowl.llm.requests.post")
    def test_client_error_not_retried(self, mock_post, mock_sleep):
        mock_post.return_value = make_response(400, b"bad request")

        result = make_client().chat([])

        assert result["error"].startswith("HTTP 400")
        assert mock_post.call_count == 1
        mock_sleep.assert_not_called()

    @patch("wiseowl.llm.time.sleep")
    @patch("wiseowl.llm.requests.post")
    def test_server_error_retried(self, mock_post, mock_sleep):
        mock_post.side_effect = [make_response(502, b"bad gateway"), make_response(200, OK_BODY)]

        result = make_client().chat([])

        assert result == OK_BODY
        assert mock_post.call_count == 2
        mock_sleep.assert_called_once_with(1)

    @patch("wiseowl.llm.time.sleep")
    @patch("wiseowl.llm.requests.post")
    def test_timeouts_exhaust_retries(self, mock_post, mock_sleep):
        mock_post.side_effect = requests.exceptions.Timeout("slow")

        result = make_client(max_retries=3).chat([])

        assert "after 3 attempts" in result["error"]
        assert mock_post.call_count == 3
        assert [c.args[0] for c in mock_sleep.call_args_list] == [1, 2, 4]

    @patch("wiseowl.llm.time.sleep")
    @patch("wiseowl.llm.requests.post")
    def test_unexpected_body(self, mock_post, mock_sleep):
        mock_post.return_value = make_response(200, {"id": "x"})

        result = make_client().chat([])

        assert "error" in result
        assert mock_post.call_count == 1

    @patch("wiseowl.llm.time.sleep")
    @patch("wiseowl.llm.requests.post")
    def test_non_object_body(self, mock_post, mock_sleep):
        mock_post.return_value = make_response(200, ["not", "a", "dict"])

        result = make_client().chat([])

        assert "JSON object" in result["error"]
        assert mock_post.call_count == 1


class TestBuildMessages:
    """build_messages."""

    def test_system_history_and_user(self):
        history = [
            {"role": "user", "content": "покажи книги"},
            {"role": "assistant", "content": "Вот книги"},
        ]

        messages = build_messages("а пользователей?", history, system_prompt="Ты библиотекарь")

        assert messages == [
            {"role": "system", "content": "Ты библиотекарь"},
            {"role": "user", "content": "покажи книги"},
            {"role": "assistant", "content": "Вот книги"},
            {"role": "user", "content": "а пользователей?"},
        ]

    def test_history_trimmed(self):
        history = [{"role": "user", "content": str(i)} for i in range(15)]

        messages = build_messages("next", history, max_history=10)

        assert len(messages) == 11
        assert messages[0]["content"] == "5"

    def test_other_roles_dropped(self):
        history = [
            {"role": "system", "content": "note"},
            {"role": "tool", "content": "{}"},
            {"role": "assistant", "content": None},
        ]

        messages = build_messages("hi", history)

        assert messages == [
            {"role": "assistant", "content": ""},
            {"role": "user", "content": "hi"},
        ]

    def test_no_history(self):
        assert build_messages("hi", None) == [{"role": "user", "content": "hi"}]
