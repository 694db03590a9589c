"""
WiseOwl Completion Client
=========================
Sends chat completion requests, with the selected tool subset attached, to
an OpenAI-compatible endpoint.
"""

from __future__ import annotations

import time
from typing import Any, Dict, List, Optional

import requests

from .config import settings
from .utils import log


class CompletionClient:
    """
    Client for an OpenAI-compatible chat completions endpoint.
    Features:
    - Auto-retry with exponential backoff on timeouts, connection errors and 5xx
    - Bearer authentication when an API key is configured
    - Errors reported as {"error": ...} dicts instead of exceptions
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: int = 3
    ):
        self.base_url = base_url or settings.COMPLETION_API_URL
        self.model = model or settings.COMPLETION_MODEL
        self.api_key = api_key if api_key is not None else settings.COMPLETION_API_KEY
        self.timeout = float(timeout or settings.COMPLETION_TIMEOUT)
        self.max_retries = max_retries

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    def chat(
        self,
        messages: List[Dict[str, Any]],
        tools: Optional[List[Dict[str, Any]]] = None,
        tool_choice: str = "auto",
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
        extra: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Send a chat completion request."""
        payload: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
        }
        if temperature is not None:
            payload["temperature"] = float(temperature)
        if max_tokens is not None:
            payload["max_tokens"] = int(max_tokens)
        if tools:
            payload["tools"] = tools
            payload["tool_choice"] = tool_choice
        if extra and isinstance(extra, dict):
            payload.update(extra)

        last_error = None
        for attempt in range(self.max_retries):
            try:
                resp = requests.post(
                    self.base_url, json=payload, headers=self._headers(), timeout=self.timeout
                )
                resp.raise_for_status()
                result = resp.json()

                if not isinstance(result, dict):
                    raise ValueError(f"Expected a JSON object, got {type(result).__name__}")
                if 'choices' not in result and 'error' not in result:
                    raise ValueError(f"Unexpected response structure: {list(result.keys())}")

                return result

            except requests.exceptions.Timeout as e:
                last_error = e
                wait_time = 2 ** attempt
                log.warning(f"[LLM] Timeout on attempt {attempt + 1}, retrying in {wait_time}s...")
                time.sleep(wait_time)

            except requests.exceptions.ConnectionError as e:
                last_error = e
                wait_time = 2 ** attempt
                log.warning(f"[LLM] Connection error on attempt {attempt + 1}, retrying in {wait_time}s...")
                time.sleep(wait_time)

            except requests.exceptions.HTTPError as e:
                if e.response is not None and e.response.status_code < 500:
                    return {"error": f"HTTP {e.response.status_code}: {e.response.text[:200]}"}
                last_error = e
                wait_time = 2 ** attempt
                log.warning(f"[LLM] Server error on attempt {attempt + 1}, retrying in {wait_time}s...")
                time.sleep(wait_time)

            except ValueError as e:
                last_error = e
                log.error(f"[LLM] Bad response: {e}")
                break

        return {"error": f"Completion request failed after {self.max_retries} attempts: {last_error}"}


def build_messages(
    message: str,
    history: Optional[List[Dict[str, Any]]] = None,
    system_prompt: Optional[str] = None,
    max_history: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """
    Assemble the message list for one request.

    Keeps the last ``max_history`` user/assistant messages from ``history``
    and drops anything else (system notes, tool traces).
    """
    if max_history is None:
        max_history = settings.MAX_HISTORY_MESSAGES

    messages: List[Dict[str, Any]] = []
    if system_prompt:
        messages.append({"role": "system", "content": system_prompt})

    recent = history[-max_history:] if history and max_history > 0 else []
    for msg in recent:
        if msg.get("role") in ("user", "assistant"):
            messages.append({"role": msg["role"], "content": msg.get("content") or ""})

    messages.append({"role": "user", "content": message})
    return messages


# ================================================================================
# GLOBAL CLIENT
# ================================================================================

_client: Optional[CompletionClient] = None


def get_completion_client() -> CompletionClient:
    """Get or create the global completion client."""
    global _client
    if _client is None:
        _client = CompletionClient()
    return _client
