"""Gemini API adapter - HTTP client for text generation."""

import logging

import requests

logger = logging.getLogger(__name__)

API_BASE = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-2.0-flash"


class GeminiAPIService:
    """
    Google Generative Language API adapter.

    Implements LLMService protocol. No business logic - just I/O.
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        timeout: int = 60,
        session: requests.Session | None = None,
    ):
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self._session = session or requests.Session()

    def generate(self, prompt: str) -> str:
        """Generate text from a prompt. Returns complete response."""
        if not self.api_key:
            raise RuntimeError("No Gemini API key. Set GEMINI_API_KEY in taskdesk.conf or the environment.")

        try:
            resp = self._session.post(
                f"{API_BASE}/models/{self.model}:generateContent",
                params={"key": self.api_key},
                json={"contents": [{"role": "user", "parts": [{"text": prompt}]}]},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Gemini request failed: {e}")
            raise RuntimeError(f"Gemini request failed: {e}") from e

        if resp.status_code != 200:
            logger.error(f"Gemini API error {resp.status_code}: {resp.text}")
            raise RuntimeError(f"Gemini API error {resp.status_code}")

        try:
            data = resp.json()
            parts = data["candidates"][0]["content"]["parts"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            logger.error(f"Unexpected Gemini response: {resp.text[:500]}")
            raise RuntimeError("Unexpected Gemini response") from e

        return "".join(part.get("text", "") for part in parts)
