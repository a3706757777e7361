import logging
import httpx
from typing import Optional

from pgx_explainer.core.config import GeminiSettings, get_settings
from pgx_explainer.core.exceptions import MalformedResponseError, TransportError

logger = logging.getLogger(__name__)


class GeminiClient:
    """
    Client for Google's Gemini generateContent API.
    Requests JSON-typed output. One attempt per call, no retries.
    """

    def __init__(self, settings: Optional[GeminiSettings] = None, http_client: Optional[httpx.AsyncClient] = None):
        self.settings = settings or get_settings()
        self.model = self.settings.model
        self.generate_endpoint = f"{self.settings.api_base}/models/{self.model}:generateContent"
        self._http_client = http_client

    def build_payload(self, prompt: str) -> dict:
        return {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {"responseMimeType": "application/json"},
        }

    async def generate_json_text(self, prompt: str) -> str:
        """
        Sends a single user prompt and returns the raw response text.

        Raises:
            TransportError: request failed or returned a non-success status.
            MalformedResponseError: the response envelope has no candidate text.
        """
        logger.info("Sending request to Gemini", extra={"model": self.model})

        payload = self.build_payload(prompt)
        headers = {
            "x-goog-api-key": self.settings.api_key,
            "Content-Type": "application/json",
        }

        try:
            if self._http_client is not None:
                response = await self._http_client.post(
                    self.generate_endpoint, json=payload, headers=headers, timeout=self.settings.timeout_seconds
                )
            else:
                async with httpx.AsyncClient(timeout=self.settings.timeout_seconds) as client:
                    response = await client.post(self.generate_endpoint, json=payload, headers=headers)
            response.raise_for_status()
        except (httpx.HTTPStatusError, httpx.RequestError) as e:
            raise TransportError(f"Error communicating with Gemini: {e}") from e

        try:
            data = response.json()
            parts = data["candidates"][0]["content"]["parts"]
            generated_text = "".join(part.get("text", "") for part in parts)
        except (ValueError, KeyError, IndexError, TypeError, AttributeError) as e:
            raise MalformedResponseError(f"Unexpected Gemini response envelope: {e}") from e

        logger.info("Gemini request successful", extra={"response_length": len(generated_text)})
        return generated_text
