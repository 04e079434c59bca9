"""Gemini backed prompt and image generation.

Any object with ``generate_round()`` and ``generate_image_for(prompt)`` can
stand in for GeminiProvider; the app factory accepts one directly.
"""

import logging
from typing import List, Optional

import requests

from promptguess.models import Round

logger = logging.getLogger(__name__)

ROUND_INSTRUCTION = (
    "Generate a short, creative art prompt (max 12 words) for an image guessing game, "
    "and provide the image itself."
)
DEFAULT_MIME_TYPE = 'image/png'


class ProviderError(Exception):
    """The upstream service failed or returned an unusable response."""


class GeminiProvider:
    def __init__(self, api_key: str, model: str = 'gemini-2.0-flash-exp',
                 base_url: Optional[str] = None, timeout: float = 60, session=None):
        self.api_key = api_key
        self.model = model
        self.base_url = (base_url or 'https://generativelanguage.googleapis.com/v1beta').rstrip('/')
        self.timeout = timeout
        self.http = session or requests

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    def generate_round(self) -> Round:
        parts = self._generate(ROUND_INSTRUCTION)
        prompt_text = _first_text(parts)
        image = _first_image(parts)
        if not prompt_text or not image:
            raise ProviderError("Gemini did not return prompt or image")
        logger.info("[provider-round] model=%s prompt_words=%d", self.model, len(prompt_text.split()))
        return Round(prompt=prompt_text, image=image)

    def generate_image_for(self, prompt: str) -> str:
        parts = self._generate(f"provide the image for the prompt: {prompt}")
        image = _first_image(parts)
        if not image:
            raise ProviderError("Gemini did not return an image")
        return image

    def _generate(self, text: str) -> List[dict]:
        payload = {
            'contents': [{'role': 'user', 'parts': [{'text': text}]}],
            'generationConfig': {'responseModalities': ['TEXT', 'IMAGE']},
        }
        try:
            response = self.http.post(
                self.endpoint,
                params={'key': self.api_key},
                json=payload,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise ProviderError(f"Gemini request failed: {exc}") from exc

        if not response.ok:
            raise ProviderError(f"Gemini API error: {response.status_code} {response.reason}")

        try:
            data = response.json()
        except ValueError as exc:
            raise ProviderError("Gemini returned a non-JSON response") from exc

        if not isinstance(data, dict):
            raise ProviderError("Gemini returned an unexpected response")
        candidates = data.get('candidates')
        if not isinstance(candidates, list) or not candidates:
            return []
        candidate = candidates[0]
        if not isinstance(candidate, dict):
            return []
        content = candidate.get('content')
        if not isinstance(content, dict):
            return []
        parts = content.get('parts')
        if not isinstance(parts, list):
            return []
        return [part for part in parts if isinstance(part, dict)]


def _first_text(parts: List[dict]) -> str:
    for part in parts:
        text = part.get('text')
        if isinstance(text, str) and text.strip():
            return text.strip()
    return ''


def _first_image(parts: List[dict]) -> str:
    for part in parts:
        inline = part.get('inlineData')
        if isinstance(inline, dict):
            data = inline.get('data')
            if not isinstance(data, str) or not data:
                return ''
            mime_type = inline.get('mimeType')
            if not isinstance(mime_type, str) or not mime_type:
                mime_type = DEFAULT_MIME_TYPE
            return f"data:{mime_type};base64,{data}"
    return ''
