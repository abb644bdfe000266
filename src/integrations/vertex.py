"""Generative model adapter for Gemini models served by Vertex AI."""

from __future__ import annotations

import logging

from google import genai

logger = logging.getLogger(__name__)


class GenerativeModel:
    """Single-shot text generation. No streaming, no tools."""

    def __init__(self, client: genai.Client) -> None:
        self._client = client

    @classmethod
    def connect(cls, project: str, location: str) -> GenerativeModel:
        """Build a Vertex AI backed client from application-default credentials."""
        return cls(genai.Client(vertexai=True, project=project, location=location))

    async def generate(self, model: str, prompt: str) -> str:
        """Send *prompt* to *model* and return the generated text."""
        response = await self._client.aio.models.generate_content(model=model, contents=prompt)
        return response.text or ""
