"""
LLM Service for reading profile screenshots with a vision model.
"""
import asyncio
import time
from typing import Optional

import openai
from openai import AsyncOpenAI

from ...config import settings
from ...exceptions import TransportFailure
from ...logging_config import setup_logging

logger = setup_logging("llm_service")


class VisionLLMService:
    """Service for interacting with a multimodal chat-completion model."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        max_tokens: Optional[int] = None,
        timeout: Optional[float] = None,
        client: Optional[AsyncOpenAI] = None,
    ):
        """Initialize the LLM service.

        Args:
            api_key: OpenAI credential, defaults to ``OPENAI_API_KEY``
            model: Chat model name
            max_tokens: Output budget per completion
            timeout: Seconds allowed for one completion
            client: Pre-built client, mainly for tests
        """
        self.api_key = api_key or settings.openai_api_key
        self.model = model or settings.openai_model
        self.max_tokens = max_tokens or settings.max_output_tokens
        self.timeout = timeout or settings.request_timeout
        self._client = client

    @property
    def is_configured(self) -> bool:
        return self._client is not None or bool(self.api_key)

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            if not self.api_key:
                raise TransportFailure("OPENAI_API_KEY is not configured")
            self._client = AsyncOpenAI(api_key=self.api_key, timeout=self.timeout, max_retries=0)
        return self._client

    async def process_image(self, instruction: str, image_data_url: str) -> str:
        """Send one instruction plus one image and return the completion text.

        Raises:
            TransportFailure: the model could not be reached, rejected the
                request, or did not answer within ``timeout`` seconds.
        """
        client = self._get_client()
        started = time.monotonic()
        try:
            response = await asyncio.wait_for(
                client.chat.completions.create(
                    model=self.model,
                    messages=[
                        {
                            "role": "user",
                            "content": [
                                {"type": "text", "text": instruction},
                                {"type": "image_url", "image_url": {"url": image_data_url}},
                            ],
                        }
                    ],
                    max_tokens=self.max_tokens,
                ),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as e:
            raise TransportFailure(f"Vision model timed out after {self.timeout}s") from e
        except openai.APIError as e:
            raise TransportFailure(f"Vision model request failed: {e}") from e

        duration_ms = int((time.monotonic() - started) * 1000)
        usage = getattr(response, "usage", None)
        logger.debug(
            "Vision completion received",
            extra={
                "model": self.model,
                "duration_ms": duration_ms,
                "total_tokens": getattr(usage, "total_tokens", None),
            },
        )

        if not response.choices:
            return ""
        return response.choices[0].message.content or ""
