from typing import Optional, Protocol

import google.generativeai as genai
from pydantic import BaseModel

from ai_chat.core.logger import get_logger

logger = get_logger(__name__)


class ProviderError(BaseModel):
    message: str


class CompletionResult(BaseModel):
    text: Optional[str] = None
    error: Optional[ProviderError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, text: str) -> "CompletionResult":
        return cls(text=text)

    @classmethod
    def failure(cls, message: str) -> "CompletionResult":
        return cls(error=ProviderError(message=message))


class CompletionProvider(Protocol):
    async def complete(self, prompt: str) -> CompletionResult:
        ...


class GeminiService:
    """Text completion backed by Google Gemini.

    The client is configured once; failures from the SDK are returned as
    ``CompletionResult.error`` instead of being raised.
    """

    def __init__(self, api_key: str, model_name: str = "gemini-2.5-flash"):
        self.api_key = api_key or ""
        self.model_name = model_name

        if not self.api_key:
            logger.warning("⚠️  GEMINI_API_KEY not found in environment!")

        genai.configure(api_key=self.api_key)
        self.model = genai.GenerativeModel(self.model_name)

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    async def complete(self, prompt: str) -> CompletionResult:
        try:
            logger.info(f"🤖 Calling Gemini API ({self.model_name})...")
            response = await self.model.generate_content_async(prompt)
            text = response.text or ""
        except Exception as e:
            logger.exception(f"❌ Error calling Gemini API: {e}")
            return CompletionResult.failure(str(e))

        logger.info(f"✅ Got response: {len(text)} characters")
        return CompletionResult.success(text)
