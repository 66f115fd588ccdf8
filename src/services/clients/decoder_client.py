"""Decoder client abstractions and implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Annotated, Any

from fastapi import Depends, Request
from openai import AsyncOpenAI

if TYPE_CHECKING:
    from src.config import Settings


class DecoderClient(ABC):
    """Abstract decoder interface for text generation models."""

    @abstractmethod
    async def decode(self, prompt: str, *, system: str | None = None) -> str:
        """Return the decoded/completed text for the provided prompt."""


class OpenAIDecoderClient(DecoderClient):
    """Decoder implementation backed by OpenAI Responses API."""

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        base_url: str | None = None,
    ) -> None:
        if not api_key:
            raise ValueError("OpenAI API key is required to initialize decoder client")
        self._client = AsyncOpenAI(api_key=api_key, base_url=base_url or None)
        self._model = model

    async def decode(self, prompt: str, *, system: str | None = None) -> str:
        """Send the prompt to OpenAI and return the aggregated text output."""

        responses_api = getattr(self._client, "responses", None)
        if responses_api is not None:
            return await self._decode_with_responses(responses_api, prompt, system)

        chat_api = getattr(getattr(self._client, "chat", None), "completions", None)
        if chat_api is not None:
            return await self._decode_with_chat_completions(chat_api, prompt, system)

        raise RuntimeError(
            "OpenAI client does not expose Responses or Chat Completions endpoints",
        )

    async def _decode_with_responses(
        self,
        responses_api: Any,
        prompt: str,
        system: str | None,
    ) -> str:
        kwargs: dict[str, Any] = {"model": self._model, "input": prompt}
        if system:
            kwargs["instructions"] = system
        response = await responses_api.create(**kwargs)

        text = getattr(response, "output_text", None)
        if text:
            return text

        pieces: list[str] = []
        for block in response.output or []:
            for part in getattr(block, "content", None) or []:
                if getattr(part, "type", None) == "output_text" and part.text:
                    pieces.append(part.text)
        return "".join(pieces)

    async def _decode_with_chat_completions(
        self,
        chat_api: Any,
        prompt: str,
        system: str | None,
    ) -> str:
        messages = [{"role": "user", "content": prompt}]
        if system:
            messages.insert(0, {"role": "system", "content": system})
        completion = await chat_api.create(model=self._model, messages=messages)

        if getattr(completion, "choices", None):
            content = getattr(completion.choices[0].message, "content", None)
            if content:
                return content
        return ""


def build_decoder_client(settings: Settings) -> DecoderClient | None:
    """Create the decoder described by ``settings``, or None when disabled."""

    if not settings.decoder_enabled:
        return None
    return OpenAIDecoderClient(
        api_key=settings.OPENAI_API_KEY,
        model=settings.OPENAI_MODEL,
        base_url=settings.OPENAI_BASE_URL,
    )


def get_decoder_client(request: Request) -> DecoderClient | None:
    """FastAPI dependency returning the decoder the app was built with."""

    return getattr(request.app.state, "decoder", None)


DecoderDependency = Annotated[DecoderClient | None, Depends(get_decoder_client)]
