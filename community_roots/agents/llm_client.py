"""Unified LLM client over OpenAI-compatible endpoints."""

import json
import logging
from typing import Optional

from openai import AsyncOpenAI

from community_roots.config import settings

logger = logging.getLogger(__name__)


class LLMClient:
    """Async chat-completions client; Gemini by default."""

    PROVIDERS = {
        "gemini": {
            "base_url": "https://generativelanguage.googleapis.com/v1beta/openai/",
            "model": "gemini-2.0-flash",
            "api_key": None
        },
        "openai": {
            "base_url": "https://api.openai.com/v1",
            "model": "gpt-4o-mini",
            "api_key": None
        },
        "groq": {
            "base_url": "https://api.groq.com/openai/v1",
            "model": "llama-3.1-8b-instant",
            "api_key": None
        },
        "ollama": {
            "base_url": "http://localhost:11434/v1",
            "model": "llama3:latest",
            "api_key": "ollama"
        }
    }

    def __init__(self, provider: Optional[str] = None, model: Optional[str] = None,
                 client: Optional[AsyncOpenAI] = None):
        self.provider = provider or settings.llm.provider
        config = self.PROVIDERS.get(self.provider, self.PROVIDERS["gemini"])

        api_key = config["api_key"]
        if self.provider == "gemini":
            api_key = settings.google_api_key
        elif self.provider == "openai":
            api_key = settings.openai_api_key
        elif self.provider == "groq":
            api_key = settings.groq_api_key

        self.client = client or AsyncOpenAI(
            base_url=config["base_url"],
            api_key=api_key or "not-needed",
            timeout=settings.llm.timeout_seconds,
        )
        self.model = model or settings.llm.model or config["model"]

    async def generate(
        self,
        prompt: str,
        system: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None
    ) -> dict:
        messages = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})

        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=settings.llm.temperature if temperature is None else temperature,
                max_tokens=max_tokens or settings.llm.max_tokens
            )

            return {
                "success": True,
                "text": response.choices[0].message.content or "",
                "provider": self.provider,
                "model": self.model
            }

        except Exception as e:
            logger.warning("LLM call to %s failed: %s", self.provider, e)
            return {"success": False, "error": str(e)}

    async def close(self) -> None:
        await self.client.close()

    async def extract_json(self, prompt: str, system: Optional[str] = None) -> dict:
        json_prompt = f"{prompt}\n\nReturn valid JSON only. No markdown. No explanation."

        result = await self.generate(json_prompt, system=system)

        if not result["success"]:
            return result

        try:
            result["parsed"] = parse_json_text(result["text"])
            return result

        except json.JSONDecodeError as e:
            return {
                "success": False,
                "error": f"JSON parse error: {str(e)}",
                "raw_text": result["text"]
            }


def parse_json_text(text: str):
    """Parse JSON out of a model reply, tolerating markdown fences."""
    text = text.strip()

    if "```json" in text:
        text = text.split("```json")[1].split("```")[0]
    elif "```" in text:
        parts = text.split("```")
        if len(parts) >= 2:
            text = parts[1]

    return json.loads(text.strip())
