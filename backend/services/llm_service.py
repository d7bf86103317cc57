import time
import os
import logging
from openai import OpenAI
from dotenv import load_dotenv

from backend.models.report import LLMCallLog

load_dotenv()
logger = logging.getLogger(__name__)


class LLMService:
    def __init__(self):
        self.client = OpenAI(api_key=os.getenv("OPENAI_API_KEY"))
        self.model = os.getenv("OPENAI_MODEL", "gpt-4.1-nano")
        self.call_logs: list[LLMCallLog] = []

    async def text_completion(
        self,
        system_prompt: str,
        user_prompt: str,
        step_name: str,
    ) -> str:
        """Call OpenAI for a free-text response (e.g., valuation analysis)."""
        import asyncio
        return await asyncio.to_thread(
            self._text_completion_sync, system_prompt, user_prompt, step_name,
        )

    def _text_completion_sync(
        self,
        system_prompt: str,
        user_prompt: str,
        step_name: str,
    ) -> str:
        start = time.time()
        response = self.client.chat.completions.create(
            model=self.model,
            temperature=0.0,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
        )
        duration_ms = (time.time() - start) * 1000
        content = response.choices[0].message.content or ""
        tokens = response.usage.total_tokens if response.usage else None

        logger.info(
            f"LLM text call [{step_name}]: model={self.model}, "
            f"tokens={tokens}, duration={duration_ms:.0f}ms"
        )
        logger.info(f"LLM [{step_name}] response: {content[:500]}...")

        self.call_logs.append(LLMCallLog(
            step_name=step_name,
            model=self.model,
            system_prompt=system_prompt,
            user_prompt=user_prompt,
            response=content,
            tokens_used=tokens,
            duration_ms=duration_ms,
        ))
        return content
