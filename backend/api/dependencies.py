from functools import lru_cache
from backend.services.llm_service import LLMService


@lru_cache
def get_llm_service() -> LLMService:
    return LLMService()
