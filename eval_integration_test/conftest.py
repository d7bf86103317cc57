import os
import pytest
from backend.services.llm_service import LLMService


@pytest.fixture
def llm_service():
    """Provide a real LLMService instance backed by the live OpenAI API."""
    if not os.getenv("OPENAI_API_KEY"):
        pytest.skip("OPENAI_API_KEY not set, skipping live LLM eval tests")
    return LLMService()
