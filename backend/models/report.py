from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime, timezone


class LLMCallLog(BaseModel):
    step_name: str
    model: str
    system_prompt: str
    user_prompt: str
    response: str
    tokens_used: Optional[int] = None
    duration_ms: Optional[float] = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
