"""
Pydantic schemas for the chat-completion provider wire format.
Only the fields the itinerary flow reads are modelled; everything else is ignored.
"""
from typing import List, Literal, Optional

from pydantic import BaseModel, Field


# ============================================================================
# OUTBOUND (sent to the provider)
# ============================================================================

class ChatMessage(BaseModel):
    """Single chat message"""
    role: Literal["system", "user", "assistant"] = "user"
    content: str


class PromptPayload(BaseModel):
    """Body of a chat-completions request"""
    model: str = Field(..., description="Provider model identifier")
    messages: List[ChatMessage] = Field(..., description="Ordered conversation")
    temperature: float = Field(default=0.7, description="Sampling temperature")


# ============================================================================
# INBOUND (parsed from the provider)
# ============================================================================

class ChoiceMessage(BaseModel):
    content: Optional[str] = None

    class Config:
        extra = "ignore"


class Choice(BaseModel):
    message: Optional[ChoiceMessage] = None

    class Config:
        extra = "ignore"


class CompletionResponse(BaseModel):
    """Parsed chat-completions reply"""
    choices: Optional[List[Choice]] = None

    class Config:
        extra = "ignore"

    def first_content(self) -> Optional[str]:
        """Content of the first choice, or None when the reply carries none."""
        if not self.choices:
            return None
        message = self.choices[0].message
        return message.content if message else None
