"""
Pydantic schemas for the JourneyCraft API
"""
from .requests import TripRequest
from .completion import ChatMessage, PromptPayload, Choice, ChoiceMessage, CompletionResponse

__all__ = [
    # API request models
    "TripRequest",
    # Completion provider wire models
    "ChatMessage",
    "PromptPayload",
    "Choice",
    "ChoiceMessage",
    "CompletionResponse",
]
