"""
Services package: prompt rendering and the completion provider client.
"""

from .prompts import build_itinerary_prompt, strip_code_fences
from .completion_client import OpenRouterClient, NO_ITINERARY_FOUND

__all__ = [
    "build_itinerary_prompt",
    "strip_code_fences",
    "OpenRouterClient",
    "NO_ITINERARY_FOUND",
]
