"""
Prompt rendering and reply clean-up for itinerary generation.
"""

import re
from typing import Optional

from backend.schemas import TripRequest

ITINERARY_PROMPT = (
    "Plan a {days}-day trip to {destination}. "
    "Write a day-by-day itinerary where every day starts on its own line with \"Day N:\" "
    "(Day 1:, Day 2:, and so on) and is split into Morning, Lunch, Afternoon and Evening "
    "sections, each with a short description of the activities. "
    "Return plain text only. Do not use markdown, code blocks, code fences or backticks, "
    "and do not add any introduction or explanation before the itinerary. "
    "After the last day, add a plain-text list of practical travel tips for the destination."
)

THEME_CLAUSE = " Focus on {theme} experiences."
PACE_CLAUSE = " The trip pace should be {pace}."

# Opening fence with an optional language tag on its own line, e.g. ```text
_FENCE_OPEN = re.compile(r"```[\w+-]*[ \t]*\r?\n")
_FENCE = re.compile(r"```")


def _present(value: Optional[str]) -> bool:
    return value is not None and value != ""


def build_itinerary_prompt(request: TripRequest) -> str:
    """
    Render the instruction sent to the completion provider.

    Theme and pace sentences are only added when the request carries a
    non-empty value for them.
    """
    prompt = ITINERARY_PROMPT.format(days=request.days, destination=request.destination)
    if _present(request.theme):
        prompt += THEME_CLAUSE.format(theme=request.theme)
    if _present(request.pace):
        prompt += PACE_CLAUSE.format(pace=request.pace)
    return prompt


def strip_code_fences(text: str) -> str:
    """Remove ``` fences (and their language tags) and trim surrounding whitespace."""
    if not text:
        return ""
    text = _FENCE_OPEN.sub("", text)
    text = _FENCE.sub("", text)
    return text.strip()
