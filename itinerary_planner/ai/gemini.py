# ai/gemini.py
# ------------------------------------------------------------------------------
from __future__ import annotations

import logging
import textwrap
from typing import Sequence

import google.generativeai as genai
from google.api_core.exceptions import GoogleAPIError

from itinerary_planner.config import Settings
from itinerary_planner.core.models import Entry

logger = logging.getLogger(__name__)

NO_RESPONSE = "No response generated."

# ──────────────────────────────────────────────────────────────────────────────
# Helper: get a configured Gemini model
# ──────────────────────────────────────────────────────────────────────────────
def _get_model(settings: Settings):
    genai.configure(api_key=settings.gemini_api_key)
    return genai.GenerativeModel(settings.gemini_model)

# ──────────────────────────────────────────────────────────────────────────────
# Prompt template – multi-stop itinerary in "**Day N (date):**" blocks
# ──────────────────────────────────────────────────────────────────────────────
_PROMPT_TEMPLATE = textwrap.dedent(
    """\
    Generate a family-friendly travel itinerary based on the following locations and dates:

    {entries_block}

    Include:
    - Suggested transportation between locations if there are multiple destinations (e.g., train, flight, rental car)
    - Activities
    - Sightseeing
    - Local cuisine
    - Recommended accommodations

    Format the itinerary like this:
    **Day 1 (June 1, 2025):** Activity 1, Activity 2, etc.
    **Transportation:** If applicable, describe the travel method and time between locations.
    **Day 2 (June 2, 2025):** Activity 1, Activity 2, etc.

    Make sure the itinerary includes travel time between cities if there are multiple stops.

    Keep the tone friendly and informative.
    """
)


def format_entries(entries: Sequence[Entry]) -> str:
    return "\n".join(
        f"Location {i}: {e.location} ({e.start.isoformat()} to {e.end.isoformat()})"
        for i, e in enumerate(entries, start=1)
    )


def build_prompt(entries: Sequence[Entry]) -> str:
    """Return the itinerary prompt for the ordered list of stops."""
    return _PROMPT_TEMPLATE.format(entries_block=format_entries(entries))

# ──────────────────────────────────────────────────────────────────────────────
# Generate itinerary text
# ──────────────────────────────────────────────────────────────────────────────
def generate_itinerary(prompt: str, settings: Settings) -> str:
    """
    Raw itinerary text from Gemini. A failed or empty answer yields NO_RESPONSE
    so the flight search can still run.
    """
    try:
        model = _get_model(settings)
        resp = model.generate_content(
            prompt, request_options={"timeout": settings.gemini_timeout}
        )
        text = resp.text
    except (GoogleAPIError, ValueError, IndexError, AttributeError) as exc:
        logger.warning("Gemini generation failed: %s", exc)
        return NO_RESPONSE

    if not text or not text.strip():
        logger.warning("Gemini returned an empty itinerary")
        return NO_RESPONSE

    logger.info("Gemini itinerary generated (%d chars)", len(text))
    return text
