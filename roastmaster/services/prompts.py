"""
Purpose:
- Prompt templates for the three roast modes (text, vision, vision + sound pick).
- Canned roasts used when Gemini returns no usable text.

Extensibility:
- Add/adapt lines in FALLBACK_ROASTS; each must keep the {description} placeholder.
"""

from __future__ import annotations
import random
from typing import List, Optional

DEFAULT_DESCRIPTION = "something random"

TEXT_PROMPT = (
    'You are a witty comedian. Create a funny, lighthearted roast based on: "{description}". '
    "Keep it short (2 sentences max), clever, and never mean-spirited."
)

VISION_PROMPT = (
    "You are a witty comedian. Look at this image and create a funny, lighthearted roast about what you see. "
    "Keep it short (2-3 sentences), clever, and never mean-spirited. "
    "Focus on appearance, clothing, expression, or setting."
)

SOUND_PROMPT = (
    VISION_PROMPT
    + "\n\nThen pick the ONE sound effect from this list that best punctuates your roast:\n"
    + "{catalog}\n\n"
    + "Reply in exactly this format:\n"
    + "<your roast>\n"
    + "Sound: <sound effect name>"
)

VISION_FALLBACK = "Looking good... I guess?"

FALLBACK_ROASTS: List[str] = [
    "Wow, {description}. That's certainly... a choice.",
    "I've seen a lot in my time, but {description}? That's something special.",
    "Looking at you with {description} - bold strategy, let's see if it pays off.",
    "{description}... Did you lose a bet or is this your natural state?",
    "So we're just out here with {description} and calling it a day? Okay then.",
]


def text_prompt(description: str) -> str:
    return TEXT_PROMPT.format(description=description)


def sound_prompt(rendered_catalog: str) -> str:
    return SOUND_PROMPT.format(catalog=rendered_catalog)


def sound_fallback(default_sound: str) -> str:
    # Same shape the model is asked for, so it goes through the normal parser.
    return f"{VISION_FALLBACK}\nSound: {default_sound}"


def fallback_roast(description: str, rng: Optional[random.Random] = None) -> str:
    """
    Pick one canned roast and drop the description into it.
    Pass a seeded Random for a reproducible pick.
    """
    template = (rng or random).choice(FALLBACK_ROASTS)
    return template.replace("{description}", description)
