"""
Purpose:
- Load the static sound-effect catalog (name + description pairs) once at startup.
- Render it for the prompt so Gemini can pick an entry by name.
- Split the model's "<roast>\\nSound: <name>" reply and resolve the name against the catalog.

How it's used:
- create_app() builds one SoundCatalog and keeps it on app.state; handlers only read it.
- Unknown or missing names resolve to the catalog's default sound.
"""

from __future__ import annotations
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Set, Tuple

logger = logging.getLogger(__name__)

SOUND_MARKER = "Sound: "


@dataclass(frozen=True)
class SoundEffect:
    name: str          # file name in the bucket, e.g. "Rimshot.mp3"
    description: str


@dataclass(frozen=True)
class SoundCatalog:
    effects: Tuple[SoundEffect, ...]
    default: str

    def __post_init__(self):
        if self.default not in self.names():
            raise ValueError(f"default sound {self.default!r} is not in the catalog")

    def names(self) -> Tuple[str, ...]:
        return tuple(e.name for e in self.effects)

    def get(self, name: Optional[str]) -> Optional[SoundEffect]:
        for effect in self.effects:
            if effect.name == name:
                return effect
        return None

    def resolve(self, name: Optional[str]) -> str:
        """Exact catalog name, else the default."""
        return name if self.get(name) is not None else self.default

    def render(self) -> str:
        return "\n".join(f"{e.name}: {e.description}" for e in self.effects)


def load_catalog(path: Path, default: str) -> SoundCatalog:
    """
    Read a JSON list of {"name", "description"} objects.
    Raises on a missing/unreadable file or a malformed entry; this runs once at startup.
    """
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(raw, list):
        raise ValueError(f"sound catalog {path} must be a JSON list")

    effects = []
    seen: Set[str] = set()
    for i, item in enumerate(raw):
        if not isinstance(item, dict) or not isinstance(item.get("name"), str) or not item["name"].strip():
            raise ValueError(f"sound catalog {path}: entry {i} has no name")
        name = item["name"].strip()
        if name in seen:
            raise ValueError(f"sound catalog {path}: duplicate name {name!r}")
        seen.add(name)
        effects.append(SoundEffect(name=name, description=str(item.get("description", "")).strip()))

    catalog = SoundCatalog(effects=tuple(effects), default=default)
    logger.info("Loaded %d sound effects from %s (default=%s)", len(effects), path, default)
    return catalog


def split_sound_choice(text: str) -> Tuple[str, Optional[str]]:
    """
    "<roast>\\nSound: <name>" -> (roast, name). No marker -> (whole text, None).
    Both segments are stripped; an empty name counts as missing.
    """
    roast, marker, name = text.partition(SOUND_MARKER)
    if not marker:
        return text.strip(), None
    return roast.strip(), (name.strip() or None)


def pick_sound(text: str, catalog: SoundCatalog) -> Tuple[str, str]:
    """Return (roast_text, sound file name guaranteed to be in the catalog)."""
    roast, name = split_sound_choice(text)
    resolved = catalog.resolve(name)
    if name is None:
        logger.warning("No sound chosen; using default %s", catalog.default)
    elif resolved != name:
        logger.warning("Sound %r not in catalog; using default %s", name, catalog.default)
    return roast, resolved


def sound_url(base_url: str, name: str) -> str:
    return f"{base_url.rstrip('/')}/{name}"
