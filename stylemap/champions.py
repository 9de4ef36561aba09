"""Static champion profiles used to encode each pick's identity.

The registry is built once at import time and exposed through a read-only
mapping, so concurrent map builds can share it without coordination.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Tuple


ROLE_ORDER: Tuple[str, ...] = ("Top", "Jungle", "Mid", "Bot", "Support")
RESOURCE_TYPES: Tuple[str, ...] = ("Mana", "Energy", "Fury", "Grit", "Health", "None")
DAMAGE_TYPES: Tuple[str, ...] = ("Physical", "Magic", "Mixed")
PLAY_PATTERNS: Tuple[str, ...] = (
    "Burst",
    "Control",
    "Skirmisher",
    "Juggernaut",
    "Artillery",
    "Enchanter",
    "Duelist",
    "Specialist",
)

ROLE_COLORS: Mapping[str, str] = MappingProxyType(
    {
        "Top": "#f97316",
        "Jungle": "#22d3ee",
        "Mid": "#6366f1",
        "Bot": "#facc15",
        "Support": "#34d399",
    }
)
NEUTRAL_COLOR = "#94a3b8"


@dataclass(frozen=True)
class StaticProfile:
    role: str
    range: str  # "Melee" | "Ranged"
    resource: str
    damage_type: str
    complexity: int  # 1-10
    tags: Tuple[str, ...]
    play_pattern: str

    @property
    def is_ranged(self) -> bool:
        return self.range == "Ranged"


def _profile(
    role: str,
    range_: str,
    resource: str,
    damage_type: str,
    complexity: int,
    tags: Tuple[str, ...],
    play_pattern: str,
) -> StaticProfile:
    return StaticProfile(
        role=role,
        range=range_,
        resource=resource,
        damage_type=damage_type,
        complexity=complexity,
        tags=tags,
        play_pattern=play_pattern,
    )


_STATIC_DATA: Dict[str, StaticProfile] = {
    "Ahri": _profile("Mid", "Ranged", "Mana", "Magic", 5, ("Mage", "Burst", "Charm"), "Control"),
    "Akali": _profile("Mid", "Melee", "Energy", "Mixed", 8, ("Assassin", "Skirmisher"), "Burst"),
    "Ekko": _profile("Mid", "Melee", "Mana", "Magic", 7, ("Assassin", "Diver"), "Skirmisher"),
    "Katarina": _profile("Mid", "Melee", "None", "Magic", 9, ("Assassin", "Reset"), "Burst"),
    "Lux": _profile("Mid", "Ranged", "Mana", "Magic", 4, ("Mage", "Artillery"), "Artillery"),
    "Orianna": _profile("Mid", "Ranged", "Mana", "Magic", 6, ("Mage", "Control"), "Control"),
    "Syndra": _profile("Mid", "Ranged", "Mana", "Magic", 7, ("Mage", "Burst"), "Control"),
    "Zed": _profile("Mid", "Melee", "Energy", "Physical", 8, ("Assassin",), "Burst"),
    "Yone": _profile("Mid", "Melee", "None", "Mixed", 7, ("Skirmisher", "Reset"), "Duelist"),
    "Fizz": _profile("Mid", "Melee", "Mana", "Magic", 6, ("Assassin",), "Burst"),
    "Garen": _profile("Top", "Melee", "None", "Physical", 2, ("Juggernaut",), "Juggernaut"),
    "Darius": _profile("Top", "Melee", "Mana", "Physical", 5, ("Juggernaut",), "Juggernaut"),
    "Fiora": _profile("Top", "Melee", "Mana", "Physical", 7, ("Duelist",), "Duelist"),
    "Renekton": _profile("Top", "Melee", "Fury", "Physical", 5, ("Diver", "Juggernaut"), "Skirmisher"),
    "Sett": _profile("Top", "Melee", "Grit", "Physical", 3, ("Juggernaut", "Diver"), "Juggernaut"),
    "Vladimir": _profile("Top", "Ranged", "Health", "Magic", 6, ("Mage", "Battlemage"), "Control"),
    "Singed": _profile("Top", "Melee", "Mana", "Magic", 6, ("Specialist",), "Specialist"),
    "Teemo": _profile("Top", "Ranged", "Mana", "Magic", 4, ("Specialist", "Artillery"), "Artillery"),
    "LeeSin": _profile("Jungle", "Melee", "Energy", "Physical", 8, ("Diver", "Skirmisher"), "Skirmisher"),
    "Viego": _profile("Jungle", "Melee", "Mana", "Physical", 7, ("Assassin", "Skirmisher"), "Skirmisher"),
    "Lillia": _profile("Jungle", "Ranged", "Mana", "Magic", 7, ("Skirmisher",), "Skirmisher"),
    "Jinx": _profile("Bot", "Ranged", "Mana", "Physical", 3, ("Marksman",), "Artillery"),
    "Aphelios": _profile("Bot", "Ranged", "Mana", "Physical", 9, ("Marksman",), "Artillery"),
    "Draven": _profile("Bot", "Ranged", "Mana", "Physical", 6, ("Marksman",), "Duelist"),
    "Samira": _profile("Bot", "Ranged", "Mana", "Physical", 6, ("Marksman", "Diver"), "Skirmisher"),
    "Lulu": _profile("Support", "Ranged", "Mana", "Magic", 3, ("Enchanter",), "Enchanter"),
    "Karma": _profile("Support", "Ranged", "Mana", "Magic", 5, ("Enchanter",), "Control"),
    "Thresh": _profile("Support", "Melee", "Mana", "Magic", 7, ("Catcher", "Tank"), "Control"),
    "Nautilus": _profile("Support", "Melee", "Mana", "Magic", 4, ("Tank", "Catcher"), "Control"),
    "Rakan": _profile("Support", "Melee", "Mana", "Magic", 6, ("Enchanter", "Diver"), "Skirmisher"),
}

CHAMPION_STATIC_DATA: Mapping[str, StaticProfile] = MappingProxyType(_STATIC_DATA)

DEFAULT_PROFILE = StaticProfile(
    role="Mid",
    range="Ranged",
    resource="Mana",
    damage_type="Magic",
    complexity=5,
    tags=("Mage",),
    play_pattern="Control",
)


def _canonical_key(name: str) -> str:
    return re.sub(r"[\s'.\-]", "", name).lower()


_CANONICAL_INDEX: Mapping[str, str] = MappingProxyType(
    {_canonical_key(name): name for name in _STATIC_DATA}
)


def get_static_profile(champion_name: str) -> StaticProfile:
    """Resolve a champion to its static profile.

    Falls back to a canonical-name match ("Lee Sin" -> "LeeSin") and then to
    ``DEFAULT_PROFILE``; never raises.
    """
    if not champion_name:
        return DEFAULT_PROFILE
    profile = CHAMPION_STATIC_DATA.get(champion_name)
    if profile is not None:
        return profile
    canonical = _CANONICAL_INDEX.get(_canonical_key(champion_name))
    if canonical is not None:
        return CHAMPION_STATIC_DATA[canonical]
    return DEFAULT_PROFILE


def role_color(role: str) -> str:
    return ROLE_COLORS.get(role, NEUTRAL_COLOR)
