# gratitude/data/moods.py
from enum import Enum
from typing import Dict, List, Optional


# =====================================================================
# ENUMS
# =====================================================================

class MoodKind(str, Enum):
    """Closed set of moods a user can tag."""
    GRATEFUL = "grateful"
    HAPPY = "happy"
    CALM = "calm"
    FOCUSED = "focused"
    ENERGIZED = "energized"
    TIRED = "tired"
    STRESSED = "stressed"


ALLOWED_MOODS = frozenset(kind.value for kind in MoodKind)


def parse_mood(value: Optional[str]) -> Optional[MoodKind]:
    """Strict lookup used by the store: unknown values give None."""
    normalized = (value or "").strip().lower()
    if normalized not in ALLOWED_MOODS:
        return None
    return MoodKind(normalized)


# =====================================================================
# DISPLAY METADATA
# =====================================================================

MOOD_OPTIONS: List[Dict[str, str]] = [
    {"value": MoodKind.GRATEFUL.value, "label": "Grateful", "emoji": "🙏"},
    {"value": MoodKind.HAPPY.value, "label": "Happy", "emoji": "😄"},
    {"value": MoodKind.CALM.value, "label": "Calm", "emoji": "😌"},
    {"value": MoodKind.FOCUSED.value, "label": "Focused", "emoji": "🎯"},
    {"value": MoodKind.ENERGIZED.value, "label": "Energized", "emoji": "⚡"},
    {"value": MoodKind.TIRED.value, "label": "Tired", "emoji": "😴"},
    {"value": MoodKind.STRESSED.value, "label": "Stressed", "emoji": "😓"},
]

_OPTIONS_BY_VALUE = {option["value"]: option for option in MOOD_OPTIONS}


def mood_option(value: Optional[str]) -> Dict[str, str]:
    """
    Display metadata for a mood value.

    Total over any input: unrecognized values fall back to the first
    option. Only for presentation; stores validate with ``parse_mood``.
    """
    return dict(_OPTIONS_BY_VALUE.get((value or "").strip().lower(), MOOD_OPTIONS[0]))
