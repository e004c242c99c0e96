# gratitude/schemas/__init__.py

from .entry import (
    CreateEntryRequest,
    ListEntriesRequest,
    EntryRead,
    ListEntriesResponse,
)
from .mood import (
    CreateMoodRequest,
    ListMoodsRequest,
    MoodRead,
    ListMoodsResponse,
    MoodOption,
)
from .stats import (
    GetOverviewRequest,
    DayCount,
    MoodCount,
    Overview,
)


__all__ = [
    # Entries
    "CreateEntryRequest", "ListEntriesRequest", "EntryRead", "ListEntriesResponse",

    # Moods
    "CreateMoodRequest", "ListMoodsRequest", "MoodRead", "ListMoodsResponse", "MoodOption",

    # Stats
    "GetOverviewRequest", "DayCount", "MoodCount", "Overview",
]
