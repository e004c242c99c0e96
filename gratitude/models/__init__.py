# gratitude/models/__init__.py

from gratitude.core.database import Base

# Import all models here so metadata.create_all sees every table
from .entry import Entry
from .mood import Mood

__all__ = [
    "Base",
    "Entry",
    "Mood",
]
