"""
Boundary layer data model(s).

These objects are used to communicate with the Service.
Both the API layer (higher) and the db layer (lower) send/receive these, so neither depends on the other's data model.
"""

from dataclasses import dataclass, fields
from typing import Optional, Self

# Order in which filters are turned into predicates.
FILTER_FIELDS: tuple[str, ...] = ("title", "developer", "publisher", "genre", "platform")

# IDs arrive as raw path segments and are bound as-is; the database decides what matches.
GameId = int | str


@dataclass(frozen=True)
class GameRecord:
    """One row of the catalog."""

    id: int
    title: str
    developer: str
    publisher: str
    genre: str
    platform: str
    artwork_url: Optional[str] = None


@dataclass(frozen=True)
class GameArtwork:
    """Projection of a record onto its artwork reference only. `artwork_url` may be None for an existing record."""

    game_id: GameId
    artwork_url: Optional[str]


@dataclass(frozen=True)
class FilterCriteria:
    """Optional substring filters for listing games. Absent (None) fields impose no constraint."""

    title: Optional[str] = None
    developer: Optional[str] = None
    publisher: Optional[str] = None
    genre: Optional[str] = None
    platform: Optional[str] = None

    def __post_init__(self) -> None:
        # Empty strings count as absent
        for f in fields(self):
            if getattr(self, f.name) == "":
                object.__setattr__(self, f.name, None)

    @classmethod
    def from_mapping(cls, values: dict[str, Optional[str]]) -> Self:
        """Pick the known filter fields out of a mapping (e.g. query parameters), ignoring anything else."""
        return cls(**{name: values.get(name) for name in FILTER_FIELDS})

    def present(self) -> list[tuple[str, str]]:
        """(field, value) pairs of the filters that are set, in FILTER_FIELDS order."""
        pairs = []
        for name in FILTER_FIELDS:
            value = getattr(self, name)
            if value is not None:
                pairs.append((name, value))
        return pairs

    def is_empty(self) -> bool:
        return not self.present()
