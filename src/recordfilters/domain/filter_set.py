"""FilterSet: at most one filter per (kind, key) plus a combination mode."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from pydantic import BaseModel, Field

from ..errors import DuplicateFilterError
from .filters import Filter


class Logic(str, Enum):
    """How the filters of a set are combined."""

    and_ = "and"   # every filter must match
    or_ = "or"     # at least one filter must match


class FilterSet(BaseModel):
    """Immutable collection of filters. Every update returns a new set."""

    model_config = {"frozen": True}

    logic: Logic = Field(default=Logic.and_, description="Combination mode")
    filters: tuple[Filter, ...] = Field(default=(), description="Filters, newest first")

    @classmethod
    def new(cls, logic: Logic | str = Logic.and_, filters: Iterable[Filter] = ()) -> FilterSet:
        """Create a set. ``filters`` are trusted to occupy distinct slots."""
        return cls(logic=logic, filters=tuple(filters))

    @property
    def is_empty(self) -> bool:
        return not self.filters

    def pop(self, target: Filter) -> tuple[list[Filter], list[Filter]]:
        """Split the set into filters sharing ``target``'s slot and the rest."""
        matched: list[Filter] = []
        remaining: list[Filter] = []
        for f in self.filters:
            if f.same_slot(target):
                matched.append(f)
            else:
                remaining.append(f)
        return matched, remaining

    def add_or_update(self, target: Filter) -> FilterSet:
        """Insert ``target``, replacing whatever occupied its slot."""
        matched, remaining = self.pop(target)
        if len(matched) > 1:
            raise DuplicateFilterError(matched)
        return self.model_copy(update={"filters": (target, *remaining)})

    def remove(self, target: Filter) -> FilterSet:
        """Drop the filter occupying ``target``'s slot, if any."""
        _, remaining = self.pop(target)
        return self.model_copy(update={"filters": tuple(remaining)})

    def get(self, target: Filter) -> Filter | None:
        """Return the filter occupying ``target``'s slot, or None."""
        for f in self.filters:
            if f.same_slot(target):
                return f
        return None

    def with_logic(self, logic: Logic | str) -> FilterSet:
        return self.model_copy(update={"logic": Logic(logic)})
