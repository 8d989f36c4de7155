"""
Builder for the variable-arity "AND of substring matches" predicate used to list games.

Conditions are collected as (column, value) pairs and only turned into SQL when the statement is built,
so every predicate fragment carries its own bound parameter.
"""

from typing import Any, Self

from sqlalchemy import ColumnElement, Select, and_
from sqlalchemy.orm import InstrumentedAttribute

from game_catalog.core.models import FilterCriteria
from game_catalog.db.schema import DBVideoGame


class SubstringFilter:
    """Accumulates substring conditions and applies them to a SELECT."""

    def __init__(self) -> None:
        self._pairs: list[tuple[InstrumentedAttribute[Any], str]] = []

    @classmethod
    def from_criteria(cls, criteria: FilterCriteria) -> Self:
        builder = cls()
        for name, value in criteria.present():
            builder.add(getattr(DBVideoGame, name), value)
        return builder

    def add(self, column: InstrumentedAttribute[Any], value: str | None) -> Self:
        """Constrain `column` to contain `value`. None / empty values are skipped."""
        if value:
            self._pairs.append((column, value))
        return self

    @property
    def values(self) -> list[str]:
        """Bound values, in the same order as the generated conditions."""
        return [value for _, value in self._pairs]

    def conditions(self) -> list[ColumnElement[bool]]:
        # autoescape: % and _ inside the value match literally
        return [column.contains(value, autoescape=True) for column, value in self._pairs]

    def apply(self, query: Select[Any]) -> Select[Any]:
        """Add a WHERE clause joining all conditions with AND. Without conditions, the query is returned untouched."""
        conditions = self.conditions()
        if not conditions:
            return query
        return query.where(and_(*conditions))

    def __len__(self) -> int:
        return len(self._pairs)
