"""Event catalog loader: reads events.yaml and the coefficient table."""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

import yaml

from wa_points.shared.constants import EventFamily, Gender, PlacementGroup
from wa_points.shared.errors import CatalogIntegrityError, UnknownEventError

from .models import Coefficients, Event, EventDefinition, FormulaKind

logger = logging.getLogger(__name__)


class EventCatalog:
    """
    Read-only map of scorable events, keyed by (gender, event id).

    Built once from static data. Lookups and iteration never expose a
    mutable container.
    """

    def __init__(
        self,
        events: Iterable[Event],
        definitions: Iterable[EventDefinition] = (),
    ):
        by_key: dict[tuple[Gender, str], Event] = {}
        for event in events:
            if event.key in by_key:
                raise CatalogIntegrityError(f"Duplicate catalog entry: {event}")
            by_key[event.key] = event
        self._events: Mapping[tuple[Gender, str], Event] = MappingProxyType(by_key)
        self._definitions = tuple(definitions)
    # === Construction ===

    @classmethod
    def from_data(cls, events_data: dict, coefficients_data: dict) -> "EventCatalog":
        """Build from already parsed events.yaml / coefficients YAML content."""
        definitions = [
            _parse_definition(raw) for raw in (events_data or {}).get("events", [])
        ]
        by_id = {d.id: d for d in definitions}
        if len(by_id) != len(definitions):
            raise CatalogIntegrityError("Duplicate event id in event definitions")

        events = []
        for gender in Gender:
            rows = (coefficients_data or {}).get(gender.value) or {}
            for event_id, raw in rows.items():
                definition = by_id.get(event_id)
                if definition is None:
                    raise CatalogIntegrityError(
                        f"Coefficients for undefined event: {gender.value} {event_id}"
                    )
                if gender not in definition.genders:
                    raise CatalogIntegrityError(
                        f"Event {event_id} is not held for {gender.value}"
                    )
                events.append(
                    Event(
                        definition=definition,
                        gender=gender,
                        coefficients=_parse_coefficients(event_id, raw),
                    )
                )

            for definition in definitions:
                if gender in definition.genders and definition.id not in rows:
                    logger.debug(
                        f"No {gender.value} coefficients for {definition.id}, not scorable"
                    )

        return cls(events, definitions)

    @classmethod
    def from_files(cls, events_path: Path, coefficients_path: Path) -> "EventCatalog":
        """Load catalog from YAML files."""
        with open(events_path, encoding="utf-8") as f:
            events_data = yaml.safe_load(f)
        with open(coefficients_path, encoding="utf-8") as f:
            coefficients_data = yaml.safe_load(f)

        catalog = cls.from_data(events_data, coefficients_data)
        logger.info(
            f"Event catalog loaded: {len(catalog)} scorable events "
            f"from {coefficients_path.name}"
        )
        return catalog

    # === Access ===

    def lookup(self, event_id: str, gender: Gender | str = Gender.MEN) -> Event:
        """Get event by id for a gender. Raises UnknownEventError."""
        try:
            key = (Gender(gender), event_id)
        except ValueError:
            raise UnknownEventError(f"Unknown gender: {gender}") from None

        event = self._events.get(key)
        if event is None:
            raise UnknownEventError(f"Unknown event: {key[0].value} {event_id}")
        return event

    def events(self, gender: Gender | str | None = None) -> tuple[Event, ...]:
        """All scorable events (optionally for one gender), in table order."""
        if gender is None:
            return tuple(self._events.values())
        gender = Gender(gender)
        return tuple(e for e in self._events.values() if e.gender == gender)

    @property
    def definitions(self) -> tuple[EventDefinition, ...]:
        """All defined events, including those without coefficients."""
        return self._definitions

    def __iter__(self) -> Iterator[Event]:
        return iter(self._events.values())

    def __len__(self) -> int:
        return len(self._events)

    def __contains__(self, key: object) -> bool:
        return key in self._events


def _parse_definition(raw: dict) -> EventDefinition:
    """Parse one events.yaml entry."""
    try:
        low, high = raw["check_range"]
        return EventDefinition(
            id=str(raw["id"]),
            family=EventFamily(raw["family"]),
            placement_group=PlacementGroup(raw["placement_group"]),
            check_range=(float(low), float(high)),
            wind_coefficient=_optional_float(raw.get("wind_coefficient")),
            elevation_coefficient=_optional_float(raw.get("elevation_coefficient")),
            genders=tuple(Gender(g) for g in raw.get("genders", ["men", "women"])),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise CatalogIntegrityError(f"Invalid event definition {raw!r}: {e}") from e


def _parse_coefficients(event_id: str, raw) -> Coefficients:
    """Parse [a, b, c] or {formula: ..., coefficients: [a, b, c]}."""
    formula = FormulaKind.QUADRATIC
    values = raw
    if isinstance(raw, dict):
        try:
            formula = FormulaKind(raw.get("formula", FormulaKind.QUADRATIC.value))
        except ValueError as e:
            raise CatalogIntegrityError(f"{event_id}: {e}") from e
        values = raw.get("coefficients")

    if not isinstance(values, (list, tuple)) or len(values) != 3:
        raise CatalogIntegrityError(
            f"{event_id}: expected 3 coefficients, got {values!r}"
        )
    try:
        a, b, c = (float(v) for v in values)
    except (TypeError, ValueError) as e:
        raise CatalogIntegrityError(f"{event_id}: non-numeric coefficient") from e

    return Coefficients(a=a, b=b, c=c, formula=formula)


def _optional_float(value) -> float | None:
    return None if value is None else float(value)
