"""
Event catalog module.

Usage:
    from wa_points.features.events import EventCatalog, Event

Components:
- EventCatalog: read-only (gender, event id) -> Event map
- EventDefinition: family, modifiers, placing group of an event
- Coefficients: one scoring-table row
"""

from .models import Coefficients, Event, EventDefinition, FormulaKind
from .catalog import EventCatalog

__all__ = [
    "Coefficients",
    "Event",
    "EventDefinition",
    "FormulaKind",
    "EventCatalog",
]
