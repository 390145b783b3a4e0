"""Polled diagnostic properties for dashboards and console output."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol

from limelight_tracker.core.logging import get_logger

logger = get_logger(__name__)


class PropertyKind(Enum):
    """Value type of a diagnostic property."""

    BOOLEAN = "boolean"
    DOUBLE = "double"
    INTEGER = "integer"


@dataclass(frozen=True, slots=True)
class DiagnosticProperty:
    """A named read-only value re-read on every poll."""

    name: str
    kind: PropertyKind
    getter: Callable[[], Any]

    def read(self) -> Any:
        value = self.getter()
        if self.kind is PropertyKind.BOOLEAN:
            return bool(value)
        if self.kind is PropertyKind.INTEGER:
            return int(value)
        return float(value)


@dataclass
class DiagnosticsBuilder:
    """Collects properties registered by a diagnosable component."""

    dashboard_type: str = ""
    properties: list[DiagnosticProperty] = field(default_factory=list)

    def set_dashboard_type(self, dashboard_type: str) -> None:
        self.dashboard_type = dashboard_type

    def add_boolean_property(self, name: str, getter: Callable[[], bool]) -> None:
        self._add(DiagnosticProperty(name, PropertyKind.BOOLEAN, getter))

    def add_double_property(self, name: str, getter: Callable[[], float]) -> None:
        self._add(DiagnosticProperty(name, PropertyKind.DOUBLE, getter))

    def add_integer_property(self, name: str, getter: Callable[[], int]) -> None:
        self._add(DiagnosticProperty(name, PropertyKind.INTEGER, getter))

    def _add(self, prop: DiagnosticProperty) -> None:
        if any(p.name == prop.name for p in self.properties):
            raise ValueError(f"Duplicate diagnostic property: {prop.name}")
        self.properties.append(prop)


class Diagnosable(Protocol):
    """Component that can describe itself to a dashboard."""

    def init_diagnostics(self, builder: DiagnosticsBuilder) -> None: ...


class DiagnosticsReporter:
    """Polls the properties of one component.

    Nothing is cached: each poll calls every registered getter again.
    """

    def __init__(self, component: Diagnosable) -> None:
        """Initialize reporter and collect the component's properties.

        Args:
            component: Component registering its properties
        """
        self._builder = DiagnosticsBuilder()
        component.init_diagnostics(self._builder)
        logger.debug(
            "Registered %d diagnostic properties for %s",
            len(self._builder.properties),
            self._builder.dashboard_type or type(component).__name__,
        )

    @property
    def dashboard_type(self) -> str:
        return self._builder.dashboard_type

    @property
    def property_names(self) -> list[str]:
        return [p.name for p in self._builder.properties]

    def poll(self) -> dict[str, Any]:
        """Read every property once.

        Returns:
            Mapping of property name to its current value
        """
        return {p.name: p.read() for p in self._builder.properties}

    def format_lines(self) -> list[str]:
        """Render the current values as aligned text lines."""
        values = self.poll()
        if not values:
            return []

        width = max(len(name) for name in values)
        lines = []
        for name, value in values.items():
            if isinstance(value, float):
                text = "---" if math.isnan(value) else f"{value:.2f}"
            else:
                text = str(value)
            lines.append(f"{name:<{width}} : {text}")
        return lines
