"""Key-value telemetry store abstraction.

The vision sensor publishes its readings into a last-known-value table. The
estimator only ever talks to that table through ``TelemetryStore`` so that a
transport-backed table and the in-memory fake used by tests and replay tools
are interchangeable.
"""

from __future__ import annotations

import json
import math
import threading
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from limelight_tracker.core.exceptions import TelemetryError
from limelight_tracker.core.logging import get_logger

logger = get_logger(__name__)


@runtime_checkable
class TelemetryStore(Protocol):
    """Typed access to one telemetry table.

    Every getter takes an explicit default which is returned when the field is
    absent or holds a value of another type.
    """

    def get_number(self, key: str, default: float) -> float: ...

    def get_boolean(self, key: str, default: bool) -> bool: ...

    def get_number_array(self, key: str, default: Sequence[float]) -> list[float]: ...

    def set_number(self, key: str, value: float) -> None: ...

    def is_connected(self) -> bool: ...


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class InMemoryTelemetryStore:
    """Dict-backed telemetry table.

    Each field read and write is atomic; reads spanning several fields may
    observe values from different writes.
    """

    def __init__(self, values: Mapping[str, Any] | None = None, connected: bool = True) -> None:
        """Initialize store with optional initial field values.

        Args:
            values: Initial field values keyed by field name
            connected: Value reported by ``is_connected``
        """
        self._values: dict[str, Any] = dict(values or {})
        self._lock = threading.Lock()
        self.connected = connected

    def _get(self, key: str) -> Any:
        with self._lock:
            return self._values.get(key)

    def get_number(self, key: str, default: float) -> float:
        """Read a numeric field."""
        value = self._get(key)
        if _is_number(value):
            return float(value)
        return default

    def get_boolean(self, key: str, default: bool) -> bool:
        """Read a boolean field.

        Sensors that publish presence as 0/1 are read as booleans too. A NaN
        or infinite number reads as the default.
        """
        value = self._get(key)
        if isinstance(value, bool):
            return value
        if _is_number(value):
            if not math.isfinite(value):
                return default
            return value != 0
        return default

    def get_number_array(self, key: str, default: Sequence[float]) -> list[float]:
        """Read a numeric array field."""
        value = self._get(key)
        if isinstance(value, (list, tuple)) and all(_is_number(v) for v in value):
            return [float(v) for v in value]
        return list(default)

    def set_number(self, key: str, value: float) -> None:
        """Write a numeric field."""
        with self._lock:
            self._values[key] = value

    def put(self, key: str, value: Any) -> None:
        """Write a field of any type, as the publishing sensor would."""
        with self._lock:
            self._values[key] = value

    def update(self, values: Mapping[str, Any]) -> None:
        """Write several fields."""
        with self._lock:
            self._values.update(values)

    def remove(self, key: str) -> None:
        """Delete a field so that reads fall back to their default."""
        with self._lock:
            self._values.pop(key, None)

    def is_connected(self) -> bool:
        """Whether the store is attached to a publishing sensor."""
        return self.connected

    def as_dict(self) -> dict[str, Any]:
        """Copy of all fields."""
        with self._lock:
            return dict(self._values)

    @classmethod
    def from_json(cls, path: Path | str) -> InMemoryTelemetryStore:
        """Load a table dump written as a flat JSON object.

        Args:
            path: Path to the JSON file

        Returns:
            Store holding the dumped fields

        Raises:
            TelemetryError: If the file cannot be read or is not an object
        """
        path = Path(path)
        try:
            with open(path) as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise TelemetryError(f"Failed to load telemetry dump {path}: {e}") from e

        if not isinstance(data, dict):
            raise TelemetryError(f"Telemetry dump {path} must contain a JSON object")

        logger.info("Loaded %d telemetry fields from %s", len(data), path)
        return cls(data)

    def to_json(self, path: Path | str) -> None:
        """Write all fields as a flat JSON object."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(self.as_dict(), f, indent=2)
