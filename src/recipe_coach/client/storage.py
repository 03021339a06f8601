"""Client-local durable key/value storage."""

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Generic, Protocol, TypeVar

from pydantic import TypeAdapter, ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")

SAVED_RECIPES_KEY = "savedRecipes"
PROFILE_KEY = "nutriProfile"


class KeyValueStorage(Protocol):
    """Opaque string storage keyed by logical names."""

    def get_item(self, key: str) -> str | None:
        """Return the stored string for a key, if present."""

    def set_item(self, key: str, value: str) -> None:
        """Store a string under a key."""


@dataclass
class JsonFileStorage(KeyValueStorage):
    """Storage backed by a single JSON object on disk."""

    path: Path

    def get_item(self, key: str) -> str | None:
        """Return the value for a key; an unreadable file reads as empty."""
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        """Write a key, keeping the other keys in the file."""
        entries = self._read()
        entries[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(entries), encoding="utf-8")

    def _read(self) -> dict[str, object]:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError):
            logger.warning("Ignoring unreadable storage file %s", self.path)
            return {}
        return data if isinstance(data, dict) else {}


@dataclass
class StoredValue(Generic[T]):
    """A typed value mirrored to storage under one key.

    ``save`` persists the full value and notifies subscribers; ``load`` treats
    a missing or corrupt entry as the default.
    """

    storage: KeyValueStorage
    key: str
    adapter: TypeAdapter[T]
    default: Callable[[], T]
    _subscribers: list[Callable[[T], None]] = field(default_factory=list)

    def load(self) -> T:
        """Return the stored value, or the default when absent or invalid."""
        raw = self.storage.get_item(self.key)
        if raw is None:
            return self.default()
        try:
            return self.adapter.validate_json(raw)
        except ValidationError:
            logger.warning("Discarding corrupt stored value for %s", self.key)
            return self.default()

    def save(self, value: T) -> None:
        """Persist the whole value and notify subscribers."""
        encoded = self.adapter.dump_json(value, by_alias=True)
        self.storage.set_item(self.key, encoded.decode("utf-8"))
        for callback in list(self._subscribers):
            callback(value)

    def subscribe(self, callback: Callable[[T], None]) -> Callable[[], None]:
        """Register a change callback and return a function that removes it."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe
