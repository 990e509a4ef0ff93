"""Settings store gateways - Infrastructure implementations of SettingsStoreProtocol."""

import json
import logging
from typing import Optional

from severity_registry.domain.entities import Severity, SeverityEntry
from severity_registry.domain.errors import InvalidArgumentError, StoreUnavailableError
from severity_registry.domain.protocols import FileSystemProtocol, SettingsStoreProtocol

logger = logging.getLogger(__name__)


class InMemorySettingsStore(SettingsStoreProtocol):
    """Process-local store for hosts that own persistence themselves (and for tests)."""

    def __init__(self, entries: Optional[list[SeverityEntry]] = None) -> None:
        self._entries: dict[str, SeverityEntry] = {e.key: e for e in entries or []}

    def _load(self) -> dict[str, SeverityEntry]:
        return self._entries

    def _persist(self, entries: dict[str, SeverityEntry]) -> None:
        self._entries = entries

    def get_severity(self, key: str) -> Optional[Severity]:
        """Return the stored severity for key, or None if the key is absent."""
        entry = self._load().get(key)
        return entry.severity if entry else None

    def register_configurable_severity(
        self,
        key: str,
        group: str,
        title: str,
        description: str,
        initial_severity: Severity,
    ) -> None:
        """Create the entry for key. An existing entry is left untouched."""
        entries = self._load()
        if key in entries:
            logger.debug("Entry %s already registered; keeping stored value", key)
            return
        entries = dict(entries)
        entries[key] = SeverityEntry(
            key=key,
            group=group,
            title=title,
            description=description,
            severity=initial_severity,
        )
        self._persist(entries)

    def set_severity(self, key: str, severity: Severity) -> None:
        """Change the severity of an existing entry."""
        entries = self._load()
        if key not in entries:
            raise InvalidArgumentError(f"No configurable severity registered for '{key}'.")
        entries = dict(entries)
        entries[key] = entries[key].with_severity(severity)
        self._persist(entries)

    def list_entries(self) -> list[SeverityEntry]:
        """Return all stored entries in registration order."""
        return list(self._load().values())

    def __len__(self) -> int:
        return len(self._load())


class JsonSettingsStore(InMemorySettingsStore):
    """
    Durable store kept in a JSON document: {"entries": {key: {group, title, description, severity}}}.

    Every write is flushed to disk immediately, so an interrupted registration
    keeps the entries committed so far. Read and write failures surface as
    StoreUnavailableError.
    """

    def __init__(self, path: str, filesystem: FileSystemProtocol) -> None:
        super().__init__()
        self._path = path
        self._fs = filesystem
        self._loaded = False

    @property
    def path(self) -> str:
        return self._path

    def _load(self) -> dict[str, SeverityEntry]:
        if self._loaded:
            return self._entries
        try:
            if self._fs.exists(self._path):
                data = json.loads(self._fs.read_text(self._path))
            else:
                data = {}
        except (OSError, ValueError) as exc:
            raise StoreUnavailableError(
                f"Cannot read settings store {self._path}: {exc}") from exc
        self._entries = self._decode(data)
        self._loaded = True
        return self._entries

    def _decode(self, data: object) -> dict[str, SeverityEntry]:
        raw_entries = data.get("entries", {}) if isinstance(data, dict) else None
        if not isinstance(raw_entries, dict):
            raise StoreUnavailableError(
                f"Settings store {self._path} is malformed: 'entries' must be a mapping.")
        entries: dict[str, SeverityEntry] = {}
        for key, raw in raw_entries.items():
            if not isinstance(raw, dict):
                raise StoreUnavailableError(
                    f"Settings store {self._path} is malformed at '{key}'.", key=key)
            try:
                severity = Severity.parse(str(raw.get("severity", "")))
            except InvalidArgumentError as exc:
                raise StoreUnavailableError(
                    f"Settings store {self._path} has an invalid severity at '{key}'.",
                    key=key,
                ) from exc
            entries[key] = SeverityEntry(
                key=key,
                group=str(raw.get("group", "")),
                title=str(raw.get("title", key)),
                description=str(raw.get("description", "")),
                severity=severity,
            )
        return entries

    def _persist(self, entries: dict[str, SeverityEntry]) -> None:
        payload = {"entries": {key: e.to_dict() for key, e in entries.items()}}
        try:
            parent = self._fs.parent_dir(self._path)
            if parent:
                self._fs.make_dirs(parent, exist_ok=True)
            self._fs.write_text(self._path, json.dumps(payload, indent=2) + "\n")
        except OSError as exc:
            raise StoreUnavailableError(
                f"Cannot write settings store {self._path}: {exc}") from exc
        self._entries = entries
