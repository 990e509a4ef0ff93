from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from severity_registry.domain.entities import (
        Analyzer,
        FixActionTemplate,
        Rule,
        Severity,
        SeverityEntry,
    )


class RuleSourceProtocol(Protocol):
    """Supplies the rules exposed by the loaded analyzers."""

    def is_available(self) -> bool:
        """Return True if the analyzer engine is present and its rules can be listed."""
        ...

    def get_rules(self) -> dict["Analyzer", list["Rule"]]:
        """Return analyzer -> ordered rules. Order within an analyzer is stable."""
        ...


class SettingsStoreProtocol(Protocol):
    """
    Host settings store for configurable severities. The key is the sole identity.

    Implementations raise StoreUnavailableError when a read or write fails.
    """

    def get_severity(self, key: str) -> Optional["Severity"]:
        """Return the stored severity for key, or None if the key is absent."""
        ...

    def register_configurable_severity(
        self,
        key: str,
        group: str,
        title: str,
        description: str,
        initial_severity: "Severity",
    ) -> None:
        """Create an entry for key. Callers check existence first."""
        ...

    def set_severity(self, key: str, severity: "Severity") -> None:
        """Change the severity of an existing entry (user override)."""
        ...

    def list_entries(self) -> list["SeverityEntry"]:
        """Return all stored entries in registration order."""
        ...


class FixCatalogProtocol(Protocol):
    """Maps rule identifiers to ordered fix action templates."""

    def lookup(self, rule_id: str) -> Optional[list["FixActionTemplate"]]:
        """Return the templates for rule_id, or None if the rule has no fixes."""
        ...

    def rule_ids(self) -> list[str]:
        """Return every rule id with at least one fix."""
        ...


class TelemetryPort(Protocol):
    """Protocol for telemetry/UI updates."""

    def step(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...
    def warning(self, message: str) -> None: ...
    def debug(self, message: str) -> None: ...
    def handshake(self) -> None: ...


class FileSystemProtocol(Protocol):
    """Protocol for filesystem operations - abstracts Path usage."""

    def exists(self, path: str) -> bool:
        """Return True if path exists (file or directory)."""
        ...

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        """Read text content from a file."""
        ...

    def write_text(self, path: str, content: str, encoding: str = "utf-8") -> None:
        """Write text content to a file."""
        ...

    def make_dirs(self, path: str, exist_ok: bool = True) -> None:
        """Create directory and parent directories if needed."""
        ...

    def parent_dir(self, path: str) -> str:
        """Return the directory containing path."""
        ...
