from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from severity_registry.domain.errors import InvalidArgumentError


class Severity(Enum):
    """Closed set of severities understood by the host settings store."""
    DO_NOT_SHOW = "do_not_show"
    HINT = "hint"
    INFO = "info"
    SUGGESTION = "suggestion"
    WARNING = "warning"
    ERROR = "error"

    @classmethod
    def parse(cls, value: str) -> "Severity":
        """
        Parse a severity from its value or member name, case-insensitively.

        'none' is accepted as an alias of DO_NOT_SHOW.
        """
        normalized = value.strip().lower().replace("-", "_").replace(" ", "_")
        if normalized == "none":
            return cls.DO_NOT_SHOW
        for member in cls:
            if normalized in (member.value, member.name.lower()):
                return member
        raise InvalidArgumentError(
            f"Unknown severity '{value}'. Expected one of: "
            + ", ".join(m.value for m in cls)
        )


@dataclass(frozen=True)
class Analyzer:
    """A named logical grouping of rules. Hashable so it can key the rule mapping."""
    name: str


@dataclass(frozen=True)
class Rule:
    """A single static-analysis check owned by one analyzer."""
    rule_id: str
    name: str
    description: str = ""
    analyzer: Optional[str] = None


@dataclass(frozen=True)
class SeverityEntry:
    """A store record making one rule's severity user-configurable."""
    key: str
    group: str
    title: str
    description: str
    severity: Severity

    def with_severity(self, severity: Severity) -> "SeverityEntry":
        """Return a copy carrying a new severity. Identity (key) is unchanged."""
        import dataclasses
        return dataclasses.replace(self, severity=severity)

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for persistence and reporting."""
        return {
            "group": self.group,
            "title": self.title,
            "description": self.description,
            "severity": self.severity.value,
        }


@dataclass(frozen=True)
class Violation:
    """
    A detected instance of a rule being broken at a location.

    The classification tag replaces one type per highlight severity: fix
    selection never looks at it.
    """
    rule_id: str
    message: str
    classification: Severity = Severity.WARNING
    location: str = ""


@dataclass(frozen=True)
class FixActionTemplate:
    """Catalog value: a fix action whose description is filled in per violation."""
    action_id: str
    description_template: str = "{message}"

    def render(self, rule_id: str, message: str) -> "FixAction":
        """Build the concrete FixAction for one violation's message."""
        description = self.description_template.format(
            message=message, rule_id=rule_id)
        return FixAction(
            action_id=self.action_id,
            rule_id=rule_id,
            description=description,
        )


@dataclass(frozen=True)
class FixAction:
    """An automated remediation offered for one violation."""
    action_id: str
    rule_id: str
    description: str


@dataclass(frozen=True)
class RegistrationReport:
    """Outcome of a registration pass."""
    default_severity: Optional[Severity] = None
    registered: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    source_available: bool = True

    def has_changes(self) -> bool:
        """Check if the pass wrote anything to the store."""
        return bool(self.registered)
