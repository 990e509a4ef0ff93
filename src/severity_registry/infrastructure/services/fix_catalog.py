"""YamlFixCatalog: maps rule ids to ordered fix action templates."""

import logging
from typing import TYPE_CHECKING, Optional

import yaml

from severity_registry.domain.entities import FixActionTemplate
from severity_registry.domain.protocols import FixCatalogProtocol

if TYPE_CHECKING:
    from severity_registry.domain.protocols import FileSystemProtocol

logger = logging.getLogger(__name__)


class YamlFixCatalog(FixCatalogProtocol):
    """
    Loads fix_catalog.yaml files:

        fixes:
          SA1613:
            - action: SA1611ElementParametersMustBeDocumented
              description: "Fix <param> in header : {message}"

    Later catalogs replace the whole action list of a rule id they repeat.
    """

    def __init__(
        self,
        catalogs: Optional[list[tuple["FileSystemProtocol", str]]] = None,
        templates: Optional[dict[str, list[FixActionTemplate]]] = None,
    ) -> None:
        self._registry: dict[str, list[FixActionTemplate]] = dict(templates or {})
        for filesystem, path in catalogs or []:
            self._load(filesystem, path)

    def _load(self, filesystem: "FileSystemProtocol", path: str) -> None:
        try:
            data = yaml.safe_load(filesystem.read_text(path))
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
            logger.warning("Fix catalog %s could not be loaded: %s", path, exc)
            return
        fixes = data.get("fixes", {}) if isinstance(data, dict) else {}
        if not isinstance(fixes, dict):
            logger.warning("Fix catalog %s: 'fixes' must be a mapping", path)
            return
        for rule_id, raw_actions in fixes.items():
            templates = []
            for raw in raw_actions or []:
                if not isinstance(raw, dict) or not raw.get("action"):
                    continue
                template = FixActionTemplate(
                    action_id=str(raw["action"]),
                    description_template=str(raw.get("description") or "{message}"),
                )
                try:
                    template.render(str(rule_id), "")
                except (AttributeError, KeyError, IndexError, ValueError) as exc:
                    logger.warning(
                        "Fix catalog %s: description of %s for %s is not a valid template: %r",
                        path, template.action_id, rule_id, exc,
                    )
                    continue
                templates.append(template)
            if templates:
                self._registry[str(rule_id)] = templates

    def lookup(self, rule_id: str) -> Optional[list[FixActionTemplate]]:
        templates = self._registry.get(rule_id)
        return list(templates) if templates else None

    def rule_ids(self) -> list[str]:
        return sorted(self._registry)
