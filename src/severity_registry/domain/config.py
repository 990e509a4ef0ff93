"""Configuration loader for registry settings. Immutable value object created by Infrastructure."""

from __future__ import annotations

import logging

from severity_registry.domain.constants import DEFAULT_NAMESPACE, DEFAULT_STORE_PATH

logger = logging.getLogger(__name__)


class ConfigurationLoader:
    """
    Immutable configuration for the severity registry.

    Created by Infrastructure from config_dict. Domain does not
    read the filesystem; Infrastructure calls ConfigFileLoader.load_config_from_fs()
    and constructs ConfigurationLoader(config_dict) at composition root.
    """

    def __init__(
        self,
        config_dict: dict[str, object],
    ) -> None:
        self._config = config_dict
        if config_dict:
            self.validate_config(config_dict)

    def validate_config(self, config: dict[str, object]) -> None:
        """Warn about values of the wrong type; they fall back to defaults."""
        expected: dict[str, type] = {
            "namespace": str,
            "store_path": str,
            "rule_catalogs": list,
            "fix_catalogs": list,
        }
        for name, value in config.items():
            kind = expected.get(name)
            if kind is None:
                logger.warning("Configuration Warning: unknown key '%s' ignored.", name)
            elif not isinstance(value, kind):
                logger.warning(
                    "Configuration Warning: '%s' must be a %s; using the default.",
                    name,
                    kind.__name__,
                )

    @property
    def config(self) -> dict[str, object]:
        """Return the loaded configuration."""
        return self._config

    @property
    def namespace(self) -> str:
        """Prefix of every configuration key and group title."""
        raw = self._config.get("namespace")
        if isinstance(raw, str) and raw:
            return raw
        return DEFAULT_NAMESPACE

    @property
    def store_path(self) -> str:
        """Path of the JSON settings store."""
        raw = self._config.get("store_path")
        if isinstance(raw, str) and raw:
            return raw
        return DEFAULT_STORE_PATH

    @property
    def rule_catalogs(self) -> list[str]:
        """Extra rule catalog YAML files, loaded after the packaged one."""
        return self._str_list("rule_catalogs")

    @property
    def fix_catalogs(self) -> list[str]:
        """Extra fix catalog YAML files, loaded after the packaged one."""
        return self._str_list("fix_catalogs")

    def _str_list(self, name: str) -> list[str]:
        raw = self._config.get(name, [])
        if isinstance(raw, list):
            return [str(x) for x in raw if isinstance(x, str)]
        return []
