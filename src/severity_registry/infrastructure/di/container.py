from typing import TYPE_CHECKING, Any, cast

from severity_registry.domain.config import ConfigurationLoader
from severity_registry.domain.constants import (
    FIX_CATALOG_RESOURCE,
    RULE_CATALOG_RESOURCE,
)
from severity_registry.domain.naming import RuleLabels
from severity_registry.infrastructure.config_file_loader import ConfigFileLoader
from severity_registry.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from severity_registry.infrastructure.gateways.package_resource_filesystem import (
    PackageResourceFileSystem,
)
from severity_registry.infrastructure.gateways.settings_store import JsonSettingsStore
from severity_registry.infrastructure.services.fix_catalog import YamlFixCatalog
from severity_registry.infrastructure.services.yaml_rule_source import YamlRuleSource
from severity_registry.interface.reporters import SeverityReporter
from severity_registry.interface.telemetry import ProjectTelemetry

if TYPE_CHECKING:
    from severity_registry.domain.protocols import (
        FileSystemProtocol,
        FixCatalogProtocol,
        RuleSourceProtocol,
        SettingsStoreProtocol,
        TelemetryPort,
    )


class SeverityRegistryContainer:
    """Dependency Injection Container for the severity registry."""

    def __init__(self, config_loader: ConfigurationLoader | None = None) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults(config_loader)

    def _register_defaults(self, config_loader: ConfigurationLoader | None) -> None:
        """Register default implementations for protocols."""
        if config_loader is None:
            config_dict = ConfigFileLoader.load_config_from_fs()
            config_loader = ConfigurationLoader(config_dict)
        self.register_singleton("ConfigurationLoader", config_loader)

        telemetry = ProjectTelemetry(
            "SEVERITY", "#00EEFF", "Rule severity catalog online")
        self.register_singleton("TelemetryPort", telemetry)
        self.register_singleton("RuleLabels", RuleLabels(config_loader.namespace))

        filesystem = FileSystemGateway()
        resources = PackageResourceFileSystem()
        self.register_singleton("FileSystemGateway", filesystem)
        self.register_singleton(
            "SettingsStore",
            JsonSettingsStore(config_loader.store_path, filesystem=filesystem),
        )

        # Packaged catalogs first, then project catalogs from configuration
        self.register_singleton(
            "RuleSource",
            YamlRuleSource(
                [(resources, RULE_CATALOG_RESOURCE)]
                + [(filesystem, path) for path in config_loader.rule_catalogs]
            ),
        )
        self.register_singleton(
            "FixCatalog",
            YamlFixCatalog(
                [(resources, FIX_CATALOG_RESOURCE)]
                + [(filesystem, path) for path in config_loader.fix_catalogs]
            ),
        )
        self.register_singleton("SeverityReporter", SeverityReporter())

    # JUSTIFICATION: DI Container must handle any type of service
    def register_singleton(self, key: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[key] = instance

    # JUSTIFICATION: DI Container must return any type of service
    def get(self, key: str) -> Any:
        """Retrieve a dependency by key. Prefer explicit get_* methods for type safety."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_config_loader(self) -> ConfigurationLoader:
        return cast(ConfigurationLoader, self.get("ConfigurationLoader"))

    def get_telemetry_port(self) -> "TelemetryPort":
        """Return the telemetry/UI port."""
        return cast("TelemetryPort", self.get("TelemetryPort"))

    def get_rule_labels(self) -> RuleLabels:
        return cast(RuleLabels, self.get("RuleLabels"))

    def get_filesystem_gateway(self) -> "FileSystemProtocol":
        return cast("FileSystemProtocol", self.get("FileSystemGateway"))

    def get_settings_store(self) -> "SettingsStoreProtocol":
        """Return the durable settings store."""
        return cast("SettingsStoreProtocol", self.get("SettingsStore"))

    def get_rule_source(self) -> "RuleSourceProtocol":
        return cast("RuleSourceProtocol", self.get("RuleSource"))

    def get_fix_catalog(self) -> "FixCatalogProtocol":
        return cast("FixCatalogProtocol", self.get("FixCatalog"))

    def get_reporter(self) -> SeverityReporter:
        return cast(SeverityReporter, self.get("SeverityReporter"))
