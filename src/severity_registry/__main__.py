"""Package entry point - composition root. Wire dependencies and run the CLI app."""

import logging
import os

from severity_registry.infrastructure.di.container import SeverityRegistryContainer
from severity_registry.interface.cli import CLIAppFactory, CLIDependencies


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    logging.basicConfig(
        level=os.environ.get("SEVERITY_REGISTRY_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    container = SeverityRegistryContainer()

    deps = CLIDependencies(
        config_loader=container.get_config_loader(),
        telemetry=container.get_telemetry_port(),
        labels=container.get_rule_labels(),
        store=container.get_settings_store(),
        rule_source=container.get_rule_source(),
        fix_catalog=container.get_fix_catalog(),
        reporter=container.get_reporter(),
    )

    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
