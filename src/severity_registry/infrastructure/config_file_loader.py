"""Load [tool.severity-registry] from pyproject.toml. Infrastructure I/O only."""

import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib as toml_lib
else:
    import tomli as toml_lib

CONFIG_SECTION = "severity-registry"


class ConfigFileLoader:
    """
    Loads config from the nearest pyproject.toml, walking up from the cwd.
    """

    @staticmethod
    def load_config_from_fs(start: Path | None = None) -> dict[str, object]:
        """Load [tool.severity-registry]. Returns an empty dict when none is found."""
        current_path = (start or Path.cwd()).resolve()
        for directory in (current_path, *current_path.parents):
            config_file = directory / "pyproject.toml"
            if not config_file.exists():
                continue
            try:
                with config_file.open("rb") as f:
                    data = toml_lib.load(f)
            except (OSError, toml_lib.TOMLDecodeError):
                continue
            tool_section = data.get("tool", {}) or {}
            return tool_section.get(CONFIG_SECTION, {}) or tool_section.get(
                "severity_registry", {}
            )
        return {}
