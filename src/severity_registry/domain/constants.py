"""
Registry constants: key/label templates and the static default-entry texts.
"""

DEFAULT_NAMESPACE: str = "StyleCop"

# Formatted with the namespace first, then with str.format positional args.
HIGHLIGHT_ID_TEMPLATE: str = "{namespace}.{0}"
GROUP_TITLE_TEMPLATE: str = "{namespace} - {0}"
DEFAULT_SEVERITY_SUFFIX: str = "DefaultSeverity"

DEFAULT_SEVERITY_TITLE: str = "Default Violation Severity"
DEFAULT_SEVERITY_GROUP_TEMPLATE: str = "{namespace} - Defaults (Requires Restart)"
DEFAULT_SEVERITY_DESCRIPTION: str = (
    "Sets the default severity for {namespace} violations. This will be used for "
    "any violation where you have not explicitly set a severity. Changes to this "
    "setting will not take effect until the next time the host is started."
)

DEFAULT_STORE_PATH: str = ".severity/settings.json"

# Packaged catalogs (loaded via importlib.resources)
RULE_CATALOG_RESOURCE: str = "resources/rule_catalog.yaml"
FIX_CATALOG_RESOURCE: str = "resources/fix_catalog.yaml"

SEVERITY_BANNER: str = "[bold #00EEFF]SEVERITY REGISTRY[/] :: rule severity catalog"
