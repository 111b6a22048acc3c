"""
Domain constants: file names, defaults and token format.
"""

# =============================================================================
# Application layout
# =============================================================================

# Environment variable overriding the application base directory
HOME_ENV_VAR = "BOILERPLATE_HOME"

# Settings files looked up in the base directory, first match wins
SETTINGS_FILENAMES = ("appsettings.json", "appsettings.yaml")

# Default templates root, relative to the base directory
DEFAULT_TEMPLATES_DIRNAME = "templates"

# =============================================================================
# Template records
# =============================================================================

TEMPLATE_RECORD_GLOB = "*.json"
DEFAULT_FILE_EXTENSION = "txt"

# =============================================================================
# Placeholder tokens: {@Name}
# =============================================================================

PLACEHOLDER_OPEN = "{@"
PLACEHOLDER_CLOSE = "}"
