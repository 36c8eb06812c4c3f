"""Module-level constants for the Obsidian CLI MCP server."""

import os
from pathlib import Path

# Configuration
CONFIG_ENV_VAR = "OBSIDIAN_CLI_MCP_CONFIG"
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "obsidian-cli.yaml"

VAULT_ENV_VAR = "OBSIDIAN_VAULT"
VAULT_PATH_ENV_VAR = "OBSIDIAN_VAULT_PATH"
OBSIDIAN_CLI_PATH_ENV_VAR = "OBSIDIAN_CLI_PATH"
OB_CLI_PATH_ENV_VAR = "OB_CLI_PATH"
OBSIDIAN_CLI_TIMEOUT_ENV_VAR = "OBSIDIAN_CLI_TIMEOUT"
OB_CLI_TIMEOUT_ENV_VAR = "OB_CLI_TIMEOUT"

DEFAULT_OBSIDIAN_CLI_PATH = "obsidian"
DEFAULT_OB_CLI_PATH = "ob"
DEFAULT_OBSIDIAN_CLI_TIMEOUT_MS = 30_000
DEFAULT_OB_CLI_TIMEOUT_MS = 60_000
BINARY_CHECK_TIMEOUT_SECONDS = 5.0

# Limits
MAX_BUFFER_BYTES = 10 * 1024 * 1024
MAX_PATH_LENGTH = 10_000
MAX_VAULT_NAME_LENGTH = 200
MAX_PROPERTY_NAME_LENGTH = 200
MAX_PROPERTY_TYPE_LENGTH = 50
MAX_EXTENSION_LENGTH = 20
MAX_QUERY_LENGTH = 10_000
MAX_CONTENT_LENGTH = 100_000
MAX_PROPERTY_VALUE_LENGTH = 10_000

# Logging
LOG_LEVEL = os.environ.get("OBSIDIAN_CLI_MCP_LOG_LEVEL", "INFO").upper()
