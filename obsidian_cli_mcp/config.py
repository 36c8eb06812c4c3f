"""Configuration loading from the environment and an optional YAML file."""

from __future__ import annotations

import logging
import math
import os
import subprocess
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from obsidian_cli_mcp.constants import (
    BINARY_CHECK_TIMEOUT_SECONDS,
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG_PATH,
    DEFAULT_OB_CLI_PATH,
    DEFAULT_OB_CLI_TIMEOUT_MS,
    DEFAULT_OBSIDIAN_CLI_PATH,
    DEFAULT_OBSIDIAN_CLI_TIMEOUT_MS,
    OB_CLI_PATH_ENV_VAR,
    OB_CLI_TIMEOUT_ENV_VAR,
    OBSIDIAN_CLI_PATH_ENV_VAR,
    OBSIDIAN_CLI_TIMEOUT_ENV_VAR,
    VAULT_ENV_VAR,
    VAULT_PATH_ENV_VAR,
)
from obsidian_cli_mcp.data_models import CliConfiguration
from obsidian_cli_mcp.errors import ConfigurationError
from obsidian_cli_mcp.validation import validate_vault_name

logger = logging.getLogger(__name__)

# YAML key -> environment variable that overrides it.
_SETTINGS = {
    "vault": VAULT_ENV_VAR,
    "vault_path": VAULT_PATH_ENV_VAR,
    "obsidian_cli_path": OBSIDIAN_CLI_PATH_ENV_VAR,
    "ob_cli_path": OB_CLI_PATH_ENV_VAR,
    "obsidian_cli_timeout": OBSIDIAN_CLI_TIMEOUT_ENV_VAR,
    "ob_cli_timeout": OB_CLI_TIMEOUT_ENV_VAR,
}

_TIMEOUT_SETTINGS = ("obsidian_cli_timeout", "ob_cli_timeout")

_CONFIGURATION: Optional[CliConfiguration] = None


def _load_config_file(config_path: Path) -> dict[str, Any]:
    """Read the optional YAML settings file; a missing file yields no settings."""
    if not config_path.exists():
        return {}

    try:
        raw_config = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Cannot read configuration file {config_path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Malformed configuration file {config_path}: {exc}") from exc
    if not isinstance(raw_config, dict):
        raise ConfigurationError(
            f"Configuration file {config_path} must contain a mapping of settings"
        )

    unknown = sorted(set(raw_config) - set(_SETTINGS))
    if unknown:
        logger.warning("Ignoring unknown settings in %s: %s", config_path, ", ".join(unknown))

    return {key: raw_config[key] for key in _SETTINGS if raw_config.get(key) is not None}


def parse_timeout(raw: Any, default: float) -> float:
    """Parse a timeout in milliseconds.

    Raises:
        ConfigurationError: If the value is not a finite, positive number.
    """
    if raw is None:
        return default
    try:
        parsed = float(raw)
    except (TypeError, ValueError):
        parsed = math.nan
    if isinstance(raw, bool) or not math.isfinite(parsed) or parsed <= 0:
        raise ConfigurationError(f'Invalid timeout value: "{raw}". Must be a positive number.')
    return parsed


def check_binary(env_var: str, path: str) -> None:
    """Verify that ``path --version`` runs.

    Raises:
        ConfigurationError: If the binary is missing, not executable, or fails.
    """
    try:
        subprocess.run(
            [path, "--version"],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            timeout=BINARY_CHECK_TIMEOUT_SECONDS,
            check=True,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        raise ConfigurationError(
            f'"{path}" binary not found or not executable. '
            f"Install Obsidian CLI (requires Obsidian 1.12+) or set {env_var} to the correct path."
        ) from exc


def load_configuration(
    environ: Optional[Mapping[str, str]] = None,
    config_path: Optional[Path] = None,
    check_binaries: bool = True,
) -> CliConfiguration:
    """Resolve the server configuration.

    Values come from the optional YAML file first and are overridden by
    environment variables. Empty strings count as unset, except for the
    timeouts, where an empty value is rejected like any other non-number.

    Args:
        environ: Environment mapping. Defaults to ``os.environ``.
        config_path: YAML settings file. Defaults to ``$OBSIDIAN_CLI_MCP_CONFIG``
            or ``obsidian-cli.yaml`` next to the package.
        check_binaries: Whether to verify the ``obsidian`` binary runs.

    Returns:
        The immutable :class:`CliConfiguration`.

    Raises:
        ConfigurationError: On an invalid timeout, an invalid default vault
            name, a malformed settings file, or an unusable ``obsidian`` binary.
    """
    env = os.environ if environ is None else environ
    if config_path is None:
        config_path = Path(env[CONFIG_ENV_VAR]) if env.get(CONFIG_ENV_VAR) else DEFAULT_CONFIG_PATH

    settings: dict[str, Any] = _load_config_file(config_path.expanduser())
    for key, env_var in _SETTINGS.items():
        raw = env.get(env_var)
        # Empty strings unset names and paths; timeouts keep them so they are rejected.
        if raw or (raw is not None and key in _TIMEOUT_SETTINGS):
            settings[key] = raw

    vault = str(settings["vault"]) if settings.get("vault") else None
    if vault is not None:
        outcome = validate_vault_name(vault)
        if not outcome.accepted:
            raise ConfigurationError(f"Invalid default vault {vault!r}: {outcome.reason}")

    vault_path = settings.get("vault_path")
    if vault_path:
        vault_path = str(Path(str(vault_path)).expanduser())

    config = CliConfiguration(
        vault=vault,
        vault_path=vault_path or None,
        obsidian_cli_path=str(settings.get("obsidian_cli_path") or DEFAULT_OBSIDIAN_CLI_PATH),
        ob_cli_path=str(settings.get("ob_cli_path") or DEFAULT_OB_CLI_PATH),
        obsidian_cli_timeout_ms=parse_timeout(
            settings.get("obsidian_cli_timeout"), DEFAULT_OBSIDIAN_CLI_TIMEOUT_MS
        ),
        ob_cli_timeout_ms=parse_timeout(settings.get("ob_cli_timeout"), DEFAULT_OB_CLI_TIMEOUT_MS),
    )

    if check_binaries:
        check_binary(OBSIDIAN_CLI_PATH_ENV_VAR, config.obsidian_cli_path)

    if config.vault is None:
        logger.warning(
            "%s is not set; tools will only target a vault when one is passed explicitly",
            VAULT_ENV_VAR,
        )

    return config


def get_configuration() -> CliConfiguration:
    """Return the process-wide configuration, resolving it on first use."""
    global _CONFIGURATION
    if _CONFIGURATION is None:
        _CONFIGURATION = load_configuration()
    return _CONFIGURATION


def set_configuration(config: Optional[CliConfiguration]) -> None:
    """Install an already-resolved configuration (or clear it with ``None``)."""
    global _CONFIGURATION
    _CONFIGURATION = config
