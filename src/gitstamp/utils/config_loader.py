"""
Configuration loader for gitstamp.

This module provides functionality for loading and managing
configuration settings.

"""

from __future__ import annotations

import copy
import logging
import os
from pathlib import Path
from typing import Any, TypeVar, cast

import yaml
from xdg.BaseDirectory import xdg_config_home

from gitstamp.config import DEFAULT_CONFIG
from gitstamp.errors import ConfigError

logger = logging.getLogger(__name__)

T = TypeVar("T")

ENV_PREFIX = "GITSTAMP_"

# Constant for minimum number of parts in environment variable
MIN_ENV_VAR_PARTS = 2

LOCAL_CONFIG_NAME = ".gitstamp.yml"


class ConfigLoader:
	"""
	Loads and manages configuration for gitstamp.

	Configuration comes from the defaults, then a YAML file, then
	``GITSTAMP_<SECTION>_<KEY>`` environment variables.

	"""

	_instance: ConfigLoader | None = None

	@classmethod
	def get_instance(cls, config_file: str | None = None, reload: bool = False) -> ConfigLoader:
		"""
		Get the singleton instance of ConfigLoader.

		Args:
				config_file: Path to configuration file (optional)
				reload: Whether to reload config even if already loaded

		Returns:
				ConfigLoader: Singleton instance

		"""
		if cls._instance is None or reload:
			cls._instance = cls(config_file)
		return cls._instance

	def __init__(self, config_file: str | None = None) -> None:
		"""
		Initialize the configuration loader.

		Args:
				config_file: Path to configuration file (optional)

		"""
		self.config: dict[str, Any] = {}
		self.config_file = self._resolve_config_file(config_file)
		self.load_config()

	def _resolve_config_file(self, config_file: str | None = None) -> Path | None:
		"""
		Resolve the configuration file path.

		If a config file is specified, use that. Otherwise, look in standard locations:
		1. ./.gitstamp.yml in the current directory
		2. $XDG_CONFIG_HOME/gitstamp/config.yml

		"""
		if config_file:
			return Path(config_file).expanduser().resolve()

		local_config = Path(LOCAL_CONFIG_NAME)
		if local_config.exists():
			return local_config

		xdg_config_file = Path(xdg_config_home) / "gitstamp" / "config.yml"
		if xdg_config_file.exists():
			return xdg_config_file

		return None

	def load_config(self) -> dict[str, Any]:
		"""
		Load configuration from file and apply environment variable overrides.

		Returns:
				Dict[str, Any]: Loaded configuration

		Raises:
				ConfigError: If the configuration file cannot be loaded

		"""
		self.config = copy.deepcopy(DEFAULT_CONFIG)

		if self.config_file:
			if not self.config_file.exists():
				msg = f"Config file not found: {self.config_file}"
				raise ConfigError(msg)
			try:
				with self.config_file.open(encoding="utf-8") as f:
					file_config = yaml.safe_load(f)
			except (OSError, yaml.YAMLError) as e:
				error_msg = f"Error loading configuration from {self.config_file}: {e}"
				logger.exception(error_msg)
				raise ConfigError(error_msg) from e

			if file_config is not None and not isinstance(file_config, dict):
				msg = f"Configuration in {self.config_file} must be a mapping"
				raise ConfigError(msg)
			if file_config:
				self._merge_configs(self.config, file_config)
			logger.info("Loaded configuration from %s", self.config_file)

		self._apply_env_overrides()
		return self.config

	def _merge_configs(self, base: dict[str, Any], override: dict[str, Any]) -> None:
		"""Recursively merge ``override`` into ``base``."""
		for key, value in override.items():
			if isinstance(value, dict) and key in base and isinstance(base[key], dict):
				self._merge_configs(base[key], value)
			else:
				base[key] = value

	def _apply_env_overrides(self) -> None:
		"""Apply GITSTAMP_SECTION_KEY environment variable overrides."""
		for env_var, value in os.environ.items():
			if not env_var.startswith(ENV_PREFIX):
				continue
			parts = env_var[len(ENV_PREFIX) :].lower().split("_")
			if len(parts) < MIN_ENV_VAR_PARTS:
				continue
			section, key = parts[0], "_".join(parts[1:])
			if section not in self.config or not isinstance(self.config[section], dict):
				logger.debug("Ignoring %s: unknown section '%s'", env_var, section)
				continue

			typed_value: str | bool | int
			if value.lower() in ("true", "yes"):
				typed_value = True
			elif value.lower() in ("false", "no"):
				typed_value = False
			else:
				try:
					typed_value = int(value)
				except ValueError:
					typed_value = value

			# Prefixes and executables stay strings even when they look numeric
			if isinstance(self.config[section].get(key), str):
				typed_value = value

			self.config[section][key] = typed_value
			logger.debug("Applied environment override %s", env_var)

	def get(self, section: str, key: str, default: T | None = None) -> T | None:
		"""
		Get a configuration value.

		Args:
				section: Configuration section
				key: Configuration key
				default: Value returned if the key is not set

		"""
		section_config = self.config.get(section)
		if not isinstance(section_config, dict):
			return default
		return cast("T | None", section_config.get(key, default))
