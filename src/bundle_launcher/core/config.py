# src/bundle_launcher/core/config.py
import copy
import logging
from typing import Any, Dict, Optional

import yaml

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class SimpleConfigLoader:
    """
    Read-only view over a YAML launcher configuration file.

    Values are looked up with dotted keys (``logging.level``). Callers always
    receive copies of nested containers, so the loaded data cannot be mutated
    from outside.
    """

    def __init__(self, config_file_path: Optional[str]):
        self.config_file_path: Optional[str] = config_file_path
        self._config_data: Dict[str, Any] = {}

        if config_file_path is not None:
            self._load_and_shield_config()
            logger.debug(f"Configuration loaded from '{config_file_path}'.")

    @classmethod
    def empty(cls) -> "SimpleConfigLoader":
        """Returns a loader with no backing file; every lookup yields its default."""
        return cls(None)

    def _load_and_shield_config(self):
        """Loads the configuration and keeps a deep copy for internal use."""
        try:
            with open(self.config_file_path, 'r', encoding='utf-8') as f:
                raw_data = yaml.safe_load(f)
        except FileNotFoundError:
            self._config_data = {}
            raise ConfigurationError(f"Configuration file not found: {self.config_file_path}")
        except yaml.YAMLError as e:
            self._config_data = {}
            raise ConfigurationError(f"Error parsing YAML configuration file '{self.config_file_path}': {e}")
        except OSError as e:
            self._config_data = {}
            raise ConfigurationError(f"Unable to read configuration file '{self.config_file_path}': {e}")

        if raw_data is None:
            logger.warning(f"Configuration file '{self.config_file_path}' is empty. Using defaults.")
            raw_data = {}
        elif not isinstance(raw_data, dict):
            self._config_data = {}
            raise ConfigurationError(
                f"Configuration file '{self.config_file_path}' must contain a mapping, "
                f"got {type(raw_data).__name__}"
            )

        self._config_data = copy.deepcopy(raw_data)

    def get(self, config_key: str, default_value: Any = None) -> Any:
        """
        Returns the value stored under a (possibly dotted) key.

        Args:
            config_key: Key such as ``"launcher"`` or ``"logging.level"``
            default_value: Returned when any part of the key is missing

        Returns:
            The configured value, or ``default_value``
        """
        current = self._config_data
        for key_part in config_key.split('.'):
            if not isinstance(current, dict) or key_part not in current:
                return default_value
            current = current[key_part]

        if isinstance(current, (dict, list)):
            return copy.deepcopy(current)
        return current

    def get_all_config(self) -> Dict[str, Any]:
        """Returns a deep copy of the entire configuration data."""
        return copy.deepcopy(self._config_data)

    def reload_config(self):
        if self.config_file_path is None:
            return
        logger.debug(f"Reloading configuration from '{self.config_file_path}'...")
        self._load_and_shield_config()
