"""Validation configuration.

The configuration is an explicit value passed to :func:`validate` and carried
down the tree on every :class:`~dataknobs_validators.context.SchemaContext`.
There is no process-wide mutable configuration: call sites that do not pass
one get a fresh default instance.

Configuration can be built in code, from a dictionary, from a YAML/JSON file,
or from environment variables:

    ```yaml
    # validators.yaml
    first_error_only: false
    ```

    ```python
    config = ValidatorConfig.from_file("validators.yaml")
    result = await validate(schema, payload, config)
    ```

Environment variable format:
    DATAKNOBS_VALIDATORS_<SETTING>, e.g. ``DATAKNOBS_VALIDATORS_FIRST_ERROR_ONLY=false``
"""

from __future__ import annotations

import json
import logging
import os
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any, Union

import yaml  # type: ignore[import-untyped]

from .exceptions import ConfigurationError

if TYPE_CHECKING:
    from .context import AttributeTranslation, RuleTranslation

logger = logging.getLogger(__name__)

TranslateRuleCallback = Callable[["RuleTranslation"], str]
TranslateAttributeCallback = Callable[["AttributeTranslation"], str]

ENV_PREFIX = "DATAKNOBS_VALIDATORS_"


def _snake_case(key: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", key).lower()


def _parse_env_value(value: str) -> Any:
    if value.lower() in ["true", "yes", "1"]:
        return True
    elif value.lower() in ["false", "no", "0"]:
        return False
    return value


def _parse_flag(name: str, value: Any) -> bool:
    """Normalize a boolean setting read from a dict, file or environment.

    Raises:
        ConfigurationError: If the value cannot be read as a boolean
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        value = _parse_env_value(value.strip())
    elif isinstance(value, int) and value in (0, 1):
        value = bool(value)
    if not isinstance(value, bool):
        raise ConfigurationError(
            f"Invalid value for {name}: {value!r}", context={"setting": name, "value": value}
        )
    return value


@dataclass(frozen=True)
class ValidatorConfig:
    """Settings consumed by a validation pass.

    Attributes:
        first_error_only: Stop each field's rule loop at its first failure
        translate_rule: Optional hook producing a rule's error message
        translate_attribute: Optional hook translating placeholder values
    """

    first_error_only: bool = True
    translate_rule: TranslateRuleCallback | None = None
    translate_attribute: TranslateAttributeCallback | None = None

    def merge(self, **overrides: Any) -> ValidatorConfig:
        """Return a copy with the given settings replaced."""
        return replace(self, **overrides)

    def to_dict(self) -> dict[str, Any]:
        return {
            "first_error_only": self.first_error_only,
            "translate_rule": self.translate_rule,
            "translate_attribute": self.translate_attribute,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ValidatorConfig:
        """Create a configuration from a dictionary.

        Keys may be snake_case (``first_error_only``) or camelCase
        (``firstErrorOnly``). Unknown keys are ignored with a debug log.

        Args:
            data: Configuration dictionary

        Returns:
            ValidatorConfig instance

        Raises:
            ConfigurationError: If ``first_error_only`` is not a boolean
        """
        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in data.items():
            name = _snake_case(key)
            if name == "first_error_only":
                values[name] = _parse_flag(key, value)
            elif name in known:
                values[name] = value
            else:
                logger.debug(f"Ignoring unknown validator setting: {key}")
        return cls(**values)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> ValidatorConfig:
        """Load a configuration from a YAML or JSON file.

        Args:
            path: Path to the configuration file

        Returns:
            ValidatorConfig instance

        Raises:
            ConfigurationError: If the file is missing, has an unsupported
                extension, or does not contain a mapping
        """
        path = Path(path).resolve()

        if not path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {path}", context={"path": str(path)}
            )

        suffix = path.suffix.lower()
        with open(path) as f:
            if suffix in [".yaml", ".yml"]:
                data = yaml.safe_load(f)
            elif suffix == ".json":
                data = json.load(f)
            else:
                raise ConfigurationError(
                    f"Unsupported file format: {suffix}", context={"path": str(path)}
                )

        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise ConfigurationError(
                "Validator configuration must be a mapping",
                context={"path": str(path), "type": type(data).__name__},
            )

        # Allow the settings to live under a "validators" section
        if "validators" in data and isinstance(data["validators"], Mapping):
            data = data["validators"]

        return cls.from_dict(data)

    @classmethod
    def from_env(
        cls, base: ValidatorConfig | None = None, prefix: str = ENV_PREFIX
    ) -> ValidatorConfig:
        """Apply ``DATAKNOBS_VALIDATORS_*`` environment overrides.

        Args:
            base: Configuration to override (defaults to a fresh instance)
            prefix: Environment variable prefix

        Returns:
            ValidatorConfig instance

        Raises:
            ConfigurationError: If an override is not a boolean
        """
        base = base or cls()
        overrides: dict[str, Any] = {}
        for key, value in os.environ.items():
            if not key.startswith(prefix):
                continue
            name = key[len(prefix):].lower()
            if name == "first_error_only":
                overrides[name] = _parse_flag(key, value)
        return base.merge(**overrides) if overrides else base

    @classmethod
    def coerce(cls, config: ValidatorConfig | Mapping[str, Any] | None) -> ValidatorConfig:
        """Normalize the ``config`` argument accepted by :func:`validate`."""
        if config is None:
            return cls()
        if isinstance(config, ValidatorConfig):
            return config
        if isinstance(config, Mapping):
            return cls.from_dict(config)
        raise ConfigurationError(
            f"Invalid configuration type: {type(config).__name__}",
            context={"type": type(config).__name__},
        )
