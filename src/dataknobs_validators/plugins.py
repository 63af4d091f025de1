"""Plugin registry.

A plugin bundles extensions (new builder methods, rules, mutators) behind an
``install`` hook. Plugins are installed into a :class:`PluginRegistry`; the
module-level functions operate on a shared default registry.

Example:
    ```python
    from dataknobs_validators import StringValidator, ValidatorPlugin, register_plugin

    def install(context):
        def hex_color(self, error_message=None):
            return self.use_rule(hex_color_rule, error_message)
        StringValidator.hex_color = hex_color

    await register_plugin(ValidatorPlugin(name="colors", install=install, version="1.0"))
    v.string().hex_color()
    ```
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Dict, List

from .exceptions import PluginError
from .helpers import maybe_await

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PluginContext:
    """Argument passed to a plugin's ``install`` hook."""

    name: str
    version: str | None = None


@dataclass
class ValidatorPlugin:
    """A named, optionally versioned extension.

    Attributes:
        name: Unique plugin name
        install: Called with a PluginContext when the plugin is registered
        version: Optional version string
        description: Optional description
        uninstall: Called when the plugin is unregistered
    """

    name: str
    install: Callable[[PluginContext], Any]
    version: str | None = None
    description: str | None = None
    uninstall: Callable[[], Any] | None = None


class PluginRegistry:
    """Registry of installed plugins.

    Registering a plugin that is already installed, or unregistering one that
    is not, logs a warning and does nothing.

    Args:
        name: Registry name used in log messages
    """

    def __init__(self, name: str = "validator_plugins"):
        self._name = name
        self._items: Dict[str, ValidatorPlugin] = {}
        self._lock = threading.RLock()

    @property
    def name(self) -> str:
        return self._name

    async def register_plugin(self, plugin: ValidatorPlugin) -> None:
        """Install and register a plugin.

        Args:
            plugin: Plugin to install

        Raises:
            PluginError: If the plugin's install hook raises
        """
        with self._lock:
            if plugin.name in self._items:
                logger.warning(f"Plugin '{plugin.name}' is already installed in {self._name}")
                return

        context = PluginContext(name=plugin.name, version=plugin.version)
        try:
            await maybe_await(plugin.install(context))
        except Exception as e:
            raise PluginError(
                f"Failed to install plugin '{plugin.name}': {e}",
                context={"plugin": plugin.name, "registry": self._name},
            ) from e

        with self._lock:
            self._items[plugin.name] = plugin
        logger.debug(f"Installed plugin '{plugin.name}' ({plugin.version or 'unversioned'})")

    async def unregister_plugin(self, name: str) -> None:
        """Run a plugin's uninstall hook and forget it.

        Args:
            name: Name of the plugin to remove
        """
        with self._lock:
            plugin = self._items.get(name)
        if plugin is None:
            logger.warning(f"Plugin '{name}' is not installed in {self._name}")
            return

        if plugin.uninstall is not None:
            await maybe_await(plugin.uninstall())

        with self._lock:
            self._items.pop(name, None)
        logger.debug(f"Uninstalled plugin '{name}'")

    def has_plugin(self, name: str) -> bool:
        with self._lock:
            return name in self._items

    def get_installed_plugins(self) -> List[ValidatorPlugin]:
        with self._lock:
            return list(self._items.values())

    def clear(self) -> None:
        """Forget every plugin without running uninstall hooks."""
        with self._lock:
            self._items.clear()


default_registry = PluginRegistry()


async def register_plugin(plugin: ValidatorPlugin) -> None:
    await default_registry.register_plugin(plugin)


async def unregister_plugin(name: str) -> None:
    await default_registry.unregister_plugin(name)


def has_plugin(name: str) -> bool:
    return default_registry.has_plugin(name)


def get_installed_plugins() -> List[ValidatorPlugin]:
    return default_registry.get_installed_plugins()
