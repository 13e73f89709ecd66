"""Plugin discovery and loading.

Plugins come from the ``notichain.plugins`` entry-point group and from
``*.py`` files in a local directory.  A plugin may contribute decorator
classes (``register_decorators``) and observe deliveries (``post_send``).
"""

from __future__ import annotations

import importlib.util
import inspect
import logging
import sys
from pathlib import Path

import pluggy

from notichain.plugins.hookspecs import NotichainHookSpec

PROJECT_NAME = "notichain"
ENTRY_POINT_GROUP = "notichain.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery, loading, and hook dispatch."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(NotichainHookSpec)
        self._loaded = False

    def discover_and_load(self, *, local_dir: Path | None = None) -> list[str]:
        """Load entry-point plugins, then single-file plugins in *local_dir*.

        Decorators contributed by every loaded plugin are added to the
        registry.  Returns the names of all registered plugins.
        """
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._instantiate_plugin_classes()
        if local_dir is not None:
            self._discover_local(local_dir)
        for plugin in self._pm.get_plugins():
            self._register_plugin_decorators(plugin, self._name_of(plugin))
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        if self._loaded:
            self._register_plugin_decorators(plugin, resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
        self._pm.unregister(plugin)

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def hook(self) -> pluggy.HookRelay:
        return self._pm.hook

    def list_plugin_names(self) -> list[str]:
        return [self._name_of(p) for p in self._pm.get_plugins()]

    def _name_of(self, plugin: object) -> str:
        return self._pm.get_name(plugin) or plugin.__class__.__name__

    def _instantiate_plugin_classes(self) -> None:
        """Swap plugin classes registered by entry points for instances.

        Hooks called on a class object have no bound ``self``.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin) or not self._has_hook_impls(plugin):
                continue

            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)
            try:
                instance = plugin()
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point plugin %s", plugin_name, exc_info=True
                )
                continue
            self._pm.register(instance, name=plugin_name)
            logger.debug("Instantiated entry-point plugin: %s", plugin_name)

    def _discover_local(self, local_dir: Path) -> None:
        """Load each non-underscore ``*.py`` file and register hook classes.

        A file that fails to import or a class that fails to instantiate is
        logged and skipped.
        """
        if not local_dir.is_dir():
            return

        for py_file in sorted(local_dir.glob("*.py")):
            if py_file.name.startswith("_"):
                continue
            module_name = f"notichain_local_plugin_{py_file.stem}"
            try:
                spec = importlib.util.spec_from_file_location(module_name, py_file)
                if spec is None or spec.loader is None:
                    logger.warning("Could not create module spec for %s", py_file)
                    continue
                module = importlib.util.module_from_spec(spec)
                sys.modules[module_name] = module
                spec.loader.exec_module(module)
            except Exception:
                logger.warning("Failed to load local plugin %s", py_file, exc_info=True)
                sys.modules.pop(module_name, None)
                continue

            for _attr, obj in inspect.getmembers(module, inspect.isclass):
                if obj.__module__ != module_name or not self._has_hook_impls(obj):
                    continue
                try:
                    self._pm.register(obj(), name=f"{module_name}.{obj.__name__}")
                except Exception:
                    logger.warning(
                        "Failed to instantiate plugin class %s from %s",
                        obj.__name__,
                        py_file,
                        exc_info=True,
                    )

    @staticmethod
    def _register_plugin_decorators(plugin: object, plugin_name: str) -> None:
        """Add decorator classes exposed by a single plugin to the registry."""
        from notichain.domain.chain import register_decorator

        hook = getattr(plugin, "register_decorators", None)
        if hook is None:
            return

        try:
            decorator_map = hook()
        except Exception:
            logger.warning(
                "Failed to collect decorators from plugin %s", plugin_name, exc_info=True
            )
            return

        if decorator_map is None:
            return
        if not isinstance(decorator_map, dict):
            logger.warning("Plugin %s returned non-dict decorator registrations", plugin_name)
            return

        for name, decorator_cls in decorator_map.items():
            try:
                register_decorator(name, decorator_cls)
            except (TypeError, ValueError):
                logger.warning(
                    "Skipping decorator registration %r from plugin %s",
                    name,
                    plugin_name,
                    exc_info=True,
                )

    @staticmethod
    def _has_hook_impls(cls: type) -> bool:
        """True if *cls* has a method marked with ``@hookimpl``."""
        for name in dir(cls):
            if name.startswith("_"):
                continue
            method = getattr(cls, name, None)
            if callable(method) and getattr(method, f"{PROJECT_NAME}_impl", None):
                return True
        return False
