"""Plugin host: loads plugins and chains their hooks."""

from __future__ import annotations

from functools import reduce
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, List, Optional, Sequence

from ..errors import PluginError, PublishError
from ..logging import get_logger
from .base import Plugin, PublishPrimitives

if TYPE_CHECKING:
    from ..config import GenerationConfig, PluginDescriptor
    from ..models import DocObject
    from ..parsing.tree import SyntaxTree


class PluginHost:
    """Owns the ordered plugin list of one run and invokes the lifecycle hooks.

    Value hooks are reduced over the plugins in registration order: the value
    returned by one plugin is the input of the next.
    """

    def __init__(self, plugins: Optional[Sequence[Plugin]] = None) -> None:
        self.plugins: List[Plugin] = list(plugins or [])
        self.logger = get_logger("plugins")

    def init(self, descriptors: Sequence["PluginDescriptor"]) -> None:
        """Load every descriptor, replacing any previously loaded plugins."""
        from . import load_plugin

        self.plugins = [load_plugin(descriptor) for descriptor in descriptors]
        for plugin in self.plugins:
            self.logger.debug("Loaded plugin %s", _plugin_label(plugin))

    def on_start(self) -> None:
        self._broadcast("on_start", lambda plugin: plugin.on_start())

    def on_handle_config(self, config: "GenerationConfig") -> "GenerationConfig":
        return self._chain("on_handle_config", config, lambda plugin, value: plugin.on_handle_config(value))

    def on_handle_code(self, code: str, file_path: Path) -> str:
        return self._chain(
            "on_handle_code", code, lambda plugin, value: plugin.on_handle_code(value, file_path)
        )

    def on_handle_ast(self, tree: "SyntaxTree", file_path: Path) -> "SyntaxTree":
        return self._chain(
            "on_handle_ast", tree, lambda plugin, value: plugin.on_handle_ast(value, file_path)
        )

    def on_handle_docs(self, docs: List["DocObject"]) -> List["DocObject"]:
        return self._chain("on_handle_docs", docs, lambda plugin, value: plugin.on_handle_docs(value))

    def on_handle_content(self, content: str | bytes, file_path: Path) -> str | bytes:
        return self._chain(
            "on_handle_content",
            content,
            lambda plugin, value: plugin.on_handle_content(value, file_path),
        )

    def on_publish(self, writer: PublishPrimitives) -> None:
        for plugin in self.plugins:
            try:
                plugin.on_publish(writer)
            except PublishError:
                raise
            except Exception as exc:
                raise PublishError(f"Plugin {_plugin_label(plugin)} failed to publish: {exc}") from exc

    def on_complete(self) -> None:
        self._broadcast("on_complete", lambda plugin: plugin.on_complete())

    # ------------------------------------------------------------------
    # Internal helpers

    def _broadcast(self, hook: str, call: Callable[[Plugin], None]) -> None:
        for plugin in self.plugins:
            self.logger.debug("%s -> %s", hook, _plugin_label(plugin))
            call(plugin)

    def _chain(self, hook: str, initial: Any, call: Callable[[Plugin, Any], Any]) -> Any:
        def _step(value: Any, plugin: Plugin) -> Any:
            self.logger.debug("%s -> %s", hook, _plugin_label(plugin))
            result = call(plugin, value)
            if result is None:
                raise PluginError(f"Plugin {_plugin_label(plugin)} returned nothing from {hook}")
            return result

        return reduce(_step, self.plugins, initial)


def _plugin_label(plugin: Plugin) -> str:
    return plugin.name or plugin.__class__.__name__


__all__ = ["PluginHost"]
