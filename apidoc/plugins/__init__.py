"""Plugin interface, host, and loading utilities."""

from __future__ import annotations

import importlib
from importlib import metadata
from typing import Iterable

from ..config import PluginDescriptor
from ..errors import PluginError
from .base import Plugin, PublishPrimitives
from .host import PluginHost

_ENTRY_POINT_GROUP = "apidoc.plugins"
_DEFAULT_ATTRIBUTE = "Plugin"


def load_plugin(descriptor: PluginDescriptor) -> Plugin:
    """Instantiate the plugin named by ``descriptor``.

    Resolution order: an attached instance, an ``apidoc.plugins`` entry point
    with the same name, then ``module`` or ``module:attribute`` imports.
    """
    if descriptor.instance is not None:
        return _coerce_plugin(descriptor.instance, descriptor)

    for entry in _iter_entry_points():
        if entry.name != descriptor.name:
            continue
        try:
            loaded = entry.load()
        except Exception as exc:
            raise PluginError(f"Failed to load plugin entry point '{entry.name}': {exc}") from exc
        return _coerce_plugin(loaded, descriptor)

    module_name, _, attribute = descriptor.name.partition(":")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise PluginError(f"Unable to import plugin '{descriptor.name}': {exc}") from exc

    target = getattr(module, attribute or _DEFAULT_ATTRIBUTE, None)
    if target is None or target is Plugin:
        raise PluginError(
            f"Plugin module '{module_name}' does not define '{attribute or _DEFAULT_ATTRIBUTE}'"
        )
    return _coerce_plugin(target, descriptor)


def _coerce_plugin(obj: object, descriptor: PluginDescriptor) -> Plugin:
    if isinstance(obj, Plugin):
        if descriptor.option and not obj.option:
            obj.option = dict(descriptor.option)
        return obj
    if isinstance(obj, type) and issubclass(obj, Plugin):
        return obj(descriptor.option)
    if callable(obj):
        instance = obj(descriptor.option)
        if isinstance(instance, Plugin):
            return instance
    raise PluginError(f"Plugin '{descriptor.name}' must be a Plugin subclass, instance, or factory")


def _iter_entry_points() -> Iterable[metadata.EntryPoint]:
    entry_points = metadata.entry_points()
    if hasattr(entry_points, "select"):
        return entry_points.select(group=_ENTRY_POINT_GROUP)  # type: ignore[return-value]
    return entry_points.get(_ENTRY_POINT_GROUP, [])  # type: ignore[return-value]


__all__ = [
    "Plugin",
    "PluginHost",
    "PublishPrimitives",
    "load_plugin",
]
