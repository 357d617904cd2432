"""Tests for plugin loading."""

from __future__ import annotations

import textwrap
from pathlib import Path
from types import SimpleNamespace

import pytest

from apidoc.config import PluginDescriptor
from apidoc.errors import PluginError
from apidoc.plugins import Plugin, load_plugin


class TitlePlugin(Plugin):
    """Test plugin used for entry point loading."""


def _write_module(tmp_path: Path, name: str, body: str) -> None:
    (tmp_path / f"{name}.py").write_text(textwrap.dedent(body), encoding="utf-8")


def test_load_plugin_from_module_default_attribute(tmp_path: Path, monkeypatch) -> None:
    _write_module(
        tmp_path,
        "apidoc_sample_plugin",
        """
        from apidoc.plugins import Plugin as _Base


        class Plugin(_Base):
            name = "sample"
        """,
    )
    monkeypatch.syspath_prepend(str(tmp_path))

    plugin = load_plugin(PluginDescriptor(name="apidoc_sample_plugin", option={"theme": "dark"}))

    assert plugin.name == "sample"
    assert plugin.option == {"theme": "dark"}


def test_load_plugin_from_module_attribute_factory(tmp_path: Path, monkeypatch) -> None:
    _write_module(
        tmp_path,
        "apidoc_factory_plugin",
        """
        from apidoc.plugins import Plugin


        class Renderer(Plugin):
            pass


        def build(option):
            plugin = Renderer(option)
            plugin.name = "built"
            return plugin
        """,
    )
    monkeypatch.syspath_prepend(str(tmp_path))

    plugin = load_plugin(PluginDescriptor(name="apidoc_factory_plugin:build"))

    assert plugin.name == "built"


def test_load_plugin_from_entry_point(monkeypatch) -> None:
    entry = SimpleNamespace(name="title", load=lambda: TitlePlugin)

    class DummyEntryPoints(list):
        def select(self, **kwargs):
            if kwargs.get("group") == "apidoc.plugins":
                return self
            return []

    monkeypatch.setattr(
        "apidoc.plugins.metadata.entry_points",
        lambda: DummyEntryPoints([entry]),
        raising=False,
    )

    plugin = load_plugin(PluginDescriptor(name="title", option={"title": "Docs"}))

    assert isinstance(plugin, TitlePlugin)
    assert plugin.option == {"title": "Docs"}


def test_load_plugin_prefers_attached_instance() -> None:
    instance = TitlePlugin()

    assert load_plugin(PluginDescriptor(name="anything", instance=instance)) is instance


def test_load_plugin_reports_missing_module() -> None:
    with pytest.raises(PluginError, match="Unable to import"):
        load_plugin(PluginDescriptor(name="apidoc_no_such_plugin_module"))


def test_load_plugin_rejects_non_plugin(tmp_path: Path, monkeypatch) -> None:
    _write_module(tmp_path, "apidoc_bad_plugin", "Plugin = 42\n")
    monkeypatch.syspath_prepend(str(tmp_path))

    with pytest.raises(PluginError):
        load_plugin(PluginDescriptor(name="apidoc_bad_plugin"))
