"""Tests for the plugin host hook chaining."""

from __future__ import annotations

from pathlib import Path

import pytest

from apidoc.config import GenerationConfig, PluginDescriptor
from apidoc.errors import PluginError, PublishError
from apidoc.models import DocObject
from apidoc.plugins import Plugin, PluginHost


class SuffixPlugin(Plugin):
    """Appends its suffix to content and code so chaining order is observable."""

    def on_handle_code(self, code: str, file_path: Path) -> str:
        return code + self.option["suffix"]

    def on_handle_content(self, content, file_path: Path):
        return content + self.option["suffix"]


class DropPrivatePlugin(Plugin):
    def on_handle_docs(self, docs):
        return [doc for doc in docs if doc.access != "private"]


class ExplodingPublisher(Plugin):
    def on_publish(self, writer) -> None:
        raise RuntimeError("template missing")


class ForgetfulPlugin(Plugin):
    def on_handle_config(self, config):  # type: ignore[override]
        config.debug = True


def _host(*plugins: Plugin) -> PluginHost:
    host = PluginHost()
    host.init([PluginDescriptor(name=type(p).__name__, instance=p) for p in plugins])
    return host


def test_hooks_chain_in_registration_order() -> None:
    host = _host(SuffixPlugin({"suffix": "-a"}), SuffixPlugin({"suffix": "-b"}))

    assert host.on_handle_content("body", Path("out/x.html")) == "body-a-b"
    assert host.on_handle_code("code", Path("src/x.js")) == "code-a-b"


def test_plugins_without_hook_are_transparent() -> None:
    host = _host(Plugin(), DropPrivatePlugin())
    docs = [
        DocObject(kind="method", longname="A#run", name="run"),
        DocObject(kind="method", longname="A#_hidden", name="_hidden", access="private"),
    ]
    config = GenerationConfig(source="src", destination="out")

    assert host.on_handle_config(config) is config
    assert [doc.name for doc in host.on_handle_docs(docs)] == ["run"]


def test_empty_host_is_identity() -> None:
    host = PluginHost()
    docs: list = []

    host.on_start()
    assert host.on_handle_docs(docs) is docs
    host.on_complete()


def test_publish_failures_become_publish_errors() -> None:
    host = _host(ExplodingPublisher())

    with pytest.raises(PublishError, match="template missing"):
        host.on_publish(object())  # type: ignore[arg-type]


def test_chained_hook_must_return_a_value() -> None:
    host = _host(ForgetfulPlugin())

    with pytest.raises(PluginError, match="on_handle_config"):
        host.on_handle_config(GenerationConfig(source="src", destination="out"))


def test_start_and_complete_reach_every_plugin() -> None:
    calls = []

    class Recorder(Plugin):
        def on_start(self) -> None:
            calls.append(("start", self.option["id"]))

        def on_complete(self) -> None:
            calls.append(("complete", self.option["id"]))

    host = _host(Recorder({"id": 1}), Recorder({"id": 2}))
    host.on_start()
    host.on_complete()

    assert calls == [("start", 1), ("start", 2), ("complete", 1), ("complete", 2)]
