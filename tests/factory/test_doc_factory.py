"""Tests for the default tree-to-doc extractor."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Dict, List

from apidoc.factory import DocFactory, PathResolver
from apidoc.models import DocObject
from apidoc.parsing import JavaScriptParser, traverse


def _extract(tmp_path: Path, source: str, name: str = "a.js") -> List[DocObject]:
    root = tmp_path / "src"
    root.mkdir(exist_ok=True)
    path = root / name
    path.write_text(textwrap.dedent(source).lstrip("\n"), encoding="utf-8")
    tree = JavaScriptParser().parse(path)
    factory = DocFactory(tree, PathResolver(root, path))
    traverse(tree, factory.push)
    return factory.results


def _by_longname(docs: List[DocObject], root: Path) -> Dict[str, DocObject]:
    prefix = f"{(root / 'src').as_posix()}/"
    return {doc.longname.replace(prefix, ""): doc for doc in docs}


def test_file_doc_comes_first(tmp_path: Path) -> None:
    docs = _extract(tmp_path, "const answer = 42;\n")

    assert docs[0].kind == "file"
    assert docs[0].content == "const answer = 42;\n"
    assert docs[0].longname.endswith("src/a.js")


def test_class_members_and_accessors(tmp_path: Path) -> None:
    docs = _extract(
        tmp_path,
        """
        /**
         * A counter.
         */
        export default class Counter {
          /** @param {number} start - initial value */
          constructor(start) {
            /** current value */
            this.value = start;
          }

          /** @return {number} */
          get double() { return this.value * 2; }

          static create() { return new Counter(0); }

          _reset() { this.value = 0; }

          label = "counter";
        }
        """,
    )
    found = _by_longname(docs, tmp_path)

    counter = found["a.js~Counter"]
    assert counter.kind == "class"
    assert counter.export is True
    assert counter.import_style == "Counter"
    assert counter.description == "A counter."
    assert counter.line_number == 4

    ctor = found["a.js~Counter#constructor"]
    assert ctor.kind == "constructor"
    assert ctor.params[0].name == "start"
    assert ctor.params[0].types == ["number"]

    assert found["a.js~Counter#double"].kind == "get"
    assert found["a.js~Counter#double"].return_type == ["number"]
    assert found["a.js~Counter.create"].static is True
    assert found["a.js~Counter#_reset"].access == "private"
    assert found["a.js~Counter#label"].kind == "member"

    values = [doc for doc in docs if doc.longname.endswith("~Counter#value")]
    assert [doc.kind for doc in values] == ["member", "member"]
    assert values[0].description == "current value"
    assert values[1].undocumented is True


def test_functions_and_variables(tmp_path: Path) -> None:
    docs = _extract(
        tmp_path,
        """
        /** Says hi. */
        export function greet(name, greeting = "hi") {}

        export const shout = (text) => text.toUpperCase();

        let counter = 0;

        function outer() {
          function inner() {}
        }
        """,
    )
    found = _by_longname(docs, tmp_path)

    greet = found["a.js~greet"]
    assert greet.kind == "function"
    assert greet.import_style == "{greet}"
    assert greet.description == "Says hi."
    assert [param.name for param in greet.params] == ["name", "greeting"]
    assert greet.params[1].optional is True

    assert found["a.js~shout"].kind == "function"
    assert found["a.js~shout"].params[0].name == "text"
    assert found["a.js~counter"].kind == "variable"
    assert found["a.js~counter"].export is False
    assert "a.js~outer" in found
    assert "a.js~inner" not in found


def test_ignore_tag_drops_doc(tmp_path: Path) -> None:
    docs = _extract(
        tmp_path,
        """
        /** @ignore */
        export class Hidden {}
        """,
    )

    assert [doc.kind for doc in docs] == ["file"]


def test_anonymous_default_class_uses_file_name(tmp_path: Path) -> None:
    docs = _extract(tmp_path, "export default class {\n  run() {}\n}\n", name="Runner.js")
    found = _by_longname(docs, tmp_path)

    assert found["Runner.js~Runner"].kind == "class"
    assert found["Runner.js~Runner#run"].kind == "method"
