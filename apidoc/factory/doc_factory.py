"""Turns JavaScript syntax tree nodes into doc objects."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from ..models import DocObject, DocParam
from ..parsing.tree import SyntaxTree
from .comments import DocComment, is_doc_comment, parse_doc_comment
from .path_resolver import PathResolver

_TOP_LEVEL_PARENTS = {"program", "export_statement"}
_CLASS_TYPES = {"class_declaration", "class"}
_FUNCTION_TYPES = {"function_declaration", "generator_function_declaration"}
_FUNCTION_VALUES = {"arrow_function", "function_expression", "function", "generator_function"}


class DocFactory:
    """Accumulates doc objects while the syntax tree of one file is walked.

    The walker offers every node through :meth:`push`; nodes that declare
    something documentable append one doc to :attr:`results`. A ``file`` doc
    holding the source text is always created first.
    """

    def __init__(self, tree: SyntaxTree, path_resolver: PathResolver) -> None:
        self.tree = tree
        self.path_resolver = path_resolver
        self.results: List[DocObject] = []
        self._handlers: Dict[str, Callable[[Any, Optional[Any]], None]] = {
            "class_declaration": self._push_class,
            "class": self._push_class,
            "function_declaration": self._push_function,
            "generator_function_declaration": self._push_function,
            "variable_declarator": self._push_variable,
            "method_definition": self._push_method,
            "field_definition": self._push_field,
            "assignment_expression": self._push_this_member,
        }
        self._push_file()

    def push(self, node: Any, parent: Optional[Any]) -> None:
        """Offer ``node`` (with its parent) to the factory."""
        handler = self._handlers.get(node.type)
        if handler is not None:
            handler(node, parent)

    # ------------------------------------------------------------------
    # Node handlers

    def _push_file(self) -> None:
        path = self.path_resolver.display_path
        self.results.append(
            DocObject(
                kind="file",
                name=path,
                longname=path,
                static=True,
                access="public",
                content=self.tree.source.decode("utf-8", errors="replace"),
            )
        )

    def _push_class(self, node: Any, parent: Optional[Any]) -> None:
        if parent is None or parent.type not in _TOP_LEVEL_PARENTS:
            return
        name = self._class_name(node)
        if name is None:
            return
        self._append_top_level("class", name, node, parent)

    def _push_function(self, node: Any, parent: Optional[Any]) -> None:
        if parent is None or parent.type not in _TOP_LEVEL_PARENTS:
            return
        name = self._field_text(node, "name")
        if not name:
            return
        doc = self._append_top_level("function", name, node, parent)
        if doc is not None:
            self._apply_params(doc, node)

    def _push_variable(self, node: Any, parent: Optional[Any]) -> None:
        if parent is None or parent.type not in {"lexical_declaration", "variable_declaration"}:
            return
        declaration_parent = parent.parent
        if declaration_parent is None or declaration_parent.type not in _TOP_LEVEL_PARENTS:
            return
        name_node = node.child_by_field_name("name")
        if name_node is None or name_node.type != "identifier":
            return
        value = node.child_by_field_name("value")
        kind = "function" if value is not None and value.type in _FUNCTION_VALUES else "variable"
        doc = self._append_top_level(
            kind, self.tree.node_text(name_node), parent, declaration_parent, line_node=node
        )
        if doc is not None and kind == "function":
            self._apply_params(doc, value)

    def _push_method(self, node: Any, parent: Optional[Any]) -> None:
        class_longname = self._enclosing_class_longname(parent)
        if class_longname is None:
            return
        name = self._member_name(node.child_by_field_name("name"))
        if name is None:
            return
        if name == "constructor":
            kind = "constructor"
        elif _has_token(node, "get"):
            kind = "get"
        elif _has_token(node, "set"):
            kind = "set"
        else:
            kind = "method"
        doc = self._append_member(kind, name, class_longname, node, node, static=_has_token(node, "static"))
        if doc is not None and kind in {"constructor", "method", "set"}:
            self._apply_params(doc, node)

    def _push_field(self, node: Any, parent: Optional[Any]) -> None:
        class_longname = self._enclosing_class_longname(parent)
        if class_longname is None:
            return
        name = self._member_name(node.child_by_field_name("property"))
        if name is None:
            return
        self._append_member("member", name, class_longname, node, node, static=_has_token(node, "static"))

    def _push_this_member(self, node: Any, parent: Optional[Any]) -> None:
        left = node.child_by_field_name("left")
        if left is None or left.type != "member_expression":
            return
        target = left.child_by_field_name("object")
        if target is None or target.type != "this":
            return
        name = self._member_name(left.child_by_field_name("property"))
        if name is None:
            return

        method = _enclosing(node, "method_definition")
        if method is None:
            return
        class_longname = self._enclosing_class_longname(method.parent)
        if class_longname is None:
            return
        statement = parent if parent is not None and parent.type == "expression_statement" else node
        self._append_member(
            "member", name, class_longname, statement, node, static=_has_token(method, "static")
        )

    # ------------------------------------------------------------------
    # Doc construction

    def _append_top_level(
        self,
        kind: str,
        name: str,
        node: Any,
        parent: Any,
        *,
        line_node: Optional[Any] = None,
    ) -> Optional[DocObject]:
        exported = parent.type == "export_statement"
        statement = parent if exported else node
        comment = self._leading_comment(statement)
        if comment is not None and comment.has("ignore"):
            return None

        file_path = self.path_resolver.display_path
        doc = DocObject(
            kind=kind,
            name=name,
            longname=f"{file_path}~{name}",
            memberof=file_path,
            static=True,
            access=self._access(name, comment),
            export=exported,
            import_path=self.path_resolver.import_path,
            import_style=self._import_style(name, parent) if exported else None,
        )
        self._finish(doc, comment, line_node or node)
        return doc

    def _append_member(
        self,
        kind: str,
        name: str,
        class_longname: str,
        statement: Any,
        node: Any,
        *,
        static: bool,
    ) -> Optional[DocObject]:
        comment = self._leading_comment(statement)
        if comment is not None and comment.has("ignore"):
            return None

        separator = "." if static else "#"
        doc = DocObject(
            kind=kind,
            name=name,
            longname=f"{class_longname}{separator}{name}",
            memberof=class_longname,
            static=static,
            access=self._access(name, comment),
        )
        self._finish(doc, comment, node)
        return doc

    def _finish(self, doc: DocObject, comment: Optional[DocComment], node: Any) -> None:
        doc.file_path = self.path_resolver.display_path
        doc.line_number = node.start_point[0] + 1
        if comment is None:
            doc.undocumented = True
        else:
            doc.description = comment.description
            if comment.params:
                doc.params = comment.params
            if comment.return_types is not None:
                doc.return_type = comment.return_types
        self.results.append(doc)

    def _apply_params(self, doc: DocObject, node: Any) -> None:
        if doc.params is not None:
            return
        parameters = node.child_by_field_name("parameters")
        if parameters is None:
            parameter = node.child_by_field_name("parameter")
            if parameter is None:
                return
            doc.params = [DocParam(name=self.tree.node_text(parameter))]
            return
        params: List[DocParam] = []
        for child in parameters.named_children:
            if child.type == "comment":
                continue
            if child.type == "assignment_pattern":
                left = child.child_by_field_name("left")
                text = self.tree.node_text(left) if left is not None else self.tree.node_text(child)
                params.append(DocParam(name=text, optional=True))
            else:
                params.append(DocParam(name=self.tree.node_text(child)))
        if params:
            doc.params = params

    # ------------------------------------------------------------------
    # Helpers

    def _leading_comment(self, statement: Any) -> Optional[DocComment]:
        previous = statement.prev_sibling
        if previous is None or previous.type != "comment":
            return None
        text = self.tree.node_text(previous)
        if not is_doc_comment(text):
            return None
        return parse_doc_comment(text)

    @staticmethod
    def _access(name: str, comment: Optional[DocComment]) -> str:
        if comment is not None and comment.access:
            return comment.access
        if name.startswith("_") or name.startswith("#"):
            return "private"
        return "public"

    def _import_style(self, name: str, export_node: Any) -> str:
        if _has_token(export_node, "default"):
            return name
        return f"{{{name}}}"

    def _class_name(self, node: Any) -> Optional[str]:
        name = self._field_text(node, "name")
        if name:
            return name
        if node.parent is not None and _has_token(node.parent, "default"):
            return self.tree.file_path.stem
        return None

    def _enclosing_class_longname(self, class_body: Optional[Any]) -> Optional[str]:
        if class_body is None or class_body.type != "class_body":
            return None
        class_node = class_body.parent
        if class_node is None or class_node.type not in _CLASS_TYPES:
            return None
        parent = class_node.parent
        if parent is None or parent.type not in _TOP_LEVEL_PARENTS:
            return None
        name = self._class_name(class_node)
        if name is None:
            return None
        return f"{self.path_resolver.display_path}~{name}"

    def _member_name(self, name_node: Optional[Any]) -> Optional[str]:
        if name_node is None:
            return None
        if name_node.type in {"property_identifier", "private_property_identifier", "identifier"}:
            return self.tree.node_text(name_node)
        if name_node.type == "string":
            return self.tree.node_text(name_node)[1:-1]
        return None

    def _field_text(self, node: Any, field_name: str) -> Optional[str]:
        child = node.child_by_field_name(field_name)
        if child is None:
            return None
        return self.tree.node_text(child)


def _has_token(node: Any, token: str) -> bool:
    return any(child.type == token for child in node.children)


def _enclosing(node: Any, node_type: str) -> Optional[Any]:
    current = node.parent
    while current is not None:
        if current.type == node_type:
            return current
        if current.type in _CLASS_TYPES:
            return None
        current = current.parent
    return None


__all__ = ["DocFactory"]
