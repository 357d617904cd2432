"""Doc comment (``/** ... */``) parsing."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..models import DocParam

_TAG_PATTERN = re.compile(r"^@(\w+)\s*(.*)$")
_TYPE_PATTERN = re.compile(r"^\{([^}]*)\}\s*(.*)$", re.DOTALL)
_ACCESS_TAGS = {"public", "protected", "private"}


@dataclass
class DocComment:
    """Description and tags of one doc comment."""

    description: str = ""
    tags: List[Tuple[str, str]] = field(default_factory=list)

    def has(self, name: str) -> bool:
        return any(tag == name for tag, _ in self.tags)

    def values(self, name: str) -> List[str]:
        return [value for tag, value in self.tags if tag == name]

    @property
    def access(self) -> Optional[str]:
        for tag, _ in reversed(self.tags):
            if tag in _ACCESS_TAGS:
                return tag
        return None

    @property
    def params(self) -> List[DocParam]:
        return [parse_param(value) for value in self.values("param")]

    @property
    def return_types(self) -> Optional[List[str]]:
        values = self.values("return") or self.values("returns")
        if not values:
            return None
        types, _ = _split_type(values[-1])
        return types


def is_doc_comment(text: str) -> bool:
    return text.startswith("/**") and not text.startswith("/***")


def parse_doc_comment(text: str) -> DocComment:
    """Split a ``/** ... */`` block into its description and ``@tag`` entries."""
    body = text.strip()
    if body.startswith("/**"):
        body = body[3:]
    if body.endswith("*/"):
        body = body[:-2]

    description: List[str] = []
    tags: List[List[str]] = []
    for raw in body.splitlines():
        line = raw.strip()
        if line.startswith("*"):
            line = line[1:].strip()
        match = _TAG_PATTERN.match(line)
        if match:
            tags.append([match.group(1), match.group(2)])
        elif tags:
            if line:
                tags[-1][1] = f"{tags[-1][1]}\n{line}".strip()
        else:
            description.append(line)

    return DocComment(
        description="\n".join(description).strip(),
        tags=[(name, value.strip()) for name, value in tags],
    )


def parse_param(value: str) -> DocParam:
    """Parse ``{type} name - description`` (``[name=default]`` marks optional)."""
    types, rest = _split_type(value)
    name, _, description = rest.partition(" ")
    description = description.strip()
    if description.startswith("-"):
        description = description[1:].strip()

    optional = False
    if name.startswith("[") and name.endswith("]"):
        optional = True
        name = name[1:-1].split("=", 1)[0]
    return DocParam(name=name, types=types, description=description, optional=optional)


def _split_type(value: str) -> Tuple[List[str], str]:
    match = _TYPE_PATTERN.match(value.strip())
    if not match:
        return [], value.strip()
    types = [item.strip() for item in match.group(1).split("|") if item.strip()]
    return types, match.group(2).strip()


__all__ = ["DocComment", "is_doc_comment", "parse_doc_comment", "parse_param"]
