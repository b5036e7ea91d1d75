"""Read SMakefiles written in YAML into a tag tree.

A document is a YAML sequence of tag nodes::

    - rule: compile
      cmd: gcc -c a.c -o a.o
      in: [a.c]
      out: [a.o]

The first key of a node is the tag name and its value holds the positional
values. Every further key is a child tag. ``null`` means no values, a list
means one value per item, anything else is a single value. YAML scalar types
are kept as-is so that rule validation can reject non-string values.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from smake.document.models import Tag
from smake.errors import InvalidDocumentError, MissingSMakefileError

_TEXT_SOURCE = Path("<string>")


def load_document(path: Path) -> list[Tag]:
    if not path.exists():
        raise MissingSMakefileError(path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidDocumentError(path, f"not UTF-8 text: {exc.reason}") from exc
    except IsADirectoryError as exc:
        raise InvalidDocumentError(path, "is a directory") from exc
    return parse_document(text, source=path)


def parse_document(text: str, source: Path = _TEXT_SOURCE) -> list[Tag]:
    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise InvalidDocumentError(source, str(exc)) from exc

    if raw is None:
        return []
    if not isinstance(raw, list):
        raise InvalidDocumentError(source, "top level must be a list of tags")
    return [_node_to_tag(node, source) for node in raw]


def _node_to_tag(node: Any, source: Path) -> Tag:
    if not isinstance(node, dict) or not node:
        raise InvalidDocumentError(source, f"tag must be a non-empty mapping, got {node!r}")

    items = list(node.items())
    for key, _ in items:
        if not isinstance(key, str):
            raise InvalidDocumentError(source, f"tag name must be a string, got {key!r}")

    (name, head), rest = items[0], items[1:]
    children = tuple(Tag(name=key, values=_values(value)) for key, value in rest)
    return Tag(name=name, values=_values(head), children=children)


def _values(value: Any) -> tuple[Any, ...]:
    if value is None:
        return ()
    if isinstance(value, list):
        return tuple(value)
    return (value,)
