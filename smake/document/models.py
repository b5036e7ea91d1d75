"""Tag tree produced by the document loader."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator


@dataclass(frozen=True)
class Tag:
    name: str
    values: tuple[Any, ...] = ()
    children: tuple[Tag, ...] = ()

    def child_tags(self, name: str) -> Iterator[Tag]:
        return (child for child in self.children if child.name == name)
