"""Typed document blocks and the renderers that turn them into text.

Generators describe *what* a document says as a sequence of blocks; the
renderers here own *how* it is written out. The markdown subset emitted is
the one the results view understands:

- ``#``, ``##``, ``###`` headings
- ``- `` list items and ``- [ ] `` checkbox items
- ``N. `` numbered steps
- blank lines between paragraphs and around lists
"""

from __future__ import annotations

import html
import re
from dataclasses import dataclass, field
from typing import List, Optional, Union


@dataclass(frozen=True)
class Heading:
    text: str
    level: int = 1

    def __post_init__(self) -> None:
        if self.level not in (1, 2, 3):
            raise ValueError(f"Heading level must be 1, 2 or 3, got {self.level}.")


@dataclass(frozen=True)
class Paragraph:
    text: str


@dataclass(frozen=True)
class ListItem:
    text: str


@dataclass(frozen=True)
class CheckboxItem:
    text: str


@dataclass(frozen=True)
class NumberedItem:
    number: int
    text: str


Block = Union[Heading, Paragraph, ListItem, CheckboxItem, NumberedItem]
LIST_BLOCKS = (ListItem, CheckboxItem, NumberedItem)


@dataclass
class Document:
    blocks: List[Block] = field(default_factory=list)

    def heading(self, text: str, level: int = 1) -> "Document":
        self.blocks.append(Heading(text, level))
        return self

    def paragraph(self, text: str) -> "Document":
        self.blocks.append(Paragraph(text))
        return self

    def bullets(self, items: List[str]) -> "Document":
        self.blocks.extend(ListItem(item) for item in items)
        return self

    def checkboxes(self, items: List[str]) -> "Document":
        self.blocks.extend(CheckboxItem(item) for item in items)
        return self

    def steps(self, items: List[str]) -> "Document":
        self.blocks.extend(NumberedItem(i, item) for i, item in enumerate(items, start=1))
        return self


def _render_block(block: Block) -> str:
    if isinstance(block, Heading):
        return f"{'#' * block.level} {block.text}"
    if isinstance(block, CheckboxItem):
        return f"- [ ] {block.text}"
    if isinstance(block, ListItem):
        return f"- {block.text}"
    if isinstance(block, NumberedItem):
        return f"{block.number}. {block.text}"
    return block.text


def render_markdown(document: Document) -> str:
    """Render blocks to markdown; consecutive list items share a group."""

    lines: List[str] = []
    previous: Optional[Block] = None
    for block in document.blocks:
        if previous is not None:
            same_list = isinstance(previous, LIST_BLOCKS) and isinstance(block, LIST_BLOCKS)
            if not same_list:
                lines.append("")
        lines.append(_render_block(block))
        previous = block
    return "\n".join(lines) + "\n"


_BOLD = re.compile(r"\*\*(.+?)\*\*")
_NUMBERED = re.compile(r"^(\d+)\.\s+(.*)$")


def _inline(text: str) -> str:
    return _BOLD.sub(r"<strong>\1</strong>", html.escape(text))


def render_html(text: str) -> str:
    """Render the lightweight markdown subset to an HTML fragment."""

    out: List[str] = []
    open_list: Optional[str] = None

    def switch_list(tag: Optional[str]) -> None:
        nonlocal open_list
        if open_list == tag:
            return
        if open_list:
            out.append(f"</{open_list}>")
        if tag:
            out.append(f"<{tag}>")
        open_list = tag

    for line in text.split("\n"):
        numbered = _NUMBERED.match(line)
        if line.startswith("### "):
            switch_list(None)
            out.append(f"<h3>{_inline(line[4:])}</h3>")
        elif line.startswith("## "):
            switch_list(None)
            out.append(f"<h2>{_inline(line[3:])}</h2>")
        elif line.startswith("# "):
            switch_list(None)
            out.append(f"<h1>{_inline(line[2:])}</h1>")
        elif line.startswith("- [ ]"):
            switch_list("ul")
            out.append(
                f'<li class="checkbox"><input type="checkbox" disabled> {_inline(line[5:].strip())}</li>'
            )
        elif line.startswith("- "):
            switch_list("ul")
            out.append(f"<li>{_inline(line[2:])}</li>")
        elif numbered:
            switch_list("ol")
            out.append(f"<li>{_inline(numbered.group(2))}</li>")
        elif not line.strip():
            switch_list(None)
        else:
            switch_list(None)
            out.append(f"<p>{_inline(line)}</p>")
    switch_list(None)
    return "\n".join(out)
