#!/usr/bin/env python3
"""
renderer.py

Render a Markdown post body into the styled HTML fragment that is dropped
into the blog template at [CONVERTED_HTML_CONTENT].

Parsing is left to the 'Markdown' package; its output is split into
top-level block nodes with BeautifulSoup and every node kind gets its own
rule:

  - h2 headings rotate through HEADING_COLORS (other levels keep the
    parser's markup and do not advance the rotation)
  - paragraphs get spacing, unless they open with a centered image block
  - blockquotes become a highlighted box
  - images become a centered, shadowed block
  - horizontal rules are dropped
  - anything else is passed through as the parser rendered it

Usage:
  python tools/renderer.py < body.md
"""

from __future__ import annotations

import html as _html
import sys
from dataclasses import dataclass
from typing import Iterable, NamedTuple, Sequence

try:
    import markdown as _md
except Exception as exc:  # pragma: no cover
    print(
        "Error: Python package 'markdown' is required. Install with: pip install markdown",
        file=sys.stderr,
    )
    raise

from bs4 import BeautifulSoup, NavigableString, Tag


HEADING_COLORS = (
    "text-kawaii-pink",
    "text-kawaii-blue",
    "text-kawaii-mint",
    "text-kawaii-lavender",
)

MARKDOWN_EXTENSIONS = ["extra", "sane_lists", "smarty"]

H2_CLASSES = "text-3xl font-bold mt-12 mb-6"
PARAGRAPH_CLASSES = "mb-6"
BLOCKQUOTE_CLASSES = "bg-gray-800 p-6 rounded-lg my-8 border-l-4 border-kawaii-pink"
IMAGE_WRAPPER_CLASSES = "my-8 flex justify-center"
IMAGE_CLASSES = "w-full max-w-3xl rounded-lg shadow-lg"

HEADING_TAGS = {"h1", "h2", "h3", "h4", "h5", "h6"}


# --- document nodes ---------------------------------------------------------

@dataclass(frozen=True)
class Node:
    """A top-level block of the parsed post.

    ``markup`` is the parser's own rendering of the block; it is what the
    renderer falls back to when a kind has no custom rule.
    """

    markup: str = ""


@dataclass(frozen=True)
class Heading(Node):
    level: int = 1
    inline: str = ""


@dataclass(frozen=True)
class Image(Node):
    src: str = ""
    alt: str = ""
    title: str = ""


@dataclass(frozen=True)
class Paragraph(Node):
    # rendered inline markup, with images kept as Image nodes
    inline: tuple = ()


@dataclass(frozen=True)
class Blockquote(Node):
    children: tuple = ()


@dataclass(frozen=True)
class HorizontalRule(Node):
    pass


@dataclass(frozen=True)
class ListBlock(Node):
    ordered: bool = False
    items: tuple = ()


@dataclass(frozen=True)
class CodeBlock(Node):
    language: str = ""
    code: str = ""


@dataclass(frozen=True)
class RawBlock(Node):
    tag: str = ""


# --- parsing ----------------------------------------------------------------

def markdown_to_html(markdown_text: str) -> str:
    return _md.markdown(markdown_text, extensions=MARKDOWN_EXTENSIONS)


def parse_nodes(markdown_text: str) -> list[Node]:
    """Parse a Markdown body into a flat list of top-level block nodes."""
    soup = BeautifulSoup(markdown_to_html(markdown_text), "html.parser")
    return _nodes_from(soup.children)


def _nodes_from(elements: Iterable) -> list[Node]:
    nodes: list[Node] = []
    for element in elements:
        if isinstance(element, Tag):
            nodes.append(_node_from_tag(element))
        elif isinstance(element, NavigableString) and element.strip():
            nodes.append(RawBlock(markup=element.output_ready()))
    return nodes


def _node_from_tag(tag: Tag) -> Node:
    name = tag.name
    markup = str(tag)

    if name in HEADING_TAGS:
        return Heading(markup=markup, level=int(name[1]), inline=tag.decode_contents())
    if name == "p":
        return Paragraph(markup=markup, inline=tuple(_inline_piece(c) for c in tag.children))
    if name == "blockquote":
        return Blockquote(markup=markup, children=tuple(_nodes_from(tag.children)))
    if name == "hr":
        return HorizontalRule(markup=markup)
    if name == "img":
        return _image_from(tag)
    if name in ("ul", "ol"):
        items = tuple(li.decode_contents() for li in tag.find_all("li", recursive=False))
        return ListBlock(markup=markup, ordered=name == "ol", items=items)
    if name == "pre":
        code = tag.find("code") or tag
        language = ""
        for css_class in code.get("class") or []:
            if css_class.startswith("language-"):
                language = css_class[len("language-"):]
        return CodeBlock(markup=markup, language=language, code=code.get_text())
    return RawBlock(markup=markup, tag=name)


def _inline_piece(child) -> str | Image:
    if isinstance(child, Tag):
        if child.name == "img":
            return _image_from(child)
        return str(child)
    return child.output_ready()


def _image_from(tag: Tag) -> Image:
    return Image(
        markup=str(tag),
        src=tag.get("src", ""),
        alt=tag.get("alt", ""),
        title=tag.get("title", ""),
    )


# --- rendering --------------------------------------------------------------

class Fragment(NamedTuple):
    html: str
    block: bool = False


class RenderState:
    """Mutable state of one render pass."""

    def __init__(self, palette: Sequence[str] = HEADING_COLORS) -> None:
        if not palette:
            raise ValueError("heading color palette must not be empty")
        self.palette = tuple(palette)
        self.heading_color_index = 0

    def next_heading_color(self) -> str:
        color = self.palette[self.heading_color_index]
        self.heading_color_index = (self.heading_color_index + 1) % len(self.palette)
        return color


def render(nodes: Iterable[Node], palette: Sequence[str] = HEADING_COLORS) -> str:
    """Render nodes in document order with a fresh RenderState."""
    state = RenderState(palette)
    return "".join(render_node(node, state).html for node in nodes)


def render_node(node: Node, state: RenderState) -> Fragment:
    if isinstance(node, Heading) and node.level == 2:
        color = state.next_heading_color()
        return Fragment(f'<h2 class="{H2_CLASSES} {color}">{node.inline}</h2>\n', block=True)
    if isinstance(node, Paragraph):
        return render_paragraph(node, state)
    if isinstance(node, HorizontalRule):
        return Fragment("")
    if isinstance(node, Blockquote):
        inner = "".join(render_node(child, state).html for child in node.children)
        return Fragment(f'<div class="{BLOCKQUOTE_CLASSES}">{inner}</div>\n', block=True)
    if isinstance(node, Image):
        return render_image(node)
    return Fragment(default_markup(node), block=True)


def render_paragraph(node: Paragraph, state: RenderState) -> Fragment:
    pieces = [
        render_image(piece) if isinstance(piece, Image) else Fragment(str(piece))
        for piece in node.inline
    ]
    text = "".join(piece.html for piece in pieces)
    lead = next((piece for piece in pieces if piece.html.strip()), None)
    if lead is not None and lead.block:
        return Fragment(text, block=True)
    return Fragment(f'<p class="{PARAGRAPH_CLASSES}">{text}</p>\n')


def render_image(image: Image) -> Fragment:
    attrs = f'src="{_attr(image.src)}" alt="{_attr(image.alt)}"'
    if image.title:
        attrs += f' title="{_attr(image.title)}"'
    return Fragment(
        f'<div class="{IMAGE_WRAPPER_CLASSES}">\n'
        f'    <img {attrs} class="{IMAGE_CLASSES}" />\n'
        "</div>\n",
        block=True,
    )


def default_markup(node: object) -> str:
    """The parser's markup for node, or '' when there is none."""
    markup = getattr(node, "markup", "")
    if not isinstance(markup, str) or not markup:
        return ""
    return markup if markup.endswith("\n") else markup + "\n"


def _attr(value: str) -> str:
    return _html.escape(value, quote=True)


if __name__ == "__main__":  # pragma: no cover
    sys.stdout.write(render(parse_nodes(sys.stdin.read())))
