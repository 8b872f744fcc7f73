import re

import pytest

from renderer import (
    Blockquote,
    CodeBlock,
    Heading,
    HorizontalRule,
    Image,
    ListBlock,
    Paragraph,
    RenderState,
    parse_nodes,
    render,
    render_image,
)

H2_COLOR = re.compile(r'<h2 class="text-3xl font-bold mt-12 mb-6 (\S+)">')


def h2(text):
    return Heading(markup=f"<h2>{text}</h2>", level=2, inline=text)


def test_h2_colors_cycle_through_palette():
    nodes = [h2(f"Section {i}") for i in range(5)]
    out = render(nodes, palette=("a", "b", "c"))
    assert H2_COLOR.findall(out) == ["a", "b", "c", "a", "b"]


def test_other_heading_levels_keep_parser_markup_and_do_not_advance():
    h3 = Heading(markup="<h3>Detail</h3>", level=3, inline="Detail")
    out = render([h2("One"), h3, h2("Two")], palette=("a", "b"))
    assert H2_COLOR.findall(out) == ["a", "b"]
    assert "<h3>Detail</h3>\n" in out


def test_each_render_starts_from_the_first_color():
    nodes = [h2("Only")]
    first = render(nodes, palette=("a", "b"))
    second = render(nodes, palette=("a", "b"))
    assert first == second
    assert H2_COLOR.findall(second) == ["a"]


def test_render_is_deterministic():
    nodes = parse_nodes("# Title\n\n## A\n\ntext *here*\n\n> quote\n\n## B\n\n- x\n- y\n")
    assert render(nodes) == render(nodes)


def test_empty_palette_is_rejected():
    with pytest.raises(ValueError):
        RenderState(())


def test_paragraph_is_wrapped():
    out = render([Paragraph(inline=("Some <em>text</em>",))])
    assert out == '<p class="mb-6">Some <em>text</em></p>\n'


def test_paragraph_holding_an_image_is_not_wrapped():
    image = Image(src="cat.png", alt="Cat")
    assert render([Paragraph(inline=(image,))]) == render_image(image).html


def test_paragraph_opening_with_text_keeps_wrapper_around_image():
    image = Image(src="cat.png", alt="Cat")
    out = render([Paragraph(inline=("Look: ", image))])
    assert out.startswith('<p class="mb-6">Look: <div class="my-8 flex justify-center">')


def test_markdown_image_renders_as_centered_block():
    out = render(parse_nodes("![A cat](cat.png)"))
    assert "<p" not in out
    assert out.startswith('<div class="my-8 flex justify-center">')
    assert 'src="cat.png"' in out
    assert 'alt="A cat"' in out
    assert 'class="w-full max-w-3xl rounded-lg shadow-lg"' in out


def test_image_attributes_are_escaped():
    html = render_image(Image(src='a"b.png', alt="<x>", title="T")).html
    assert 'src="a&quot;b.png"' in html
    assert 'alt="&lt;x&gt;"' in html
    assert 'title="T"' in html


def test_horizontal_rules_are_dropped():
    assert render([HorizontalRule(markup="<hr/>")]) == ""
    nodes = parse_nodes("before\n\n---\n\nafter\n\n***\n")
    assert any(isinstance(node, HorizontalRule) for node in nodes)
    assert "<hr" not in render(nodes)


def test_blockquote_becomes_highlighted_box():
    nodes = parse_nodes("> quoted words")
    assert isinstance(nodes[0], Blockquote)
    out = render(nodes)
    assert out == (
        '<div class="bg-gray-800 p-6 rounded-lg my-8 border-l-4 border-kawaii-pink">'
        '<p class="mb-6">quoted words</p>\n</div>\n'
    )


def test_headings_inside_blockquote_share_the_rotation():
    quote = Blockquote(children=(h2("Inside"),))
    out = render([h2("Before"), quote, h2("After")], palette=("a", "b"))
    assert H2_COLOR.findall(out) == ["a", "b", "a"]


def test_lists_pass_through_parser_markup():
    nodes = parse_nodes("- one\n- two\n")
    assert len(nodes) == 1
    node = nodes[0]
    assert isinstance(node, ListBlock)
    assert not node.ordered
    assert node.items == ("one", "two")
    assert render(nodes) == node.markup + "\n"


def test_code_block_keeps_language_and_source():
    nodes = parse_nodes("```python\nprint(1)\n```\n")
    node = nodes[0]
    assert isinstance(node, CodeBlock)
    assert node.language == "python"
    assert node.code.strip() == "print(1)"
    assert render(nodes) == node.markup + "\n"


def test_unknown_nodes_fall_back_to_their_markup():
    class Aside:
        markup = "<aside>note</aside>"

    assert render([Aside()]) == "<aside>note</aside>\n"
    assert render([object()]) == ""


def test_parse_nodes_keeps_document_order():
    nodes = parse_nodes("# Title\n\n## Hello\n\nSome text\n")
    assert [type(node).__name__ for node in nodes] == ["Heading", "Heading", "Paragraph"]
    assert nodes[0].level == 1
    assert nodes[1].inline == "Hello"
    assert render(nodes[:1]) == "<h1>Title</h1>\n"


def test_inline_markup_is_prerendered():
    nodes = parse_nodes("Some **bold** and [a link](https://example.com) & more")
    out = render(nodes)
    assert "<strong>bold</strong>" in out
    assert '<a href="https://example.com">a link</a>' in out
    assert "&amp; more" in out


def test_hello_world_scenario():
    out = render(parse_nodes("## Hello\n\nSome text\n\n## World"), palette=("pink", "blue"))
    assert '<h2 class="text-3xl font-bold mt-12 mb-6 pink">Hello</h2>' in out
    assert '<h2 class="text-3xl font-bold mt-12 mb-6 blue">World</h2>' in out
    assert '<p class="mb-6">Some text</p>' in out
