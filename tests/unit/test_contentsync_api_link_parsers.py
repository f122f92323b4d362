"""Unit tests for contentsync.api.link._parsers."""

from contentsync.api.link._parsers import HTMLParser, MarkdownParser, iter_links


def test_markdown_parser_positions_and_kinds():
    text = "intro\n  ![alt](./a.png) and [b](./b.md)\n![[c.png]]"
    refs = list(MarkdownParser().parse(text))

    image, link, embed = refs
    assert (image.line_number, image.column_number, image.link_type, image.is_embed) == (2, 3, "markdown", True)
    assert (link.raw_target, link.is_embed) == ("./b.md", False)
    assert (embed.line_number, embed.link_type, embed.is_embed) == (3, "embed", True)


def test_html_parser_marks_anchor_as_link():
    refs = list(HTMLParser().parse('<a href="./x.md">x</a><img src="./y.png">'))
    assert [(r.raw_target, r.is_embed) for r in refs] == [("./x.md", False), ("./y.png", True)]


def test_iter_links_includes_external_links():
    refs = list(iter_links("[ext](https://example.com)"))
    assert [r.raw_target for r in refs] == ["https://example.com"]
