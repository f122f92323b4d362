"""Markdown link parser."""

import re
from collections.abc import Iterator

from ._BaseParser import BaseParser, LinkRef

# [text](target) and ![alt](target), with optional "title", 'title' or (title)
# and the <target with spaces> form
MARKDOWN_URL_PATTERN = re.compile(
    r"""!?\[([^\]]*)\]\(\s*(?:<([^>\n]+)>|([^)\n]+?))(?:\s+(?:"[^"\n]*"|'[^'\n]*'|\([^)\n]*\)))?\s*\)"""
)
# ![[target]] (Obsidian embeds)
WIKI_EMBED_PATTERN = re.compile(r"!\[\[([^\]\n]+)\]\]")


class MarkdownParser(BaseParser):
    """Parser for Markdown links, images and Obsidian embeds."""

    def parse(self, text: str) -> Iterator[LinkRef]:
        # 1. Standard links and images: [Alias](Target) / ![Alt](Target)
        for match in MARKDOWN_URL_PATTERN.finditer(text):
            target = (match.group(2) or match.group(3)).strip()
            line_number, column_number = self.position(text, match.start())
            yield LinkRef(
                line_number=line_number,
                column_number=column_number,
                raw_target=target,
                link_type="markdown",
                is_embed=match.group(0).startswith("!"),
            )

        # 2. Embeds: ![[Target]] (kept verbatim)
        for match in WIKI_EMBED_PATTERN.finditer(text):
            line_number, column_number = self.position(text, match.start())
            yield LinkRef(
                line_number=line_number,
                column_number=column_number,
                raw_target=match.group(1),
                link_type="embed",
                is_embed=True,
            )
