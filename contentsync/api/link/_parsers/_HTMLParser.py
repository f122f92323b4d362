"""HTML resource attribute parser."""

import re
from collections.abc import Iterator

from ._BaseParser import BaseParser, LinkRef

# Not a full HTML parser; tags may span lines inside Markdown
HTML_RESOURCE_PATTERN = re.compile(
    r"""<(a|img|video|audio|source|iframe)\s+[^>]*?(?<![\w-])(?:href|src)\s*=\s*["']([^"']+)["'][^>]*>""",
    re.IGNORECASE,
)


class HTMLParser(BaseParser):
    """Parser for ``href``/``src`` attributes of resource-carrying HTML tags."""

    def parse(self, text: str) -> Iterator[LinkRef]:
        for match in HTML_RESOURCE_PATTERN.finditer(text):
            line_number, column_number = self.position(text, match.start())
            yield LinkRef(
                line_number=line_number,
                column_number=column_number,
                raw_target=match.group(2).strip(),
                link_type="html",
                is_embed=match.group(1).lower() != "a",
            )
