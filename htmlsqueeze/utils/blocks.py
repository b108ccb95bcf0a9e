"""Extraction of inline ``<style>`` and ``<script>`` blocks."""
import re
from dataclasses import dataclass, replace
from typing import List, Tuple

STYLE_RE = re.compile(r"<style\b([^>]*)>(.*?)</style\s*>", re.IGNORECASE | re.DOTALL)
SCRIPT_RE = re.compile(r"<script\b([^>]*)>(.*?)</script\s*>", re.IGNORECASE | re.DOTALL)
SRC_ATTR_RE = re.compile(r"\ssrc\s*=", re.IGNORECASE)


@dataclass(frozen=True)
class Block:
    """An inline block as found in the source document."""

    kind: str
    full_span: str
    attributes: str
    content: str

    def with_content(self, content: str) -> "Block":
        return replace(self, content=content)

    def render(self) -> str:
        """Rebuild the tag with the original attributes and the current content."""
        return f"<{self.kind}{self.attributes}>{self.content}</{self.kind}>"


class BlockScanner:
    """
    Pattern based scanner for inline blocks.

    There is no HTML grammar behind it: any ``<style ...>`` or ``<script ...>``
    opening tag is accepted and its attribute text captured verbatim.
    """

    def styles(self, html: str) -> List[Block]:
        return [
            Block("style", m.group(0), m.group(1), m.group(2))
            for m in STYLE_RE.finditer(html)
        ]

    def scripts(self, html: str) -> List[Block]:
        blocks = []
        for m in SCRIPT_RE.finditer(html):
            # Only the opening tag decides; the body may mention "src=" freely.
            open_tag = m.group(0)[: m.start(2) - m.start(0)]
            if SRC_ATTR_RE.search(open_tag):
                continue
            blocks.append(Block("script", m.group(0), m.group(1), m.group(2)))
        return blocks

    def scan(self, html: str) -> Tuple[List[Block], List[Block]]:
        return self.styles(html), self.scripts(html)
