"""Splicing transformed blocks back into the document."""
from typing import Iterable

from htmlsqueeze.utils.blocks import Block
from htmlsqueeze.utils.log import Log


def reassemble(html: str, originals: Iterable[Block], updated: Iterable[Block]) -> str:
    """
    Replace each original block's span with its updated rendering.

    Blocks are processed in the order given; only the first occurrence of a
    span is replaced. A span that can no longer be found (for instance because
    an earlier replacement rewrote text around it) is left as it is.
    """
    for original, block in zip(originals, updated):
        position = html.find(original.full_span)
        if position < 0:
            Log.warning(f"Inline <{original.kind}> block not found in document, left unchanged")
            continue
        html = html[:position] + block.render() + html[position + len(original.full_span) :]
    return html
