"""
End-to-end optimization of one HTML document.

Inline styles and scripts are extracted, class and id tokens are optionally
renamed across HTML, CSS and JavaScript, each block goes through its external
transform and the reassembled document gets a final whitespace pass.
"""
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from htmlsqueeze.utils.blocks import Block, BlockScanner
from htmlsqueeze.utils.log import Log
from htmlsqueeze.utils.reassemble import reassemble
from htmlsqueeze.utils.renameMap import build_rename_map
from htmlsqueeze.utils.rewriters import rewrite_attributes, rewrite_css, rewrite_js
from htmlsqueeze.utils.tokens import TokenScanner
from htmlsqueeze.utils.transforms import (
    TransformResult,
    minify_css,
    minify_document,
    obfuscate_js,
)

Transform = Callable[[str], str]


@dataclass
class PipelineResult:
    html: str
    rename_map: Dict[str, str] = field(default_factory=dict)
    results: List[TransformResult] = field(default_factory=list)
    minified: bool = True
    final_error: Optional[str] = None

    @property
    def failures(self) -> List[TransformResult]:
        return [r for r in self.results if not r.ok]


def transform_block(block: Block, transform: Transform) -> TransformResult:
    """Run ``transform`` on the block content, keeping the content on failure."""
    try:
        return TransformResult(block.kind, True, transform(block.content))
    except Exception as exc:
        if block.kind == "style":
            Log.error(f"CSS minification failed for a block, keeping original. Error: {exc}")
        else:
            Log.error(f"JS obfuscation failed for a block, keeping original. Error: {exc}")
        return TransformResult(block.kind, False, block.content, str(exc))


def optimize(
    html: str,
    rename: bool = True,
    css_transform: Optional[Transform] = None,
    js_transform: Optional[Transform] = None,
    html_transform: Optional[Transform] = None,
    block_scanner: Optional[BlockScanner] = None,
    token_scanner: Optional[TokenScanner] = None,
) -> PipelineResult:
    """
    Optimize ``html`` and return the new document with the run's details.

    Parameters:
        html (str): The full source document.
        rename (bool): Rename class and id tokens; with ``False`` every rewrite is skipped.
        css_transform: Minifier applied to each style block (default ``rcssmin``).
        js_transform: Applied to each inline script block (default ``javascript-obfuscator``).
        html_transform: Whole-document pass applied last (default ``htmlmin``).

    Returns:
        PipelineResult: The output document, the rename map and the per-block outcomes.
    """
    css_transform = css_transform or minify_css
    js_transform = js_transform or obfuscate_js
    html_transform = html_transform or minify_document
    block_scanner = block_scanner or BlockScanner()
    token_scanner = token_scanner or TokenScanner()

    styles, scripts = block_scanner.scan(html)
    Log.info(f"Found {len(styles)} inline style block(s) and {len(scripts)} inline script block(s)")

    rename_map: Dict[str, str] = {}
    if rename:
        classes, ids = token_scanner.collect(html, styles)
        rename_map = build_rename_map(classes, ids)
        Log.info(f"Renaming {len(rename_map)} class/id token(s)")
        Log.debug(f"Rename map: {rename_map}")

    results: List[TransformResult] = []
    updated: List[Block] = []
    for block in styles:
        rewritten = block.with_content(rewrite_css(block.content, rename_map))
        result = transform_block(rewritten, css_transform)
        results.append(result)
        updated.append(rewritten.with_content(result.content))
    for block in scripts:
        rewritten = block.with_content(rewrite_js(block.content, rename_map))
        result = transform_block(rewritten, js_transform)
        results.append(result)
        updated.append(rewritten.with_content(result.content))

    out_html = reassemble(html, styles + scripts, updated)
    out_html = rewrite_attributes(out_html, rename_map)

    try:
        final = html_transform(out_html)
    except Exception as exc:
        Log.error(f"Final HTML minification failed: {exc}")
        return PipelineResult(out_html, rename_map, results, minified=False, final_error=str(exc))
    return PipelineResult(final, rename_map, results)
