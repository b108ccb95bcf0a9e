#!/usr/bin/env python3
"""
Optimize a single self-contained HTML file:
- minify inline <style> blocks
- obfuscate inline <script> blocks (scripts with src are left untouched)
- optionally rename class and id tokens across HTML, CSS and inline JS
- collapse whitespace and drop comments in the final document

Usage:
  minify input.html -o output.html --no-rename

Renaming uses pattern matching only: selectors assembled at runtime in JS
(concatenation, template strings) are not updated.
"""
import argparse
from typing import List, Optional

from htmlsqueeze.pipeline import optimize
from htmlsqueeze.settings import ConfigError, Settings
from htmlsqueeze.utils.log import Log
from htmlsqueeze.utils.transforms import minify_js, obfuscate_js


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="minify",
        description="Minify inline CSS, obfuscate inline JS and optionally rename classes/ids in one HTML file.",
    )
    ap.add_argument("input", help="HTML file to optimize.")
    ap.add_argument(
        "-o", "--out", "--output",
        dest="output",
        help=f"Output file (default: {Settings.OUTPUT_FILE}).",
    )
    ap.add_argument("--no-rename", action="store_true", help="Keep class and id names as they are.")
    ap.add_argument("--no-obfuscate", action="store_true", help="Only minify inline scripts instead of obfuscating them.")
    ap.add_argument("--config", help="YAML configuration file (default: htmlsqueeze.yml when present).")
    return ap


def print_mapping_sample(rename_map, limit: int) -> None:
    print(f"Note: class/id renaming was applied. Mapping sample (first {limit}):")
    for original, token in list(rename_map.items())[:limit]:
        print(f"  {original} -> {token}")


def main(argv: Optional[List[str]] = None) -> None:
    ap = build_argparser()
    args = ap.parse_args(argv)

    try:
        Settings.load(args.config)
    except ConfigError as exc:
        ap.error(str(exc))
    Log.setup()

    output = args.output or Settings.OUTPUT_FILE
    rename = Settings.RENAME and not args.no_rename
    js_transform = obfuscate_js if Settings.OBFUSCATE and not args.no_obfuscate else minify_js

    with open(args.input, "r", encoding="utf-8") as f:
        html = f.read()

    result = optimize(html, rename=rename, js_transform=js_transform)

    with open(output, "w", encoding="utf-8") as f:
        f.write(result.html)

    if result.failures:
        Log.warning(f"{len(result.failures)} block(s) kept their unminified content")
    if not result.minified:
        print(f"Wrote non-minified optimized file: {output}")
        return
    print(f"Wrote optimized file: {output}")
    if rename and result.rename_map:
        print_mapping_sample(result.rename_map, Settings.MAPPING_SAMPLE_SIZE)


if __name__ == "__main__":
    main()
