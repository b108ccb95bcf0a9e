"""Optimize every HTML page of a directory."""
import argparse
import sys
from pathlib import Path
from typing import List, Optional

from htmlsqueeze.pipeline import optimize
from htmlsqueeze.settings import ConfigError, Settings
from htmlsqueeze.utils.log import Log
from htmlsqueeze.utils.transforms import minify_js, obfuscate_js


def minify_file(html_path: Path, rename: bool = True, obfuscate: bool = True) -> Path:
    """Optimize ``html_path`` into ``<stem>.min.html`` next to it and return that path."""
    text = html_path.read_text(encoding="utf-8")
    result = optimize(text, rename=rename, js_transform=obfuscate_js if obfuscate else minify_js)
    target = html_path.with_name(f"{html_path.stem}.min.html")
    target.write_text(result.html, encoding="utf-8")
    return target


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog="minify-dir", description=__doc__)
    parser.add_argument("directory", type=Path)
    parser.add_argument("--no-rename", action="store_true", help="Keep class and id names as they are.")
    parser.add_argument("--no-obfuscate", action="store_true", help="Only minify inline scripts.")
    parser.add_argument("--config", help="YAML configuration file (default: htmlsqueeze.yml when present).")
    args = parser.parse_args(argv)
    if not args.directory.is_dir():
        parser.error(f"{args.directory} is not a directory")

    try:
        Settings.load(args.config)
    except ConfigError as exc:
        parser.error(str(exc))
    Log.setup()

    rename = Settings.RENAME and not args.no_rename
    obfuscate = Settings.OBFUSCATE and not args.no_obfuscate
    for html_file in sorted(args.directory.glob("*.html")):
        if html_file.name.endswith(".min.html"):
            continue
        target = minify_file(html_file, rename=rename, obfuscate=obfuscate)
        print(f"Minified {html_file} -> {target.name}")


if __name__ == "__main__":
    main(sys.argv[1:])
