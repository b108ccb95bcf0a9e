"""Wrappers around the external minifiers and the JavaScript obfuscator."""
import subprocess
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import htmlmin
import rcssmin
import rjsmin

from htmlsqueeze.settings import Settings


class TransformError(RuntimeError):
    """Raised when an external tool fails on a block."""


@dataclass(frozen=True)
class TransformResult:
    """Outcome of one block transform; ``content`` is the fallback on failure."""

    kind: str
    ok: bool
    content: str
    error: Optional[str] = None


def minify_css(css: str) -> str:
    return rcssmin.cssmin(css)


def minify_js(code: str) -> str:
    return rjsmin.jsmin(code)


def _option_args(options: Dict[str, Any]) -> List[str]:
    args = []
    for name, value in options.items():
        if isinstance(value, bool):
            value = "true" if value else "false"
        elif isinstance(value, (list, tuple)):
            value = ",".join(str(v) for v in value)
        args.extend([f"--{name}", str(value)])
    return args


def obfuscate_js(
    code: str,
    command: Optional[List[str]] = None,
    options: Optional[Dict[str, Any]] = None,
) -> str:
    """Run ``javascript-obfuscator`` on ``code`` and return the obfuscated source.

    Parameters
    ----------
    code: str
        Script body, already rewritten for renamed classes and ids.
    command: list
        Command line of the obfuscator; defaults to ``Settings.OBFUSCATOR_COMMAND``.
    options: dict
        Obfuscator options; defaults to ``Settings.OBFUSCATOR_OPTIONS``.
    """
    command = list(command or Settings.OBFUSCATOR_COMMAND)
    options = Settings.OBFUSCATOR_OPTIONS if options is None else options
    with tempfile.TemporaryDirectory(prefix="htmlsqueeze-") as tmp:
        source = Path(tmp) / "input.js"
        target = Path(tmp) / "output.js"
        source.write_text(code, encoding="utf-8")
        try:
            proc = subprocess.run(
                command + [str(source), "--output", str(target)] + _option_args(options),
                capture_output=True,
                text=True,
            )
        except OSError as exc:
            raise TransformError(f"cannot run {command[0]}: {exc}") from exc
        if proc.returncode != 0:
            detail = (proc.stderr or proc.stdout).strip()
            raise TransformError(f"{command[0]} exited with status {proc.returncode}: {detail}")
        return target.read_text(encoding="utf-8")


def minify_document(html: str, options: Optional[Dict[str, Any]] = None) -> str:
    """Collapse whitespace and drop comments, keeping attribute quotes and closing slashes."""
    options = Settings.HTML_MINIFY_OPTIONS if options is None else options
    return htmlmin.minify(html, **options)
