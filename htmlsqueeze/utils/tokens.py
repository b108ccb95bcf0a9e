"""Collection of class and id tokens that are candidates for renaming."""
import re
from typing import Dict, Iterable, List, Tuple

from htmlsqueeze.utils.blocks import Block

CLASS_ATTR_RE = re.compile(r'(?<![\w-])class\s*=\s*"([^"]+)"', re.IGNORECASE)
ID_ATTR_RE = re.compile(r'(?<![\w-])id\s*=\s*"([^"]+)"', re.IGNORECASE)

CSS_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)
CSS_DELIMITER_RE = re.compile(r"[{};]")
ATTR_SELECTOR_RE = re.compile(r"\[[^\]]*\]")
SELECTOR_TOKEN_RE = re.compile(r"[.#]([A-Za-z0-9_-]+)(\\?)")
IDENT_RE = re.compile(r"[A-Za-z0-9_-]+")
NUMERIC_RE = re.compile(r"^\d+$")


def blank_comments(css: str) -> str:
    """Replace comments with spaces so offsets still line up with the source."""
    return CSS_COMMENT_RE.sub(lambda m: " " * (m.end() - m.start()), css)


def selector_spans(css: str) -> List[Tuple[int, int]]:
    """
    Return ``(start, end)`` offsets of every selector prelude in ``css``.

    A prelude is the text between the previous ``{``, ``}`` or ``;`` and the
    next ``{``. At-rule preludes (``@media ...``) are not selectors and are left
    out, as is everything inside declaration bodies.
    """
    blanked = blank_comments(css)
    spans = []
    start = 0
    for m in CSS_DELIMITER_RE.finditer(blanked):
        if m.group(0) == "{" and not blanked[start : m.start()].lstrip().startswith("@"):
            spans.append((start, m.start()))
        start = m.end()
    return spans


def _selector_matches(css: str):
    blanked = blank_comments(css)
    for start, end in selector_spans(css):
        prelude = ATTR_SELECTOR_RE.sub(" ", blanked[start:end])
        for m in SELECTOR_TOKEN_RE.finditer(prelude):
            if not NUMERIC_RE.match(m.group(1)):
                yield m


def selector_fragments(css: str) -> List[str]:
    """Names used as ``.name`` / ``#name`` in the selectors of ``css``."""
    return [m.group(1) for m in _selector_matches(css) if not m.group(2)]


def escaped_fragments(css: str) -> List[str]:
    """
    Identifier prefixes of escaped selector names, e.g. ``md`` in ``.md\\:flex``.

    The full name cannot be renamed by pattern, and renaming the prefix alone
    would split it from the matching ``class`` value.
    """
    return [m.group(1) for m in _selector_matches(css) if m.group(2)]


def _ordered(values: Iterable[str]) -> List[str]:
    seen: Dict[str, None] = {}
    for value in values:
        seen.setdefault(value, None)
    return list(seen)


class TokenScanner:
    """Pattern based scanner for class and id tokens."""

    def class_tokens(self, html: str) -> List[str]:
        return _ordered(
            token
            for m in CLASS_ATTR_RE.finditer(html)
            for token in m.group(1).split()
            if IDENT_RE.fullmatch(token)
        )

    def id_tokens(self, html: str) -> List[str]:
        return _ordered(
            m.group(1) for m in ID_ATTR_RE.finditer(html) if IDENT_RE.fullmatch(m.group(1))
        )

    def collect(self, html: str, styles: List[Block]) -> Tuple[List[str], List[str]]:
        """
        Return the class candidates and the id candidates, in scan order.

        CSS selector fragments join the class pool whether they were written
        as ``.name`` or ``#name``, so one literal name always gets one rename.
        Names that also appear as the prefix of an escaped selector are left out.
        """
        css_names = [name for block in styles for name in selector_fragments(block.content)]
        unsafe = {name for block in styles for name in escaped_fragments(block.content)}
        classes = _ordered(t for t in self.class_tokens(html) + css_names if t not in unsafe)
        ids = [t for t in self.id_tokens(html) if t not in unsafe]
        return classes, ids
