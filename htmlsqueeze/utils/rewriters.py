"""Application of a rename map to CSS, JavaScript and HTML attributes."""
import re
from typing import Dict, Pattern

from htmlsqueeze.utils.tokens import (
    ATTR_SELECTOR_RE,
    CLASS_ATTR_RE,
    ID_ATTR_RE,
    selector_spans,
)

IDENT_TAIL = r"(?![A-Za-z0-9_\\-])"


def _names(rename_map: Dict[str, str]) -> str:
    # Longest first, so a token never shadows a longer one it prefixes.
    ordered = sorted(rename_map, key=len, reverse=True)
    return "|".join(re.escape(name) for name in ordered)


def _rewrite_prelude(
    prelude: str, rename_map: Dict[str, str], selector_re: Pattern, attr_re: Pattern
) -> str:
    out = []
    last = 0
    for m in ATTR_SELECTOR_RE.finditer(prelude):
        out.append(selector_re.sub(lambda s: s.group(1) + rename_map[s.group(2)], prelude[last : m.start()]))
        out.append(attr_re.sub(lambda a: a.group(1) + rename_map[a.group(2)] + a.group(3), m.group(0)))
        last = m.end()
    out.append(selector_re.sub(lambda s: s.group(1) + rename_map[s.group(2)], prelude[last:]))
    return "".join(out)


def rewrite_css(css: str, rename_map: Dict[str, str]) -> str:
    """
    Rename ``.token``, ``#token`` and ``[class~="token"]`` in selector text.

    Declaration bodies are copied unchanged, so ``color: #fff`` survives even
    when ``fff`` is a class name. Every token is handled in the same scan.
    """
    if not rename_map:
        return css
    names = _names(rename_map)
    selector_re = re.compile(r"([.#])(" + names + r")" + IDENT_TAIL)
    attr_re = re.compile(r"(\[class[^\]]*?~=\s*[\"']?)(" + names + r")([\"']?\])")

    out = []
    last = 0
    for start, end in selector_spans(css):
        out.append(css[last:start])
        out.append(_rewrite_prelude(css[start:end], rename_map, selector_re, attr_re))
        last = end
    out.append(css[last:])
    return "".join(out)


def rewrite_js(code: str, rename_map: Dict[str, str]) -> str:
    """
    Rename tokens used as whole string literals, e.g. ``'.nav'``, ``"#main"``
    or ``classList.add('open')``.

    Strings built by concatenation or template interpolation are not touched.
    """
    if not rename_map:
        return code
    literal_re = re.compile(r"([\"'`])([.#]?)(" + _names(rename_map) + r")\1")
    return literal_re.sub(lambda m: m.group(1) + m.group(2) + rename_map[m.group(3)] + m.group(1), code)


def rewrite_attributes(html: str, rename_map: Dict[str, str]) -> str:
    """Rename the tokens of every ``class="..."`` and the value of every ``id="..."``."""
    if not rename_map:
        return html

    def class_repl(m):
        parts = [rename_map.get(token, token) for token in m.group(1).split()]
        return 'class="' + " ".join(parts) + '"'

    def id_repl(m):
        return 'id="' + rename_map.get(m.group(1), m.group(1)) + '"'

    html = CLASS_ATTR_RE.sub(class_repl, html)
    return ID_ATTR_RE.sub(id_repl, html)
