"""Assignment of short replacement names to class and id tokens."""
from typing import Dict, Iterable

BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def base36(number: int) -> str:
    if number < 0:
        raise ValueError("base36 expects a non-negative integer")
    digits = ""
    while True:
        number, rem = divmod(number, 36)
        digits = BASE36_DIGITS[rem] + digits
        if not number:
            return digits


def shortToken(index: int) -> str:
    """
    Return the replacement token for ``index``.

    The leading underscore keeps the result a valid CSS identifier and stops
    it from ever starting with a digit.
    """
    return "_" + base36(index)


def build_rename_map(classes: Iterable[str], ids: Iterable[str]) -> Dict[str, str]:
    """
    Map every class token, then every id token, to the next free short token.

    Tokens already mapped keep their first assignment. Short tokens that
    collide with a collected name are skipped so keys and values never overlap.
    """
    classes = list(classes)
    ids = list(ids)
    taken = set(classes) | set(ids)

    rename_map: Dict[str, str] = {}
    index = 0
    for token in classes + ids:
        if token in rename_map:
            continue
        candidate = shortToken(index)
        while candidate in taken:
            index += 1
            candidate = shortToken(index)
        rename_map[token] = candidate
        index += 1
    return rename_map
