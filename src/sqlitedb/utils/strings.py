from __future__ import annotations

import re
from typing import Optional, Sequence

from sqlitedb.errors import EmptyListError, InvalidArgumentError

_WHITESPACE = re.compile(r"\s+")


def list_contains(items: Sequence[str], name: str) -> bool:
    """Return ``True`` if ``name`` matches an element of ``items``.

    Matching ignores case but is otherwise exact: ``"pro"`` does not match
    ``"Profile"`` and ``"straße"`` does not match ``"STRASSE"``.

    Raises:
        InvalidArgumentError: ``items`` or ``name`` is ``None``, or ``name`` is blank.
        EmptyListError: ``items`` is empty.
    """
    if items is None or name is None:
        raise InvalidArgumentError("Input parameters were None.")
    if not str(name).strip():
        raise InvalidArgumentError("Provided input was empty.")
    if len(items) < 1:
        raise EmptyListError("Provided list was empty.")

    wanted = name.lower()
    return any(item is not None and item.lower() == wanted for item in items)


def list_contains_all(items: Sequence[str], *names: Optional[str]) -> bool:
    """Return ``True`` if every non-blank entry of ``names`` is in ``items``.

    Blank or ``None`` names are skipped, so ``list_contains_all(items, "")``
    is ``True`` for any non-empty ``items``.
    """
    if items is None:
        raise InvalidArgumentError("Input parameters were None.")
    if len(items) < 1:
        raise EmptyListError("Provided list was empty.")

    for name in names:
        if name is None or not str(name).strip():
            continue
        if not list_contains(items, name):
            return False
    return True


def remove_spaces(text: Optional[str]) -> str:
    """Strip every whitespace character from ``text``."""
    if text is None or not text.strip():
        return ""
    return _WHITESPACE.sub("", text.strip())
