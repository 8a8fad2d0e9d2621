"""Name derivation for generated files: disk names, include paths and guards."""

from __future__ import annotations

from collections import defaultdict
from enum import Enum
from typing import Iterable

__all__ = [
    "GuardStyle",
    "disk_name",
    "find_collisions",
    "guard_token",
    "include_path",
]


_GUARD_AFFIX = "__"


class GuardStyle(str, Enum):
    """Rule used to normalize an include path into a guard token."""

    LETTERS = "letters"
    DIGITS = "digits"


def include_path(filename: str, module: str | None = None) -> str:
    """Return the string written into ``#include "..."`` for ``filename``.

    The path is qualified with the module directory when one is known, so
    ``include_path("pub_types.h", "foo")`` gives ``"foo/pub_types.h"``.
    """

    if not module:
        return filename
    return f"{module}/{filename}"


def disk_name(filename: str) -> str:
    """Return the lower-cased name a file is created under."""

    return filename.lower()


def _normalize_byte(value: int, keep_digits: bool) -> str:
    if 0x41 <= value <= 0x5A:
        return chr(value)
    if 0x61 <= value <= 0x7A:
        return chr(value - 0x20)
    if keep_digits and 0x30 <= value <= 0x39:
        return chr(value)
    return "_"


def guard_token(
    filename: str,
    module: str | None = None,
    style: GuardStyle | str = GuardStyle.LETTERS,
) -> str:
    """Derive the include guard macro for ``filename``.

    The token is built from the qualified include path. ASCII letters are
    upper-cased and every other byte of its UTF-8 encoding becomes ``_``,
    except digits under :attr:`GuardStyle.DIGITS`. The result is wrapped in
    double underscores::

        >>> guard_token("consts.h", "foo")
        '__FOO_CONSTS_H__'

    Distinct paths that normalize identically (``a-b.h`` and ``a_b.h``) share
    a token. Such collisions are not detected here; see :func:`find_collisions`.
    """

    keep_digits = GuardStyle(style) is GuardStyle.DIGITS
    encoded = include_path(filename, module).encode("utf-8", "surrogateescape")
    body = "".join(_normalize_byte(value, keep_digits) for value in encoded)
    return f"{_GUARD_AFFIX}{body}{_GUARD_AFFIX}"


def find_collisions(
    filenames: Iterable[str],
    module: str | None = None,
    style: GuardStyle | str = GuardStyle.LETTERS,
) -> dict[str, tuple[str, ...]]:
    """Return guard tokens claimed by more than one distinct include path."""

    owners: dict[str, list[str]] = defaultdict(list)
    for filename in filenames:
        path = include_path(filename, module)
        token = guard_token(filename, module, style)
        if path not in owners[token]:
            owners[token].append(path)
    return {token: tuple(paths) for token, paths in owners.items() if len(paths) > 1}
