"""Skeleton fragments for generated headers and their renderer."""

from __future__ import annotations

import re
from typing import Mapping

__all__ = [
    "CLOSE_TEMPLATE",
    "INCLUDE_TEMPLATE",
    "OPEN_TEMPLATE",
    "PRAGMA_TEMPLATE",
    "TemplateRenderer",
    "TemplateRenderingError",
]


PRAGMA_TEMPLATE = "#pragma once\n\n"

OPEN_TEMPLATE = "#ifndef {{ guard }}\n#define {{ guard }}\n\n"

INCLUDE_TEMPLATE = '#include "{{ path }}"\n'

CLOSE_TEMPLATE = "#endif //{{ guard }}\n"

_PLACEHOLDER_PATTERN = re.compile(r"{{\s*(?P<key>\w+)\s*}}")


class TemplateRenderingError(RuntimeError):
    """Raised when a fragment references a value that was not supplied."""


class TemplateRenderer:
    """Fill ``{{ placeholder }}`` slots of the skeleton fragments."""

    def render_string(self, template: str, context: Mapping[str, str]) -> str:
        def substitute(match: re.Match[str]) -> str:
            key = match.group("key")
            if key not in context:
                raise TemplateRenderingError(f"missing value for '{key}'")
            return context[key]

        return _PLACEHOLDER_PATTERN.sub(substitute, template)
