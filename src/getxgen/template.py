"""Placeholder substitution for the generated Dart sources."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Mapping, MutableMapping

from .errors import GetxGenError
from .naming import to_camel, to_pascal, to_snake

__all__ = [
    "TemplateRenderer",
    "TemplateRenderingError",
]


# ``{{ key }}`` or ``{{ key|filter|filter }}``; single braces are Dart code
_PLACEHOLDER_PATTERN = re.compile(r"{{\s*(?P<key>\w+)\s*(?P<filters>(?:\|\s*\w+\s*)*)}}")


class TemplateRenderingError(GetxGenError):
    """Raised when a placeholder names an unknown value or filter."""


def _default_filters() -> dict[str, Callable[[str], str]]:
    return {
        "upper": str.upper,
        "lower": str.lower,
        "snake": to_snake,
        "pascal": to_pascal,
        "camel": to_camel,
    }


@dataclass(slots=True)
class TemplateRenderer:
    """Fill ``{{ key|filters }}`` placeholders from a flat mapping of strings.

    Every placeholder must resolve: an unknown key or filter raises
    :class:`TemplateRenderingError` so a typo in a template never ends up in a
    generated file.
    """

    filters: MutableMapping[str, Callable[[str], str]] = field(default_factory=_default_filters)

    def render_string(self, template: str, context: Mapping[str, str]) -> str:
        def substitute(match: re.Match[str]) -> str:
            key = match.group("key")
            if key not in context:
                raise TemplateRenderingError(f"missing value for '{key}'")

            value = str(context[key])
            for name in filter(None, (part.strip() for part in match.group("filters").split("|"))):
                try:
                    filter_func = self.filters[name]
                except KeyError as exc:
                    raise TemplateRenderingError(f"unknown filter '{name}'") from exc
                value = filter_func(value)
            return value

        return _PLACEHOLDER_PATTERN.sub(substitute, template)

    def render_file(self, template_path: str | Path, context: Mapping[str, str]) -> str:
        """Read ``template_path`` and return it rendered with ``context``."""

        template_path = Path(template_path)
        if not template_path.is_file():
            raise FileNotFoundError(template_path)
        return self.render_string(template_path.read_text(encoding="utf-8"), context)
