"""Configuration helpers shared by the feature scaffolder and CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from .naming import normalize


@dataclass(frozen=True, slots=True)
class FeatureConfig:
    """Derived identifiers describing a new feature page.

    Attributes
    ----------
    name:
        The phrase provided by the user with runs of whitespace collapsed. It is
        only used for reporting.
    snake:
        The lowercase, underscore separated name used for the feature folder
        and every generated file.
    pascal:
        The capitalised name used as prefix for the generated Dart classes.
    route:
        The GetX route registered by the generated page, ``/<snake>``.
    """

    name: str
    snake: str
    pascal: str
    route: str

    @classmethod
    def from_name(cls, name: str) -> "FeatureConfig":
        """Build a :class:`FeatureConfig` from a raw feature phrase.

        Raises :class:`~getxgen.errors.EmptyNameError` when no name can be
        derived from ``name``.
        """

        snake, pascal = normalize(name)
        return cls(
            name=" ".join(name.split()),
            snake=snake,
            pascal=pascal,
            route=f"/{snake}",
        )

    def context(self) -> Mapping[str, str]:
        """Return a dictionary compatible with the templating helpers."""

        return {
            "name": self.name,
            "snake": self.snake,
            "pascal": self.pascal,
            "route": self.route,
        }
