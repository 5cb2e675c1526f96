"""Utilities for scaffolding GetX feature pages.

The package converts a feature phrase in any casing into file and class names,
renders small Jinja-less templates for the five files of a GetX page, and ships
a scaffolder that can be reused both programmatically and via the ``getx``
command line interface.
"""

from __future__ import annotations

from .config import FeatureConfig
from .errors import EmptyNameError, GetxGenError, UsageError
from .naming import FeatureNames, WordToken, normalize, to_camel, to_pascal, to_snake, tokenize
from .report import ActionKind, ScaffoldAction, ScaffoldReport, render_tree
from .scaffold import FeatureScaffolder
from .template import TemplateRenderer, TemplateRenderingError

__all__ = [
    "ActionKind",
    "EmptyNameError",
    "FeatureConfig",
    "FeatureNames",
    "FeatureScaffolder",
    "GetxGenError",
    "ScaffoldAction",
    "ScaffoldReport",
    "TemplateRenderer",
    "TemplateRenderingError",
    "UsageError",
    "WordToken",
    "normalize",
    "render_tree",
    "to_camel",
    "to_pascal",
    "to_snake",
    "tokenize",
]

__version__ = "0.1.0"
