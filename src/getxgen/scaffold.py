"""GetX feature scaffolding helpers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from .config import FeatureConfig
from .report import ActionKind, ScaffoldAction, ScaffoldReport
from .template import TemplateRenderer

__all__ = ["FILE_ROLES", "FeatureScaffolder", "TEMPLATE_SUFFIX", "WIDGET_DIR"]

LOGGER = logging.getLogger(__name__)

WIDGET_DIR = "widget"
TEMPLATE_SUFFIX = ".dart.tmpl"


BINDING_TEMPLATE = """import 'package:get/get.dart';

import '{{ snake }}_logic.dart';
import '{{ snake }}_logic_impl.dart';

class {{ pascal }}Binding extends Bindings {
  @override
  void dependencies() {
    // Bind interface to implementation
    Get.lazyPut<{{ pascal }}Logic>(() => {{ pascal }}LogicImpl());
  }
}
"""

LOGIC_TEMPLATE = """import '{{ snake }}_state.dart';

abstract class {{ pascal }}Logic {
  abstract final {{ pascal }}State state;
}
"""

LOGIC_IMPL_TEMPLATE = """import 'package:get/get.dart';

import '{{ snake }}_logic.dart';
import '{{ snake }}_state.dart';

class {{ pascal }}LogicImpl extends GetxController implements {{ pascal }}Logic {
  @override
  final {{ pascal }}State state = {{ pascal }}State();

  // Add your lifecycle methods or actions here
  // @override
  // void onInit() { super.onInit(); }
}
"""

STATE_TEMPLATE = """import 'package:get/get.dart';

class {{ pascal }}State {
  final RxBool fetchingPageData = false.obs;
}
"""

VIEW_TEMPLATE = """import 'package:flutter/material.dart';
import 'package:get/get.dart';

import '{{ snake }}_logic.dart';
import '{{ snake }}_state.dart';

class {{ pascal }}Page extends StatelessWidget {
  static const String route = '{{ route }}';

  {{ pascal }}Page({super.key});

  final {{ pascal }}Logic logic = Get.find<{{ pascal }}Logic>();
  final {{ pascal }}State state = Get.find<{{ pascal }}Logic>().state;

  @override
  Widget build(BuildContext context) {
    return Scaffold(
      appBar: AppBar(
        title: const Text('{{ pascal }}'),
      ),
      body: Center(
        child: Obx(() => Text(
          state.fetchingPageData.value ? 'Loading {{ pascal }}...' : '{{ pascal }}',
        )),
      ),
    );
  }
}
"""

# (role, built-in template) in the order the files are written
FILE_ROLES: tuple[tuple[str, str], ...] = (
    ("binding", BINDING_TEMPLATE),
    ("logic", LOGIC_TEMPLATE),
    ("logic_impl", LOGIC_IMPL_TEMPLATE),
    ("state", STATE_TEMPLATE),
    ("view", VIEW_TEMPLATE),
)


@dataclass(slots=True)
class FeatureScaffolder:
    """Create the folder and the five GetX files of a feature page.

    Templates found in ``template_dir`` as ``<role>.dart.tmpl`` replace the
    built-in body for that role.
    """

    renderer: TemplateRenderer
    template_dir: Path | None

    def __init__(
        self,
        renderer: TemplateRenderer | None = None,
        *,
        template_dir: str | Path | None = None,
    ) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.template_dir = Path(template_dir).expanduser() if template_dir is not None else None

    def feature_files(self, config: FeatureConfig, target_dir: str | Path = ".") -> list[Path]:
        """Return the paths of the generated files in role order."""

        feature_dir = Path(target_dir) / config.snake
        return [feature_dir / f"{config.snake}_{role}.dart" for role, _ in FILE_ROLES]

    def _render(self, role: str, template: str, config: FeatureConfig) -> str:
        context = config.context()
        if self.template_dir is not None:
            override = self.template_dir / f"{role}{TEMPLATE_SUFFIX}"
            if override.is_file():
                LOGGER.debug("using template override %s for %s", override, role)
                return self.renderer.render_file(override, context)
        return self.renderer.render_string(template, context)

    def create(
        self,
        config: FeatureConfig,
        target_dir: str | Path = ".",
        *,
        force: bool = False,
        dry_run: bool = False,
        echo: Callable[[str], None] = print,
    ) -> ScaffoldReport:
        """Scaffold the feature described by ``config`` inside ``target_dir``.

        Every action is passed to ``echo`` as it happens, followed by the
        summary block. Existing files are skipped unless ``force`` is set, and
        nothing is created or written when ``dry_run`` is set.
        """

        feature_dir = Path(target_dir) / config.snake
        actions: list[ScaffoldAction] = []

        def record(kind: ActionKind, path: Path) -> None:
            action = ScaffoldAction(kind=kind, path=str(path))
            actions.append(action)
            echo(action.describe())

        for directory in (feature_dir, feature_dir / WIDGET_DIR):
            if not dry_run:
                directory.mkdir(parents=True, exist_ok=True)
                LOGGER.debug("created directory %s", directory)
            record(ActionKind.MKDIR, directory)

        files = self.feature_files(config, target_dir)
        for (role, template), destination in zip(FILE_ROLES, files):
            if destination.exists() and not force:
                LOGGER.debug("%s exists, leaving it untouched", destination)
                record(ActionKind.SKIP, destination)
                continue
            rendered = self._render(role, template, config)
            if not dry_run:
                destination.write_text(rendered, encoding="utf-8")
                LOGGER.debug("wrote %d characters to %s", len(rendered), destination)
            record(ActionKind.WRITE, destination)

        report = ScaffoldReport(
            name=config.name,
            snake=config.snake,
            pascal=config.pascal,
            directory=str(feature_dir),
            files=[str(path) for path in files],
            actions=actions,
            dry_run=dry_run,
        )
        for line in report.summary_lines():
            echo(line)
        return report
