"""Records of the actions performed while scaffolding a feature."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class ActionKind(str, Enum):
    """Filesystem actions reported by the scaffolder."""

    MKDIR = "mkdir"
    WRITE = "write"
    SKIP = "skip"


class ScaffoldAction(BaseModel):
    """A single directory creation or file write decision."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: ActionKind = Field(..., description="What happened (or would happen) to the path.")
    path: str = Field(..., description="Path of the directory or file, as reported to the user.")

    def describe(self) -> str:
        """Return the console line announcing this action."""

        if self.kind is ActionKind.MKDIR:
            return f"mkdir -p {self.path}"
        if self.kind is ActionKind.SKIP:
            return f"skip (exists): {self.path}"
        return f"write: {self.path}"


class ScaffoldReport(BaseModel):
    """Outcome of one scaffolding run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., description="Phrase the feature was derived from.")
    snake: str = Field(..., description="Lowercase name used for files and folders.")
    pascal: str = Field(..., description="Capitalised name used for identifiers.")
    directory: str = Field(..., description="Feature folder, the target directory joined with the snake name.")
    files: List[str] = Field(default_factory=list, description="Generated file paths in role order.")
    actions: List[ScaffoldAction] = Field(default_factory=list, description="Actions in the order they were taken.")
    dry_run: bool = Field(False, description="Whether the filesystem was left untouched.")

    @property
    def written(self) -> list[str]:
        return [action.path for action in self.actions if action.kind is ActionKind.WRITE]

    @property
    def skipped(self) -> list[str]:
        return [action.path for action in self.actions if action.kind is ActionKind.SKIP]

    def summary_lines(self) -> list[str]:
        """Return the human readable summary printed after the file actions."""

        lines = [
            "",
            f"✅ Generated GetX page: {self.pascal}",
            f"📁 Folder: {self.directory}",
            "📄 Files:",
        ]
        lines.extend(f"   - {path}" for path in self.files)
        lines.append(f"📝 {len(self.written)} written, {len(self.skipped)} skipped")
        lines.extend(
            [
                "",
                "To use:",
                f"  • Route: {self.pascal}Page.route",
                f"  • Binding: {self.pascal}Binding() (attach in your GetPage or before navigation)",
                "",
            ]
        )
        return lines


def render_tree(directory: str | Path, *, max_depth: int = 2) -> list[str]:
    """Return a tree listing of ``directory`` down to ``max_depth`` levels.

    Directories are listed before files and carry a trailing ``/``.
    """

    root = Path(directory)
    lines = [f"{root.name}/"]

    def walk(path: Path, prefix: str, depth: int) -> None:
        entries = sorted(path.iterdir(), key=lambda entry: (not entry.is_dir(), entry.name))
        for index, entry in enumerate(entries):
            last = index == len(entries) - 1
            connector = "└─ " if last else "├─ "
            suffix = "/" if entry.is_dir() else ""
            lines.append(f"{prefix}{connector}{entry.name}{suffix}")
            if entry.is_dir() and depth < max_depth:
                walk(entry, prefix + ("   " if last else "│  "), depth + 1)

    walk(root, "", 1)
    return lines


__all__ = [
    "ActionKind",
    "ScaffoldAction",
    "ScaffoldReport",
    "render_tree",
]
