from __future__ import annotations

from pathlib import Path

import pytest

from getxgen.cli import build_parser, main
from getxgen.errors import UsageError


def test_parser_joins_name_words():
    args = build_parser().parse_args(["-f", "reset", "password"])
    assert args.name == ["reset", "password"]
    assert args.force and not args.dry_run


def test_parser_raises_usage_error():
    with pytest.raises(UsageError):
        build_parser().parse_args(["-x", "Page"])


def test_cli_generates_feature(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    exit_code = main(["reset", "password", "--directory", str(tmp_path)])
    assert exit_code == 0

    feature_dir = tmp_path / "reset_password"
    assert (feature_dir / "widget").is_dir()
    assert (feature_dir / "reset_password_view.dart").is_file()

    out = capsys.readouterr().out
    assert f"mkdir -p {feature_dir}" in out
    assert f"write: {feature_dir / 'reset_password_binding.dart'}" in out
    assert "✅ Generated GetX page: ResetPassword" in out
    assert "Structure:" in out
    assert "├─ widget/" in out
    assert "└─ reset_password_view.dart" in out


def test_cli_second_run_skips(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    assert main(["ForgotPassword", "-d", str(tmp_path)]) == 0
    capsys.readouterr()
    assert main(["ForgotPassword", "-d", str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert out.count("skip (exists): ") == 5
    assert "📝 0 written, 5 skipped" in out


def test_cli_dry_run_does_not_touch_disk(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    exit_code = main(["-n", "reset password", "-d", str(tmp_path)])
    assert exit_code == 0
    assert list(tmp_path.iterdir()) == []

    out = capsys.readouterr().out
    assert "write: " in out
    assert "Structure:" not in out


def test_cli_uses_template_overrides(tmp_path: Path):
    templates = tmp_path / "templates"
    templates.mkdir()
    (templates / "view.dart.tmpl").write_text("// {{ pascal }}Page\n", encoding="utf-8")
    output = tmp_path / "out"

    assert main(["my-http-page", "-d", str(output), "-t", str(templates)]) == 0
    view = output / "my_http_page" / "my_http_page_view.dart"
    assert view.read_text(encoding="utf-8") == "// MyHttpPagePage\n"


def test_cli_rejects_unknown_flag(capsys: pytest.CaptureFixture[str]):
    assert main(["-x", "Page"]) == 2
    err = capsys.readouterr().err
    assert err.startswith("error: ")
    assert "usage: getx" in err


def test_cli_requires_a_name(capsys: pytest.CaptureFixture[str]):
    assert main([]) == 2
    assert "usage: getx" in capsys.readouterr().err


def test_cli_help_returns_zero(capsys: pytest.CaptureFixture[str]):
    assert main(["-h"]) == 0
    assert "usage: getx" in capsys.readouterr().out


def test_cli_reports_underivable_names(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    assert main(["!!!", "-d", str(tmp_path)]) == 1
    assert list(tmp_path.iterdir()) == []
    assert "Error: could not derive names from input '!!!'." in capsys.readouterr().err


def test_cli_accepts_flags_between_name_words(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    assert main(["-d", str(tmp_path), "reset", "-n", "password"]) == 0
    assert list(tmp_path.iterdir()) == []
    assert "✅ Generated GetX page: ResetPassword" in capsys.readouterr().out
