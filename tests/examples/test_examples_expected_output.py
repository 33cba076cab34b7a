"""Run each ``examples/ex_*/01_*.py`` and compare stdout with its ``# =>`` comments."""

from __future__ import annotations

import ast
import difflib
import os
import subprocess
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[2]
EXAMPLES_ROOT = REPO_ROOT / "examples"
SRC_ROOT = REPO_ROOT / "src"


def _example_paths() -> list[Path]:
    paths: list[Path] = []
    for topic_dir in sorted(path for path in EXAMPLES_ROOT.glob("ex_*") if path.is_dir()):
        main_files = sorted(topic_dir.glob("01_*.py"))
        if len(main_files) != 1:
            msg = f"{topic_dir}: expected one '01_*.py' file, found {len(main_files)}."
            raise AssertionError(msg)
        paths.append(main_files[0])
    return paths


def _expected_lines(path: Path) -> list[str]:
    source = path.read_text(encoding="utf-8")
    source_lines = source.splitlines()
    calls = sorted(
        (
            node
            for node in ast.walk(ast.parse(source, filename=str(path)))
            if isinstance(node, ast.Call)
            and isinstance(node.func, ast.Name)
            and node.func.id == "print"
        ),
        key=lambda node: (node.lineno, node.col_offset),
    )

    expected: list[str] = []
    for call in calls:
        closing_line = source_lines[(call.end_lineno or call.lineno) - 1]
        if "# =>" not in closing_line:
            msg = f"{path}:{call.end_lineno}: print() must end with '# =>' and its output."
            raise AssertionError(msg)
        expected.append(closing_line.split("# =>", maxsplit=1)[1].strip())
    return expected


@pytest.mark.parametrize(
    "path",
    [pytest.param(path, id=str(path.relative_to(REPO_ROOT))) for path in _example_paths()],
)
def test_example_stdout_matches_inline_expectations(path: Path) -> None:
    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(
        part for part in (str(SRC_ROOT), env.get("PYTHONPATH")) if part
    )

    completed = subprocess.run(  # noqa: S603
        [sys.executable, str(path)],
        cwd=path.parent,
        env=env,
        capture_output=True,
        text=True,
        check=False,
    )
    expected = _expected_lines(path)
    actual = completed.stdout.splitlines()

    if completed.returncode != 0 or completed.stderr or actual != expected:
        diff = "\n".join(
            difflib.unified_diff(expected, actual, fromfile="expected", tofile="actual", lineterm=""),
        )
        msg = (
            f"Example output mismatch for {path}\n"
            f"returncode={completed.returncode}\n"
            f"stderr:\n{completed.stderr or '<empty>'}\n\n"
            f"diff:\n{diff or '<no diff>'}"
        )
        raise AssertionError(msg)
