"""End-to-end tests that run the ftrek command in a subprocess."""

import os
import subprocess
import sys
from pathlib import Path

import pytest


def run_cli(args, cwd=None):
    """Run the ftrek CLI with the given arguments."""
    env = dict(os.environ)
    env.pop("NO_COLOR", None)
    cmd = [sys.executable, "-m", "ftrek"] + args
    return subprocess.run(cmd, stdout=subprocess.PIPE, stderr=subprocess.PIPE, encoding="utf-8", cwd=cwd, env=env)


def line_containing(lines, text):
    return next(line for line in lines if text in line)


def depth_of(line):
    """Number of four-column prefix segments before the name."""
    prefix_width = len(line) - len(line.lstrip(" │├└─"))
    return prefix_width // 4


@pytest.fixture
def nested_root(tmp_path: Path) -> Path:
    root = tmp_path / "root"
    (root / "nested").mkdir(parents=True)
    (root / "nested" / "file.txt").write_text("content")
    return root


def test_explicit_root(nested_root):
    result = run_cli([str(nested_root)])

    assert result.returncode == 0
    assert result.stderr == ""
    lines = result.stdout.splitlines()
    assert lines == [f"{nested_root}/", "└── nested/", "    └── file.txt"]

    nested = line_containing(lines, "nested/")
    file_line = line_containing(lines, "file.txt")
    assert depth_of(file_line) == depth_of(nested) + 1


def test_gitignore_filtering(ignore_tree):
    result = run_cli(["--gitignore", str(ignore_tree)])

    assert result.returncode == 0
    assert "kept.txt" in result.stdout
    assert "ignored.txt" not in result.stdout
    assert "ignored_dir" not in result.stdout
    assert "inside.txt" not in result.stdout


def test_without_gitignore_everything_is_listed(ignore_tree):
    result = run_cli([str(ignore_tree)])

    assert result.returncode == 0
    for name in (".gitignore", "kept.txt", "ignored.txt", "ignored_dir/", "inside.txt"):
        assert name in result.stdout


def test_default_root(tmp_path):
    (tmp_path / "local.txt").write_text("local")

    result = run_cli([], cwd=tmp_path)

    assert result.returncode == 0
    lines = result.stdout.splitlines()
    assert lines[0] == "./"
    assert "└── local.txt" in lines


def test_piped_output_is_not_colored(nested_root):
    result = run_cli([str(nested_root)])
    assert "\x1b[" not in result.stdout


def test_color_always_overrides_no_color(nested_root):
    env = dict(os.environ, NO_COLOR="")
    result = subprocess.run(
        [sys.executable, "-m", "ftrek", "--color", "always", str(nested_root)],
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        encoding="utf-8",
        env=env,
    )
    assert result.stdout.startswith(f"\x1b[34m{nested_root}/\x1b[39m")


@pytest.mark.parametrize("flags", [[], ["--gitignore"]])
def test_undecodable_file_name(tmp_path, flags):
    (tmp_path / "ok.txt").write_text("")
    try:
        with open(os.path.join(os.fsencode(tmp_path), b"bad\xffname"), "wb"):
            pass
    except OSError:
        pytest.skip("Filesystem rejects file names that are not valid UTF-8")

    result = run_cli(flags + [str(tmp_path)])

    assert result.returncode == 0
    assert result.stderr == ""
    lines = result.stdout.splitlines()
    assert len(lines) == 3
    assert any(line.endswith("bad�name") for line in lines)
    assert any(line.endswith("ok.txt") for line in lines)


def test_gitignore_root_inside_ignored_directory(tmp_path):
    outer = tmp_path / "outer"
    root = outer / "build" / "proj"
    root.mkdir(parents=True)
    (outer / ".gitignore").write_text("build/\n")
    (root / "main.py").write_text("")

    result = run_cli(["--gitignore", str(root)])

    assert result.returncode == 0
    assert result.stdout.splitlines() == [f"{root}/", "└── main.py"]


def test_help():
    result = run_cli(["--help"])

    assert result.returncode == 0
    assert "Usage:" in result.stdout
    assert "[DIRECTORY]" in result.stdout
    assert "--gitignore" in result.stdout


def test_missing_root(tmp_path):
    result = run_cli([str(tmp_path / "missing")])

    assert result.returncode == 1
    assert result.stdout == ""
    assert result.stderr.startswith("Error: ")


def test_root_is_a_file(nested_root):
    result = run_cli(["--gitignore", str(nested_root / "nested" / "file.txt")])

    assert result.returncode == 1
    assert "Error: " in result.stderr


def test_usage_error():
    result = run_cli(["--no-such-flag"])

    assert result.returncode == 2
    assert "Usage:" in result.stderr


@pytest.mark.skipif(sys.platform == "win32", reason="requires SIGPIPE")
def test_closed_pipe_is_quiet(tmp_path):
    for i in range(5000):
        (tmp_path / f"file_{i:04d}.txt").touch()

    producer = subprocess.Popen(
        [sys.executable, "-m", "ftrek", str(tmp_path)], stdout=subprocess.PIPE, stderr=subprocess.PIPE
    )
    assert producer.stdout is not None
    producer.stdout.readline()
    producer.stdout.close()
    _, stderr = producer.communicate(timeout=30)

    assert producer.returncode in (0, 141)
    assert b"Traceback" not in stderr
