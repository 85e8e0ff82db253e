"""Tests for the filekit command line."""

from pathlib import Path

from typer.testing import CliRunner

from filekit.cli import app

runner = CliRunner()


def test_dirs(isolated_os_env):
    result = runner.invoke(app, ["dirs"])

    assert result.exit_code == 0
    assert f"home\t{isolated_os_env}" in result.stdout
    assert f"config\t{isolated_os_env}/.config/filekit" in result.stdout
    assert (isolated_os_env / ".cache" / "filekit").is_dir()


def test_dirs_uses_configured_namespace(tmp_path, isolated_os_env):
    config = tmp_path / "cfg.yml"
    config.write_text("namespace: vimb\n")

    result = runner.invoke(app, ["--config", str(config), "dirs"])

    assert result.exit_code == 0
    assert f"cache\t{isolated_os_env}/.cache/vimb" in result.stdout


def test_cat_and_missing_file(tmp_path, isolated_os_env):
    target = tmp_path / "note.txt"
    target.write_text("hello\n")

    ok = runner.invoke(app, ["cat", str(target)])
    assert ok.exit_code == 0
    assert ok.stdout == "hello\n"

    missing = runner.invoke(app, ["cat", str(tmp_path / "missing.txt")])
    assert missing.exit_code == 1


def test_lines(tmp_path, isolated_os_env):
    target = tmp_path / "note.txt"
    target.write_text("a\nb")

    result = runner.invoke(app, ["lines", str(target)])

    assert result.stdout.splitlines() == ["1\ta", "2\tb"]


def test_unique(tmp_path, isolated_os_env):
    target = tmp_path / "history"
    target.write_text("1,foo\n2,bar\n1,baz\n")

    result = runner.invoke(app, ["unique", str(target)])

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["2,bar", "1,baz"]


def test_find(isolated_os_env):
    found = runner.invoke(app, ["find", "Hello World", "world"])
    assert found.exit_code == 0
    assert found.stdout.strip() == "6"

    assert runner.invoke(app, ["find", "abc", "xyz"]).exit_code == 1


def test_replace(isolated_os_env):
    result = runner.invoke(app, ["replace", "a", "b", "banana"])

    assert result.stdout.strip() == "bbnbnb"


def test_tmpfile_from_argument_and_stdin(isolated_os_env):
    from_arg = runner.invoke(app, ["tmpfile", "payload"])
    assert from_arg.exit_code == 0
    path = Path(from_arg.stdout.strip())
    assert path.read_text() == "payload"
    assert path.name.startswith("filekit-")

    from_stdin = runner.invoke(app, ["tmpfile"], input="piped")
    assert Path(from_stdin.stdout.strip()).read_text() == "piped"


def test_build_path(tmp_path, isolated_os_env):
    home = runner.invoke(app, ["build-path", "~/docs/file.txt"])
    assert home.stdout.strip() == f"{isolated_os_env}/docs/file.txt"
    assert (isolated_os_env / "docs").is_dir()

    base = tmp_path / "base"
    relative = runner.invoke(app, ["build-path", "rel", "--base", str(base)])
    assert relative.stdout.strip() == f"{base}/rel"


def test_invalid_config_exits_cleanly(tmp_path, isolated_os_env):
    listing = tmp_path / "list.yml"
    listing.write_text("- a\n- b\n")
    bad_mode = tmp_path / "mode.yml"
    bad_mode.write_text("path_mode: '99'\n")
    unsupported = tmp_path / "cfg.toml"
    unsupported.write_text("namespace = 'x'\n")

    for config in (listing, bad_mode, unsupported):
        result = runner.invoke(app, ["--config", str(config), "replace", "a", "b", "banana"])
        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)


def test_plain_commands_do_not_create_config_dir(isolated_os_env):
    result = runner.invoke(app, ["replace", "a", "b", "banana"])

    assert result.exit_code == 0
    assert not (isolated_os_env / ".config" / "filekit").exists()
