"""
End-to-end tests of the command line entry point on real files.
"""

import io
import os
import pwd

import pytest

from filecmdr_app.__main__ import EXIT_FAILURE, EXIT_SUCCESS, main


class _UnflushableOutput(io.StringIO):
    """Accepts writes, then fails like a closed pipe on flush."""

    def flush(self):
        raise BrokenPipeError(32, "Broken pipe")


@pytest.fixture
def owner():
    """User name of the current uid (the owner of files we create)."""
    try:
        return pwd.getpwuid(os.getuid()).pw_name
    except KeyError:
        pytest.skip("current uid has no password entry")


@pytest.fixture
def answers(monkeypatch):
    """Feed standard input."""
    def feed(text):
        monkeypatch.setattr("sys.stdin", io.StringIO(text))
    return feed


class TestUsage:

    def test_missing_path(self, capsys):
        assert main([]) == EXIT_FAILURE

        out, err = capsys.readouterr()
        assert out.startswith("usage: filecmdr")
        assert "pathname" in out

    def test_empty_path(self, capsys):
        assert main([""]) == EXIT_FAILURE

        out, err = capsys.readouterr()
        assert "inspect error" in err
        assert out == ""


class TestRun:

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing")]) == EXIT_FAILURE

        out, err = capsys.readouterr()
        assert out == ""
        assert err.startswith("inspect error: Cannot stat")

    def test_list_file(self, tmp_path, owner, answers, capsys):
        path = tmp_path / "notes.txt"
        path.write_text("alpha\nbeta\n")
        path.chmod(0o640)
        answers("y\n")

        assert main([str(path)]) == EXIT_SUCCESS

        out, _ = capsys.readouterr()
        first, rest = out.split("\n", 1)
        assert first.startswith(f"frw-r----- {owner.ljust(8)} {'11'.rjust(12)} ")
        assert first.endswith(f" {path}")
        assert rest == f"Do you want to list the file {path} (y/n): alpha\nbeta\n\n"

    def test_declined(self, tmp_path, owner, answers, capsys):
        path = tmp_path / "notes.txt"
        path.write_text("secret\n")
        answers("n\n")

        assert main([str(path)]) == EXIT_SUCCESS

        out, _ = capsys.readouterr()
        assert "secret" not in out
        assert out.endswith(f"Do you want to list the file {path} (y/n): ")

    def test_list_directory(self, tmp_path, owner, answers, capsys, monkeypatch):
        monkeypatch.chdir(tmp_path)
        target = tmp_path / "dir"
        target.mkdir()
        target.chmod(0o755)
        (target / "b").write_text("")
        (target / "a").write_text("")
        answers("Y\n")

        assert main([str(target)]) == EXIT_SUCCESS

        out, _ = capsys.readouterr()
        lines = out.splitlines()
        assert lines[0].startswith("drwxr-xr-x")
        assert lines[1].startswith(f"Do you want to list the directory {target} (y/n): ")
        names = [line.split()[-1] for line in lines[1:]]
        assert names == [".", "..", "a", "b"]
        # Listing leaves the process inside the listed directory
        assert os.getcwd() == str(target.resolve())

    def test_symlink_has_no_action(self, tmp_path, owner, answers, capsys):
        os.symlink(tmp_path, tmp_path / "link")
        answers("y\n")

        assert main([str(tmp_path / "link")]) == EXIT_SUCCESS

        out, _ = capsys.readouterr()
        assert out.startswith("l")
        assert "(y/n)" not in out

    def test_missing_arguments_line_reported(self, tmp_path, owner, answers, capsys):
        """Test redirected input is used up by the answer, failing the run."""
        path = tmp_path / "script"
        path.write_text("#!/bin/sh\nexit 0\n")
        path.chmod(0o700)
        answers("y\n")

        assert main([str(path)]) == EXIT_FAILURE

        out, err = capsys.readouterr()
        assert out.startswith("erwx------")
        assert f"Do you want to execute {path} (y/n): " in out
        assert err.startswith("action error: No arguments read")

    def test_list_file_bytes_unchanged(self, tmp_path, owner, answers, capsysbinary):
        """Test file content that is not valid UTF-8 is copied byte for byte."""
        path = tmp_path / "latin1.txt"
        path.write_bytes(b"caf\xe9\n")
        answers("y\n")

        assert main([str(path)]) == EXIT_SUCCESS

        out, _ = capsysbinary.readouterr()
        assert out.endswith(b"(y/n): caf\xe9\n\n")

    def test_list_directory_undecodable_name(self, tmp_path, owner, answers,
                                             capsysbinary, monkeypatch):
        monkeypatch.chdir(tmp_path)
        target = tmp_path / "dir"
        target.mkdir()
        try:
            open(os.path.join(os.fsencode(str(target)), b"caf\xe9"), "wb").close()
        except OSError:
            pytest.skip("filesystem rejects non-UTF-8 names")
        answers("y\n")

        assert main([str(target)]) == EXIT_SUCCESS

        out, err = capsysbinary.readouterr()
        assert out.endswith(b" caf\xe9\n")
        assert err == b""

    def test_broken_stdout_reported(self, tmp_path, capsys, monkeypatch):
        """Test a failing final flush still gives a diagnostic and status 1."""
        os.symlink(tmp_path, tmp_path / "link")
        monkeypatch.setattr("sys.stdout", _UnflushableOutput())

        assert main([str(tmp_path / "link")]) == EXIT_FAILURE

        _, err = capsys.readouterr()
        assert "action error: Cannot flush standard output" in err
        assert "Traceback" not in err
