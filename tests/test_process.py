from __future__ import annotations

import os
import shlex
import sys
import tempfile
import unittest
from unittest import mock

try:
    import typer

    from desktools._cli_output import fatal
    from desktools._process import CommandError, ScriptError, run_command, split_command
except ModuleNotFoundError as exc:  # pragma: no cover - env-dependent
    run_command = None  # type: ignore[assignment]
    _IMPORT_ERROR = exc
else:
    _IMPORT_ERROR = None


@unittest.skipIf(run_command is None, f"Missing dependency: {_IMPORT_ERROR}")
class RunCommandTests(unittest.TestCase):
    def test_captures_stdout(self) -> None:
        out = run_command(sys.executable, ["-c", "print('hi')"], capture=True)
        self.assertEqual(out, b"hi\n")

    def test_returns_empty_bytes_without_capture(self) -> None:
        self.assertEqual(run_command(sys.executable, ["-c", "pass"]), b"")

    def test_writes_input_to_stdin(self) -> None:
        code = "import sys; sys.stdout.write(sys.stdin.read().upper())"
        out = run_command(sys.executable, ["-c", code], capture=True, input=b"abc")
        self.assertEqual(out, b"ABC")

    def test_runs_in_cwd(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            out = run_command(sys.executable, ["-c", "import os; print(os.getcwd())"], cwd=tmp_dir, capture=True)
            self.assertEqual(os.path.realpath(out.decode().strip()), os.path.realpath(tmp_dir))

    def test_non_zero_exit_raises(self) -> None:
        with self.assertRaises(CommandError) as ctx:
            run_command(sys.executable, ["-c", "import sys; sys.exit(3)"])
        self.assertIn("exited with exit status 3", str(ctx.exception))

    def test_signal_death_raises(self) -> None:
        code = "import os, signal; os.kill(os.getpid(), signal.SIGTERM)"
        with self.assertRaises(CommandError) as ctx:
            run_command(sys.executable, ["-c", code])
        self.assertIn("terminated by signal 15", str(ctx.exception))

    def test_missing_executable_raises(self) -> None:
        with self.assertRaises(CommandError) as ctx:
            run_command("desktools-no-such-program-xyz")
        self.assertIn("could not be started", str(ctx.exception))

    def test_command_error_is_script_error(self) -> None:
        self.assertTrue(issubclass(CommandError, ScriptError))

    def test_echoes_command_to_stderr(self) -> None:
        with mock.patch("typer.secho") as secho:
            run_command(sys.executable, ["-c", "pass"])
        secho.assert_called_once()
        self.assertEqual(secho.call_args.args[0], f"$ {shlex.join([sys.executable, '-c', 'pass'])}")
        self.assertTrue(secho.call_args.kwargs["err"])


@unittest.skipIf(run_command is None, f"Missing dependency: {_IMPORT_ERROR}")
class SplitCommandTests(unittest.TestCase):
    def test_plain_name(self) -> None:
        self.assertEqual(split_command("nvim"), ["nvim"])

    def test_with_arguments(self) -> None:
        self.assertEqual(split_command("code --wait"), ["code", "--wait"])
        self.assertEqual(split_command("'my editor' -"), ["my editor", "-"])

    def test_empty_rejected(self) -> None:
        for value in (None, "", "   "):
            with self.assertRaises(ScriptError):
                split_command(value)

    def test_bad_quoting_rejected(self) -> None:
        with self.assertRaises(ScriptError):
            split_command("'unterminated")


@unittest.skipIf(run_command is None, f"Missing dependency: {_IMPORT_ERROR}")
class FatalTests(unittest.TestCase):
    def test_fatal_exits_with_code(self) -> None:
        with mock.patch("typer.secho") as secho:
            with self.assertRaises(typer.Exit) as ctx:
                fatal("boom", code=3)
        self.assertEqual(ctx.exception.exit_code, 3)
        secho.assert_called_once_with("[error] boom", fg=typer.colors.RED, err=True)

    def test_fatal_can_print_to_stdout(self) -> None:
        with mock.patch("typer.secho") as secho:
            with self.assertRaises(typer.Exit):
                fatal("boom", err=False)
        self.assertFalse(secho.call_args.kwargs["err"])


if __name__ == "__main__":
    unittest.main()
