# topmark:header:start
#
#   project      : Chirp
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running Chirp through Click's test runner.

`run_cli()` invokes the group in-process; pass ``obj={"sink": ...}`` to make the
commands render into a test sink instead of the runner's captured stdout.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any, Sequence

from click.testing import CliRunner, Result

from chirp.cli.exit_codes import ExitCode
from chirp.cli.main import cli

if TYPE_CHECKING:
    from chirp.sinks import SinkLike


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
    sink: SinkLike | None = None,
) -> Result:
    """Invoke the CLI in-process.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["say", "hi"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input for
            ``say -``.
        sink (SinkLike | None): Optional sink injected into Click's context object.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.

    Example:
        ```python
        result = run_cli(["--no-color", "say", "--icon", "check", "done"])
        assert result.output == "✓ done\\n"
        ```
    """
    runner = CliRunner()
    obj: dict[str, Any] = {} if sink is None else {"sink": sink}
    return runner.invoke(cli, argv, input=input_text, obj=obj)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output
