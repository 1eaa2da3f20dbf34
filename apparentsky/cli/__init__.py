"""Command line entry points for :mod:`apparentsky`."""

from __future__ import annotations

from collections.abc import Sequence

from typer.main import get_command

from .app import app

__all__ = ["app", "console_main", "main"]


def main(argv: Sequence[str] | None = None) -> int:
    """Invoke the Typer application and return its exit code.

    Typer reports usage errors, aborts and explicit exits by raising
    :class:`SystemExit` in standalone mode, whichever click build it ships.
    """

    command = get_command(app)
    args = list(argv) if argv is not None else None
    try:
        command.main(args=args, prog_name="apparentsky", standalone_mode=True)
    except SystemExit as exc:
        return _exit_code(exc.code)
    return 0


def _exit_code(code: object) -> int:
    if code is None:
        return 0
    if isinstance(code, int):
        return code
    return 1


def console_main() -> None:
    raise SystemExit(main())
