"""Interactive command-line client."""

from __future__ import annotations

import asyncio
import sys
from typing import Iterable, TextIO

from chunkfs.command_runner import CommandError, CommandRunner


async def run_loop(runner: CommandRunner, lines: Iterable[str], out: TextIO) -> None:
    """Run each input line as a command and report the outcome to ``out``."""
    for line in lines:
        try:
            message = await runner.handle_input(line)
        except CommandError as exc:
            out.write(f"Error : {exc}\n")
        else:
            out.write(f"Success : {message}\n")
        out.flush()


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        raise SystemExit("Please provide Name Node address.")
    namenode_address = args[0]
    print(f"connecting namenode at {namenode_address!r}")
    runner = CommandRunner(namenode_address)
    print("starting the Client")
    asyncio.run(run_loop(runner, sys.stdin, sys.stdout))
    return 0


if __name__ == "__main__":
    sys.exit(main())