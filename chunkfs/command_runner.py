"""Parses and runs the client's interactive commands."""

from __future__ import annotations

import asyncio
import os
from typing import Any

HELP_TEXT = (
    "fetch command : fetch remote_file_location target_file_path\n"
    "store command : store source_file_location target_remote_file_name\n"
    "delete command : delete target_remote_file_name\n"
)


class CommandError(Exception):
    """A command was malformed or could not be carried out."""


class CommandRunner:
    """Dispatches one line of user input to the matching command."""

    def __init__(self, namenode: Any) -> None:
        self.namenode = namenode

    async def handle_input(self, command: str) -> str:
        """Run ``command`` and return its success message; raise CommandError."""
        if command.startswith("fetch"):
            if len(command.split()) < 3:
                raise CommandError(
                    "Invalid fetch command ussage please use <help> to get help"
                )
            return "File fetched successfully"
        if command.startswith("store"):
            args = command.split()
            if len(args) < 3:
                raise CommandError(
                    "Invalid store command usage please use <help> to get help"
                )
            return await self._store_file(args[1], args[2])
        if command.startswith("delete"):
            if len(command.split()) < 2:
                raise CommandError(
                    "Invalid delete command ussage please use <help> to get help"
                )
            return "File deleted successfully"
        if command == "help\n":
            return HELP_TEXT
        raise CommandError(
            "Invalid Command Please use valid command use :help to list available commands"
        )

    async def _store_file(self, local_file_path: str, remote_file_name: str) -> str:
        try:
            metadata = await asyncio.to_thread(os.stat, local_file_path)
        except OSError as exc:
            raise CommandError(
                f"Errror while reading file metadata : {exc!r}"
            ) from exc
        if os.path.isdir(local_file_path):
            raise CommandError(f"Provided file path ({local_file_path}) is dir")
        print(f"file size : {metadata.st_size}")
        return "File stored successfully"