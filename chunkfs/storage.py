"""Chunk storage backends."""

from __future__ import annotations

import inspect
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, BinaryIO

_COPY_BLOCK = 64 * 1024


async def _read_block(stream: Any, size: int) -> bytes:
    """Read up to ``size`` bytes from a sync or async readable object."""
    data = stream.read(size)
    if inspect.isawaitable(data):
        data = await data
    return data


class Storage(ABC):
    """Interface of a store that keeps chunks addressed by their id."""

    @abstractmethod
    async def write(self, chunk_id: str, chunk_stream: Any) -> int:
        """Store everything readable from ``chunk_stream``; return the byte count."""

    @abstractmethod
    async def read(self, chunk_id: str) -> BinaryIO:
        """Open the chunk for reading."""

    @abstractmethod
    async def delete(self, chunk_id: str) -> None:
        """Remove the chunk."""

    @abstractmethod
    async def available_chunks(self) -> list[str]:
        """Return the ids of all stored chunks."""

    @abstractmethod
    async def available_storage(self) -> int:
        """Return the free storage reported by this store."""


class FileStorage(Storage):
    """Keeps each chunk as one file in a root directory."""

    def __init__(self, root: str | os.PathLike[str]) -> None:
        self.root = Path(root)

    def _path(self, chunk_id: str) -> Path:
        return self.root / chunk_id

    async def write(self, chunk_id: str, chunk_stream: Any) -> int:
        """Create a new chunk file; raise FileExistsError if it already exists."""
        written = 0
        with open(self._path(chunk_id), "xb") as chunk_file:
            while block := await _read_block(chunk_stream, _COPY_BLOCK):
                chunk_file.write(block)
                written += len(block)
        return written

    async def read(self, chunk_id: str) -> BinaryIO:
        return open(self._path(chunk_id), "rb")

    async def delete(self, chunk_id: str) -> None:
        os.remove(self._path(chunk_id))

    async def available_chunks(self) -> list[str]:
        return sorted(entry.name for entry in os.scandir(self.root))

    async def available_storage(self) -> int:
        return 10