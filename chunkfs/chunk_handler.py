"""Client side of pushing a chunk to the first data node of its replica set."""

from __future__ import annotations

import asyncio
import contextlib
import inspect
from typing import Any, Callable

from chunkfs.services import StoreChunkRequest
from chunkfs.tcp_service import Mode

_COPY_BLOCK = 64 * 1024


async def _read_block(stream: Any, size: int = _COPY_BLOCK) -> bytes:
    """Read up to ``size`` bytes from a sync or async readable object."""
    data = stream.read(size)
    if inspect.isawaitable(data):
        data = await data
    return data


def _split_address(address: str) -> tuple[str, int]:
    host, sep, port = address.rpartition(":")
    if not sep or not host:
        raise ValueError(f"address {address!r} has no host:port form")
    return host, int(port)


class ChunkHandler:
    """Sends chunk data to data nodes.

    ``datanode_client_factory`` is called with a data node address and returns
    (or resolves to) a client object with an async ``store_chunk(request)``.
    """

    def __init__(self, datanode_client_factory: Callable[[str], Any]) -> None:
        self._client_factory = datanode_client_factory

    async def _connect_datanode(self, address: str) -> Any:
        client = self._client_factory(address)
        if inspect.isawaitable(client):
            client = await client
        return client

    @staticmethod
    async def _open_stream(
        address: str,
    ) -> tuple[asyncio.StreamReader, asyncio.StreamWriter]:
        try:
            host, port = _split_address(address)
            return await asyncio.open_connection(host, port)
        except (OSError, ValueError) as exc:
            raise ConnectionError(
                f"Error while connecting to stream at {address!r} {exc!r}"
            ) from exc

    async def store_chunk(
        self, chunk_id: str, replica_set: list[str], read_stream: Any
    ) -> None:
        """Ask the first replica where to stream, then send ``[id][mode][data]``."""
        replicas = list(replica_set)
        if not replicas:
            raise ValueError("Empty replica set")
        request = StoreChunkRequest(chunk_id=chunk_id, replica_set=replicas)
        client = await self._connect_datanode(replicas[0])
        response = await client.store_chunk(request)

        _, writer = await self._open_stream(response.address)
        try:
            writer.write(chunk_id.encode())
            writer.write(bytes([Mode.WRITE]))
            while block := await _read_block(read_stream):
                writer.write(block)
                await writer.drain()
            await writer.drain()
        finally:
            writer.close()
            with contextlib.suppress(ConnectionError):
                await writer.wait_closed()