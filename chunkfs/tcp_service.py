"""TCP service that streams chunk data in and out of a store."""

from __future__ import annotations

import asyncio
import contextlib
import enum
import logging

from chunkfs.storage import Storage

logger = logging.getLogger(__name__)

_COPY_BLOCK = 64 * 1024
_CHUNK_ID_LEN = 16


class Mode(enum.IntEnum):
    """What the peer wants to do with a chunk."""

    WRITE = 1
    READ = 2


def bytes_to_uuid(chunk_id_bytes: bytes) -> str:
    """Render a raw chunk id as lower-case hex."""
    return chunk_id_bytes.hex()


class TCPService:
    """Accepts connections of the form ``[16-byte id][mode byte][data]``."""

    def __init__(self, port: int | str, store: Storage) -> None:
        self.port = int(port)
        self.store = store
        self._server: asyncio.base_events.Server | None = None

    async def start(self) -> None:
        """Bind the listening socket on 127.0.0.1."""
        self._server = await asyncio.start_server(
            self._on_connection, "127.0.0.1", self.port
        )
        self.port = self._server.sockets[0].getsockname()[1]

    async def serve_forever(self) -> None:
        if self._server is None:
            await self.start()
        await self._server.serve_forever()

    async def close(self) -> None:
        if self._server is not None:
            self._server.close()
            await self._server.wait_closed()
            self._server = None

    async def __aenter__(self) -> TCPService:
        await self.start()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def _on_connection(
        self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter
    ) -> None:
        try:
            await self.handle_connection(reader, writer)
        except Exception as exc:
            logger.error("error while handling the tcp connection %s", exc)

    async def handle_connection(
        self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter
    ) -> None:
        """Serve one connection, then close it."""
        try:
            chunk_id = bytes_to_uuid(await reader.readexactly(_CHUNK_ID_LEN))
            logger.info("got chunk_id %s", chunk_id)
            mode_byte = (await reader.readexactly(1))[0]
            if mode_byte == Mode.WRITE:
                logger.info("accepted request for chunk id %s for write mode", chunk_id)
                await self.store.write(chunk_id, reader)
            elif mode_byte == Mode.READ:
                logger.info("accepted request for chunk id %s for read mode", chunk_id)
                with await self.store.read(chunk_id) as chunk_file:
                    for block in iter(lambda: chunk_file.read(_COPY_BLOCK), b""):
                        writer.write(block)
                        await writer.drain()
            else:
                raise ValueError(
                    f"accepted request for chunk id {chunk_id} for unknown mode"
                )
        finally:
            writer.close()
            with contextlib.suppress(ConnectionError):
                await writer.wait_closed()