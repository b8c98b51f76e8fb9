"""Data node entry point."""

from __future__ import annotations

import asyncio
import logging
import sys

from chunkfs.storage import FileStorage
from chunkfs.tcp_service import TCPService

logger = logging.getLogger(__name__)

DEFAULT_RPC_PORT = 3000
DEFAULT_TCP_PORT = 3001
STORAGE_ROOT = "./temp"


def _port(value: str) -> int:
    port = int(value)
    if not 0 <= port <= 65535:
        raise ValueError(f"port {value!r} is out of range")
    return port


def parse_ports(argv: list[str]) -> tuple[int, int]:
    """Return ``(rpc_port, tcp_port)`` from the arguments, with defaults."""
    rpc_port = _port(argv[0]) if len(argv) > 0 else DEFAULT_RPC_PORT
    tcp_port = _port(argv[1]) if len(argv) > 1 else DEFAULT_TCP_PORT
    return rpc_port, tcp_port


async def _serve(tcp_port: int) -> None:
    store = FileStorage(STORAGE_ROOT)
    logger.info("Starting the tcp server on port: %s", tcp_port)
    service = TCPService(tcp_port, store)
    try:
        await service.serve_forever()
    finally:
        await service.close()


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    rpc_port, tcp_port = parse_ports(args)
    logging.basicConfig(level=logging.INFO)
    logger.info("Data node address : 127.0.0.1:%s", rpc_port)
    asyncio.run(_serve(tcp_port))
    return 0


if __name__ == "__main__":
    sys.exit(main())