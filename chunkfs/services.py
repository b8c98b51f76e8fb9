"""Request/response messages and the data node's RPC handlers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class EchoRequest:
    message: str = ""


@dataclass
class EchoResponse:
    message: str = ""


@dataclass
class StoreChunkRequest:
    chunk_id: str = ""
    replica_set: list[str] = field(default_factory=list)


@dataclass
class StoreChunkResponse:
    address: str = ""


@dataclass
class CreatePipelineResponse:
    address: str = ""


class ClientHandler:
    """Serves requests that clients send to a data node."""

    async def echo(self, request: EchoRequest) -> EchoResponse:
        return EchoResponse(message=f"echo {request.message}")

    async def store_chunk(self, request: StoreChunkRequest) -> StoreChunkResponse:
        return StoreChunkResponse(address="saved")


class PeerHandler:
    """Serves requests that other data nodes send."""

    async def create_pipeline(self, request: Any) -> CreatePipelineResponse:
        return CreatePipelineResponse(address="welcome")