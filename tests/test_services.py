import pytest

from chunkfs.services import (
    ClientHandler,
    CreatePipelineResponse,
    EchoRequest,
    EchoResponse,
    PeerHandler,
    StoreChunkRequest,
    StoreChunkResponse,
)


@pytest.mark.asyncio
async def test_echo_prefixes_message():
    response = await ClientHandler().echo(EchoRequest(message="hi"))
    assert response == EchoResponse(message="echo hi")


@pytest.mark.asyncio
async def test_echo_empty_message():
    response = await ClientHandler().echo(EchoRequest())
    assert response.message == "echo "


@pytest.mark.asyncio
async def test_store_chunk_address():
    request = StoreChunkRequest(chunk_id="c1", replica_set=["a", "b"])
    response = await ClientHandler().store_chunk(request)
    assert response == StoreChunkResponse(address="saved")


@pytest.mark.asyncio
async def test_create_pipeline_address():
    response = await PeerHandler().create_pipeline(object())
    assert response == CreatePipelineResponse(address="welcome")


def test_store_chunk_request_defaults_are_independent():
    first = StoreChunkRequest()
    second = StoreChunkRequest()
    first.replica_set.append("node")
    assert second.replica_set == []