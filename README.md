# chunkfs

chunkfs is the chunk layer of a small distributed file store, built on
`asyncio`. A data node keeps chunks as files on local disk and streams them
in and out over TCP. An interactive client shell reads commands from standard
input.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running a data node

```
chunkfs-datanode [RPC_PORT] [TCP_PORT]
```

`RPC_PORT` defaults to `3000` and `TCP_PORT` defaults to `3001`. A port
outside 0–65535 or one that is not a number is an error. The node only logs
`RPC_PORT`. It serves the chunk stream protocol on `127.0.0.1:TCP_PORT`, and
it keeps chunks in `./temp`. That directory must already exist.

### The chunk stream protocol

A connection to the TCP port carries these parts, in order:

1. 16 bytes of chunk id. The node names the chunk file with the lowercase hex
   form of these bytes (`chunkfs.tcp_service.bytes_to_uuid`).
2. One mode byte (`chunkfs.tcp_service.Mode`):
   - `1` (`Mode.WRITE`): everything after this byte, up to the end of the
     stream, is stored as a new chunk. If a chunk with that id already
     exists, the request fails.
   - `2` (`Mode.READ`): the node sends back the contents of the stored chunk.

For any other mode value, and for any failure, the node logs the error and
closes the connection. The node also closes the connection after each
request.

## Running the client

```
chunkfs-client NAMENODE_ADDRESS
```

The client reads standard input one line at a time. It prints
`Success : <message>` or `Error : <message>` for each line:

```
store source_file_location target_remote_file_name
fetch remote_file_location target_file_path
delete target_remote_file_name
help
```

`help` prints the usage lines above. A command with too few arguments and an
unknown command are reported as errors.

## Library use

```python
import asyncio
import io
import os

from chunkfs.storage import FileStorage


async def demo():
    os.makedirs("./temp", exist_ok=True)
    store = FileStorage("./temp")
    written = await store.write("example.bin", io.BytesIO(b"hello world"))
    print(written)                          # 11
    print(await store.available_chunks())   # ['example.bin']
    with await store.read("example.bin") as chunk:
        print(chunk.read())                 # b'hello world'
    await store.delete("example.bin")


asyncio.run(demo())
```

`FileStorage.write` accepts anything with a `read(size)` method, either
synchronous or a coroutine such as `asyncio.StreamReader.read`.
`available_chunks` returns the ids in sorted order.

The modules:

- `chunkfs.storage`: the abstract `Storage` interface and `FileStorage`,
  which keeps one file per chunk under a root directory.
- `chunkfs.tcp_service`: `TCPService`, which serves the chunk stream protocol
  and supports `start`, `serve_forever`, `close` and `async with`. `port=0`
  picks a free port. The module also holds `Mode` and `bytes_to_uuid`.
- `chunkfs.services`: the request and response dataclasses (`EchoRequest`,
  `EchoResponse`, `StoreChunkRequest`, `StoreChunkResponse`,
  `CreatePipelineResponse`) and the handlers `ClientHandler` (`echo`,
  `store_chunk`) and `PeerHandler` (`create_pipeline`).
- `chunkfs.chunk_handler`: `ChunkHandler`. It takes a factory that returns a
  data node client for an address. `store_chunk` asks the first node of the
  replica set for a `host:port` address, connects to that address, and sends
  the UTF-8 chunk id, the write mode byte and the data. An empty replica set
  raises `ValueError`.
- `chunkfs.command_runner`: `CommandRunner.handle_input` and `CommandError`.
- `chunkfs.client`: `run_loop` and the `main` behind `chunkfs-client`.
- `chunkfs.datanode`: `parse_ports` and the `main` behind `chunkfs-datanode`.

## What the package does not do

- There is no name node. The client stores the address it is given and never
  connects to it.
- The client shell moves no data. `store` checks that the local file exists
  and is not a directory, prints its size and reports success. `fetch` and
  `delete` only report success.
- The data node runs no RPC server. `ClientHandler` and `PeerHandler` are
  plain async classes. Their `store_chunk` and `create_pipeline` return the
  fixed addresses `"saved"` and `"welcome"`. No replication pipeline is set
  up.
- `FileStorage.available_storage` always returns `10`.