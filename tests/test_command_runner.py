import pytest

from chunkfs.command_runner import HELP_TEXT, CommandError, CommandRunner


@pytest.fixture
def runner():
    return CommandRunner("http://localhost:5000")


@pytest.mark.asyncio
async def test_help_lists_commands(runner):
    result = await runner.handle_input("help\n")
    assert result == HELP_TEXT
    assert "fetch command" in result
    assert "store command" in result
    assert "delete command" in result


@pytest.mark.asyncio
async def test_help_requires_exact_line(runner):
    with pytest.raises(CommandError, match="Invalid Command"):
        await runner.handle_input("help")


@pytest.mark.asyncio
async def test_fetch_succeeds(runner):
    assert await runner.handle_input("fetch remote.txt local.txt\n") == "File fetched successfully"


@pytest.mark.asyncio
async def test_fetch_needs_two_arguments(runner):
    with pytest.raises(CommandError, match="Invalid fetch command"):
        await runner.handle_input("fetch remote.txt\n")


@pytest.mark.asyncio
async def test_store_existing_file(runner, tmp_path, capsys):
    source = tmp_path / "data.bin"
    source.write_bytes(b"12345")
    result = await runner.handle_input(f"store {source} remote.bin\n")
    assert result == "File stored successfully"
    assert "file size : 5" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_store_directory_is_rejected(runner, tmp_path):
    with pytest.raises(CommandError, match=r"is dir"):
        await runner.handle_input(f"store {tmp_path} remote\n")


@pytest.mark.asyncio
async def test_store_missing_file_is_rejected(runner, tmp_path):
    missing = tmp_path / "absent"
    with pytest.raises(CommandError, match="Errror while reading file metadata"):
        await runner.handle_input(f"store {missing} remote\n")


@pytest.mark.asyncio
async def test_store_needs_two_arguments(runner):
    with pytest.raises(CommandError, match="Invalid store command"):
        await runner.handle_input("store only\n")


@pytest.mark.asyncio
async def test_delete_succeeds(runner):
    assert await runner.handle_input("delete remote.txt\n") == "File deleted successfully"


@pytest.mark.asyncio
async def test_delete_needs_argument(runner):
    with pytest.raises(CommandError, match="Invalid delete command"):
        await runner.handle_input("delete\n")


@pytest.mark.asyncio
@pytest.mark.parametrize("line", ["", "\n", "list\n", "copy a b\n"])
async def test_unknown_commands(runner, line):
    with pytest.raises(CommandError, match="Invalid Command"):
        await runner.handle_input(line)