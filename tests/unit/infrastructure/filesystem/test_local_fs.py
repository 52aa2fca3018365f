from pathlib import Path

import pytest

from airdrop_checker.domain.interfaces.filesystem import InputReadError, OutputWriteError
from airdrop_checker.domain.models.airdrop import ErrorKind
from airdrop_checker.infrastructure.filesystem.local_fs import LocalFileSystem


@pytest.fixture
def fs():
    return LocalFileSystem()


@pytest.mark.asyncio
async def test_read_lines_strips_and_ignores_trailing_newline(fs, tmp_path: Path):
    path = tmp_path / "wallets.txt"
    path.write_bytes(b"0xabc\r\n  0xdef  \n\n0x123\n")

    lines = await fs.read_lines(str(path))

    assert lines == ["0xabc", "0xdef", "", "0x123"]


@pytest.mark.asyncio
async def test_read_lines_of_empty_file(fs, tmp_path: Path):
    path = tmp_path / "wallets.txt"
    path.write_text("")
    assert await fs.read_lines(str(path)) == []


@pytest.mark.asyncio
async def test_missing_input_raises_input_read_error(fs, tmp_path: Path):
    with pytest.raises(InputReadError) as exc_info:
        await fs.read_lines(str(tmp_path / "missing.txt"))
    assert exc_info.value.kind is ErrorKind.INPUT_READ


@pytest.mark.asyncio
async def test_write_overwrites_and_keeps_newlines(fs, tmp_path: Path):
    path = tmp_path / "out" / "result.csv"
    await fs.write_file(str(path), "old content that is longer\n")
    await fs.write_file(str(path), '"a","b"\n')

    assert path.read_bytes() == b'"a","b"\n'


@pytest.mark.asyncio
async def test_write_to_directory_raises_output_write_error(fs, tmp_path: Path):
    with pytest.raises(OutputWriteError):
        await fs.write_file(str(tmp_path), "data")


@pytest.mark.asyncio
async def test_only_lf_and_crlf_separate_lines(fs, tmp_path: Path):
    path = tmp_path / "wallets.txt"
    path.write_bytes("0xabc\x0c0xdef\n0x1 0x2\r\n0x3\r0x4".encode("utf-8"))

    lines = await fs.read_lines(str(path))

    assert lines == ["0xabc\x0c0xdef", "0x1 0x2", "0x3\r0x4"]
