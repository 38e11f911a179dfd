import os

import pytest

from pushswap.libft.lines import LineReader, get_next_line


@pytest.fixture
def open_file(tmp_path):
    descriptors = []

    def _open(data: bytes, name: str = "input.txt") -> int:
        path = tmp_path / name
        path.write_bytes(data)
        fd = os.open(path, os.O_RDONLY)
        descriptors.append(fd)
        return fd

    yield _open
    for fd in descriptors:
        os.close(fd)


def _all_lines(reader, fd):
    lines = []
    while (line := reader.next_line(fd)) is not None:
        lines.append(line)
    return lines


@pytest.mark.parametrize("buffer_size", [1, 3, 100])
def test_reads_every_line_in_order(open_file, buffer_size):
    fd = open_file(b"one\ntwo\nthree")
    reader = LineReader(buffer_size)
    assert _all_lines(reader, fd) == [b"one\n", b"two\n", b"three"]


@pytest.mark.parametrize("buffer_size", [1, 4, 64])
def test_lines_join_back_to_file(open_file, buffer_size):
    data = b"alpha\n\nbeta gamma\ndelta\n"
    fd = open_file(data)
    lines = _all_lines(LineReader(buffer_size), fd)
    assert b"".join(lines) == data
    assert all(line.endswith(b"\n") for line in lines)


def test_empty_file_gives_none(open_file):
    fd = open_file(b"")
    assert LineReader(8).next_line(fd) is None


def test_end_of_input_stays_none(open_file):
    fd = open_file(b"only\n")
    reader = LineReader(2)
    assert reader.next_line(fd) == b"only\n"
    assert reader.next_line(fd) is None
    assert reader.next_line(fd) is None


def test_descriptors_are_kept_apart(open_file):
    first = open_file(b"a1\na2\n", "first.txt")
    second = open_file(b"b1\nb2\n", "second.txt")
    reader = LineReader(10)
    assert reader.next_line(first) == b"a1\n"
    assert reader.next_line(second) == b"b1\n"
    assert reader.next_line(first) == b"a2\n"
    assert reader.next_line(second) == b"b2\n"


def test_shared_reader(open_file):
    fd = open_file(b"x\ny")
    assert get_next_line(fd) == b"x\n"
    assert get_next_line(fd) == b"y"
    assert get_next_line(fd) is None


def test_bad_descriptor_raises(tmp_path):
    path = tmp_path / "gone.txt"
    path.write_bytes(b"data\n")
    fd = os.open(path, os.O_RDONLY)
    os.close(fd)
    with pytest.raises(OSError):
        LineReader(4).next_line(fd)


def test_buffer_size_must_be_positive():
    with pytest.raises(ValueError):
        LineReader(0)