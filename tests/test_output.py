import os

import pytest

from bytekit.output import putchar_fd, putendl_fd, putnbr_fd, putstr_fd


@pytest.fixture
def pipe():
    read_fd, write_fd = os.pipe()

    def drain():
        os.close(write_fd)
        chunks = []
        while True:
            chunk = os.read(read_fd, 4096)
            if not chunk:
                break
            chunks.append(chunk)
        return b"".join(chunks)

    yield write_fd, drain
    for fd in (read_fd, write_fd):
        try:
            os.close(fd)
        except OSError:
            pass


def test_putchar_fd_writes_character(pipe):
    fd, drain = pipe
    assert putchar_fd("x", fd) == 1
    assert drain() == b"x"


def test_putchar_fd_int_is_one_byte(pipe):
    fd, drain = pipe
    assert putchar_fd(ord("A"), fd) == 1
    assert putchar_fd(0x141, fd) == 1
    assert drain() == b"AA"


def test_putchar_fd_rejects_long_string(pipe):
    fd, _ = pipe
    with pytest.raises(ValueError):
        putchar_fd("ab", fd)


def test_putstr_fd_writes_string(pipe):
    fd, drain = pipe
    text = "hello world"
    assert putstr_fd(text, fd) == len(text)
    assert drain() == text.encode()


def test_putstr_fd_stops_at_nul(pipe):
    fd, drain = pipe
    written = putstr_fd("ab\0cd", fd)
    assert written == 2
    assert drain() == b"ab"


def test_putendl_fd_appends_newline(pipe):
    fd, drain = pipe
    text = "line"
    assert putendl_fd(text, fd) == len(text) + 1
    assert drain() == text.encode() + b"\n"


@pytest.mark.parametrize("n", [0, 7, -7, 42, 2147483647, -2147483648])
def test_putnbr_fd_writes_decimal(pipe, n):
    fd, drain = pipe
    putnbr_fd(n, fd)
    assert int(drain()) == n


def test_putnbr_fd_min_int_text(pipe):
    fd, drain = pipe
    written = putnbr_fd(-2147483648, fd)
    data = drain()
    assert data == b"-2147483648"
    assert written == len(data)


def test_sequence_of_writes_is_ordered(pipe):
    fd, drain = pipe
    total = putstr_fd("n=", fd)
    total += putnbr_fd(-5, fd)
    total += putendl_fd("", fd)
    data = drain()
    assert data == b"n=-5\n"
    assert total == len(data)