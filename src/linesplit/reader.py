"""Read the first line of an input stream."""

from typing import IO, Union


def read_first_line(stream: IO[Union[str, bytes]], encoding: str = "utf-8") -> str:
    """
    Read one line from a text or binary stream.

    Args:
        stream: Stream to read from, e.g. sys.stdin or an open file
        encoding: Encoding used when the stream yields bytes

    Returns:
        The first line without its trailing newline. A stream with no newline
        yields all of its content, an empty stream yields "".
    """
    line = stream.readline()
    if isinstance(line, bytes):
        line = line.decode(encoding)

    if line.endswith("\n"):
        line = line[:-1]
    return line
