"""
Line-by-line reading of the system's text databases (e.g. the hosts file).

The files can come with different line-ending conventions regardless of
the platform where they are read: e.g. edited on Windows and mounted into
a Linux container, or vice versa. Python's universal newlines are not used,
since they treat every bare ``\\r`` as a line break, which is not what libc
does on POSIX systems: there, a bare ``\\r`` is a regular character.

The file is consumed incrementally, one physical line at a time.
"""
import enum
import os
from typing import BinaryIO, Iterator


class LineEndings(enum.Enum):
    """ The conventions of line endings, as selectable by the platform or by users. """

    POSIX = 'posix'
    """ Lines end with ``\\n`` or ``\\r\\n``; a bare ``\\r`` is a part of the line. """

    WINDOWS = 'windows'
    """ Same, but a bare ``\\r`` at the end of the file also ends the last line. """

    @classmethod
    def native(cls) -> "LineEndings":
        return cls.WINDOWS if os.name == 'nt' else cls.POSIX


class LineReader(Iterator[str]):
    """
    An iterator over the lines of a binary stream, without the line endings.

    The last line is yielded even if it is not terminated by a newline.
    If the stream ends right after a newline, there is no extra empty line.
    The iteration stops when the stream is exhausted; all other errors
    of the stream (``OSError``) are escalated to the consumer as is.

    Non-UTF-8 bytes are preserved as surrogates (``errors='surrogateescape'``),
    so that they can be checked or encoded back without losses.
    """

    def __init__(
            self,
            stream: BinaryIO,
            *,
            newlines: LineEndings = LineEndings.POSIX,
            encoding: str = 'utf-8',
    ) -> None:
        super().__init__()
        self._stream = stream
        self._newlines = newlines
        self._encoding = encoding

    def __iter__(self) -> "LineReader":
        return self

    def __next__(self) -> str:
        raw = self._stream.readline()
        if not raw:
            raise StopIteration
        line = raw.decode(self._encoding, errors='surrogateescape')
        return self._chomp(line)

    def _chomp(self, line: str) -> str:
        terminated = line.endswith('\n')
        if terminated:
            line = line[:-1]
        if line.endswith('\r') and (terminated or self._newlines is LineEndings.WINDOWS):
            line = line[:-1]
        return line
