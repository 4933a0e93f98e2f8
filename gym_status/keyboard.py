"""Single-key input from the terminal.

KeyReader puts the terminal in cbreak mode (no echo, no line buffering) for
the lifetime of a ``with`` block and restores the saved mode on exit, however
the block is left. Iterating it yields one key at a time.

Arrow and function keys arrive as escape sequences (``\\x1b[B``, ``\\x1bOQ``)
and are yielded whole, as a single multi-character key.
"""

import codecs
import os
import select
import sys
import termios
import tty
from typing import Iterator, TextIO

KEY_INTERRUPT = "\x03"
KEY_ESCAPE = "\x1b"
KEY_ENTER = ("\r", "\n")
KEY_BACKSPACE = ("\x7f", "\b")

# How long to wait for the rest of an escape sequence after ESC
ESCAPE_TIMEOUT = 0.05  # seconds


class KeyReader:
    """Scoped single-key reader over a text stream, stdin by default."""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream if stream is not None else sys.stdin
        self._saved_mode: list | None = None
        self._fd: int | None = None
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    def __enter__(self) -> "KeyReader":
        if self.stream.isatty():
            fd = self.stream.fileno()
            self._saved_mode = termios.tcgetattr(fd)
            tty.setcbreak(fd)
            self._fd = fd
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._saved_mode is not None:
            termios.tcsetattr(self.stream.fileno(), termios.TCSADRAIN, self._saved_mode)
            self._saved_mode = None
        self._fd = None

    def _read_char(self) -> str:
        """Read one character, or "" at end of input."""
        if self._fd is None:
            return self.stream.read(1)

        # Unbuffered reads on the terminal, so select() sees every pending byte
        while True:
            byte = os.read(self._fd, 1)
            if not byte:
                return self._decoder.decode(b"", final=True)
            char = self._decoder.decode(byte)
            if char:
                return char

    def _pending(self) -> bool:
        """Whether more input follows without the user pressing another key."""
        if self._fd is None:
            return True
        ready, _, _ = select.select([self._fd], [], [], ESCAPE_TIMEOUT)
        return bool(ready)

    def _read_escape(self) -> str:
        sequence = KEY_ESCAPE
        if not self._pending():
            return sequence

        char = self._read_char()
        sequence += char
        if char == "[":
            # CSI: parameter and intermediate bytes, then one final byte in @..~
            while self._pending():
                char = self._read_char()
                if not char:
                    break
                sequence += char
                if "@" <= char <= "~":
                    break
        elif char == "O" and self._pending():
            # SS3: exactly one more byte (F1-F4, keypad)
            sequence += self._read_char()
        return sequence

    def _read_key(self) -> str:
        key = self._read_char()
        if key == KEY_ESCAPE:
            return self._read_escape()
        return key

    def __iter__(self) -> Iterator[str]:
        while True:
            try:
                key = self._read_key()
            except KeyboardInterrupt:
                yield KEY_INTERRUPT
                return
            if not key:
                # End of input
                return
            yield key
