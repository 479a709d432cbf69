"""A text-mode screen with a tiny printf."""

from __future__ import annotations

from typing import Iterator, Union

from .textfmt import itoa, utoa_hex

VGA_WIDTH = 80
VGA_HEIGHT = 25


class Screen:
    """A character grid written through a single advancing cursor.

    Writing past the last cell wraps the cursor back to the top-left cell.
    A newline on the last row leaves the cursor off-screen; the next
    character there is dropped and the cursor wraps.
    """

    def __init__(self, width: int = VGA_WIDTH, height: int = VGA_HEIGHT) -> None:
        if width < 1 or height < 1:
            raise ValueError("screen dimensions must be positive")
        self.width = width
        self.height = height
        self.cursor = 0
        self._cells = [" "] * (width * height)

    def clear(self) -> None:
        """Blank every cell and home the cursor."""
        self._cells = [" "] * (self.width * self.height)
        self.cursor = 0

    def putchar(self, c: Union[str, int]) -> None:
        """Write one character (or byte value) at the cursor."""
        if isinstance(c, int):
            c = chr(c & 0xFF)
        elif len(c) != 1:
            raise ValueError("putchar takes a single character")
        if c == "\n":
            self.cursor = (self.cursor // self.width + 1) * self.width
            return
        if self.cursor < len(self._cells):
            self._cells[self.cursor] = c
        self.cursor += 1
        if self.cursor >= len(self._cells):
            self.cursor = 0

    def puts(self, s: str) -> None:
        """Write a string, stopping at the first NUL character."""
        for c in s.partition("\0")[0]:
            self.putchar(c)

    def printf(self, fmt: str, *args: object) -> None:
        """Write formatted text.

        Supports ``%s``, ``%d``, ``%c`` and ``%x``, with ``02`` as the only
        width. Any other specifier is written literally and consumes no
        argument.
        """
        values = iter(args)
        i = 0
        end = len(fmt)
        while i < end:
            ch = fmt[i]
            i += 1
            if ch != "%":
                self.putchar(ch)
                continue
            zero_pad = 0
            if fmt.startswith("02", i):
                zero_pad = 2
                i += 2
            if i >= end:
                self.putchar("%")
                break
            spec = fmt[i]
            i += 1
            if spec == "s":
                self.puts(str(self._next_arg(values)))
            elif spec == "d":
                self.puts(itoa(int(self._next_arg(values))))
            elif spec == "c":
                self.putchar(self._next_arg(values))
            elif spec == "x":
                self.puts(utoa_hex(int(self._next_arg(values)), zero_pad))
            else:
                self.putchar("%")
                self.putchar(spec)

    @staticmethod
    def _next_arg(values: Iterator[object]):
        try:
            return next(values)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    def text(self) -> str:
        """Return the screen as rows joined by newlines, trailing blanks removed."""
        rows = (
            "".join(self._cells[row * self.width:(row + 1) * self.width]).rstrip(" ")
            for row in range(self.height)
        )
        return "\n".join(rows)