"""A line-oriented text buffer with a cursor and a clipboard."""


class LineEditor:
    """Lines of text, a current line and a copy buffer."""

    def __init__(self, lines=()):
        self._lines = []
        self._cursor = -1
        self._buffer = ""
        for text in lines:
            self.insert(text)

    def __len__(self):
        return len(self._lines)

    def __iter__(self):
        return iter(self._lines)

    @property
    def lines(self):
        """A copy of the current lines."""
        return list(self._lines)

    @property
    def cursor(self):
        """Zero-based index of the current line, or -1 when empty."""
        return self._cursor

    @property
    def buffer(self):
        """The text held by the copy buffer."""
        return self._buffer

    def _require_line(self):
        if self._cursor == -1:
            raise IndexError("there is no current line")

    def insert(self, text, append=False):
        """Append to the current line, or insert a new line after it."""
        if append and self._cursor != -1:
            self._lines[self._cursor] += text
        else:
            self._cursor += 1
            self._lines.insert(self._cursor, text)

    def delete_line(self):
        """Delete the current line; the cursor moves to the line above."""
        if self._cursor == -1:
            return
        del self._lines[self._cursor]
        self._cursor -= 1
        if self._cursor == -1 and self._lines:
            self._cursor = 0

    def cut_line(self):
        """Copy the current line to the buffer and delete it."""
        self._require_line()
        self._buffer = self._lines[self._cursor]
        self.delete_line()

    def yank(self):
        """Copy the current line to the buffer."""
        self._require_line()
        self._buffer = self._lines[self._cursor]

    def paste(self):
        """Append the buffer to the end of the current line."""
        self._require_line()
        self._lines[self._cursor] += self._buffer

    def goto(self, line):
        """Make the 1-based ``line`` the current line."""
        if not 1 <= line <= len(self._lines):
            raise IndexError(f"line {line} out of range")
        self._cursor = line - 1