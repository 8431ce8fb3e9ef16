"""Line-oriented text buffer with block bookkeeping.

Output is accumulated in memory and written in one piece, so an interrupted
run never leaves a half-written file behind.
"""

from __future__ import annotations

import os
import stat
import tempfile


def _read_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


# os.umask can only be read by setting it, so read it once before any worker threads start.
_UMASK = _read_umask()


class CodeWriter:
    def __init__(self, indent_unit: str = "    "):
        self.indent_unit = indent_unit
        self.indent_level = 0
        self.lines: list[str] = []
        self._pending = ""

    # ---- Output helpers ----

    def write(self, text: str):
        """Append to the current line without ending it."""
        self._pending += text

    def writeln(self, text: str = ""):
        line = self._pending + text
        self._pending = ""
        if line:
            self.lines.append(self.indent_unit * self.indent_level + line)
        else:
            self.lines.append("")

    def blank_line(self):
        self.writeln()

    def write_lines(self, lines):
        for line in lines:
            self.writeln(line)

    def block_open(self):
        self.writeln("{")
        self.indent_level += 1

    def block_close(self):
        if self.indent_level == 0:
            raise RuntimeError("block_close() without matching block_open()")
        self.indent_level -= 1
        self.writeln("}")

    def text(self) -> str:
        lines = self.lines + ([self._pending] if self._pending else [])
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.text()

    # ---- File output ----

    def write_to_file(self, path: str):
        """Replace `path` with the buffer contents in a single rename."""
        if self.indent_level != 0:
            raise RuntimeError(f"{self.indent_level} block(s) left open")
        directory = os.path.dirname(os.path.abspath(path))
        fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".tmp-", suffix=".part")
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
                f.write(self.text())
            os.chmod(tmp_path, _target_mode(path))
            os.replace(tmp_path, path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise


def _target_mode(path: str) -> int:
    """Mode for the replacement file: keep an existing file's, else what open() would give."""
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        return 0o666 & ~_UMASK


def ensure_dir(path: str):
    """Create `path` and its parents if absent."""
    os.makedirs(path, exist_ok=True)
