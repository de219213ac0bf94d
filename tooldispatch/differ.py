#!/usr/bin/env python3
"""
Line-level diffing of text content.

Provides the diff rendering used by the generate_diff tool: every input line
appears once in the output, prefixed by a marker for added, removed or
unchanged.
"""

from difflib import SequenceMatcher
from typing import List, Tuple

ADDED = "+"
REMOVED = "-"
UNCHANGED = " "


class LineDiffer:
    """Computes and renders line diffs between two texts."""

    @staticmethod
    def split_lines(content: str) -> List[str]:
        """Split on "\\n" only, keeping each line's terminator."""
        lines = [line + "\n" for line in content.split("\n")]
        lines[-1] = lines[-1][:-1]
        if not lines[-1]:
            lines.pop()
        return lines

    @classmethod
    def diff_lines(cls, old_content: str, new_content: str) -> List[Tuple[str, str]]:
        """
        Compute a line diff.

        Lines are compared with their terminators, so a missing final newline
        shows up as a changed last line. Replaced blocks are reported as their
        removed lines followed by their added lines.

        Args:
            old_content: Text of the old version
            new_content: Text of the new version

        Returns:
            List of (marker, line) pairs in output order, terminators stripped
        """
        old_lines = cls.split_lines(old_content)
        new_lines = cls.split_lines(new_content)
        matcher = SequenceMatcher(None, old_lines, new_lines, autojunk=False)

        changes = []
        for tag, i1, i2, j1, j2 in matcher.get_opcodes():
            if tag == "equal":
                changes.extend((UNCHANGED, line) for line in old_lines[i1:i2])
                continue
            if tag in ("delete", "replace"):
                changes.extend((REMOVED, line) for line in old_lines[i1:i2])
            if tag in ("insert", "replace"):
                changes.extend((ADDED, line) for line in new_lines[j1:j2])
        return [(marker, line.rstrip("\n")) for marker, line in changes]

    @classmethod
    def render(cls, old_content: str, new_content: str) -> str:
        """Render the diff as text, one ``"<marker> <line>"`` per line."""
        lines = [f"{marker} {line}" for marker, line in cls.diff_lines(old_content, new_content)]
        if not lines:
            return ""
        return "\n".join(lines) + "\n"
