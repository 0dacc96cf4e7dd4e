"""Protocol for splitting a delimited text line into fields."""

from typing import Protocol


class RowSplitter(Protocol):
    """Strategy that turns one line of delimited text into raw column values."""

    def split(self, line: str) -> list[str]:
        """Split a line into its column values.

        Args:
            line: A single line of the corpus, without the trailing newline.

        Returns:
            Column values in positional order. Quote characters may still be present.
        """
        ...
