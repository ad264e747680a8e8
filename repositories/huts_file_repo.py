"""
Huts File Repository

Encapsulates access to the huts data file: reading its lines and turning
data rows into HutRecord domain models.

Design Principles:
1. Read failures degrade to "no data" - an unreadable file is logged and
   yields an empty line list, never an exception
2. Data errors propagate - a malformed row raises ParseError to the caller
3. No registry logic - building the Region is left to the facade
"""

from pathlib import Path
from typing import Iterable, Iterator, Optional
import logging

from domain import HutRecord
from logging_config import setup_logging

logger = setup_logging(__name__)

FIELD_SEPARATOR = ";"


class HutsFileRepository:
    """
    Repository for ';'-separated huts data files.

    The first line of a file is a header and is skipped. Remaining lines
    hold the fields Province, Municipality, MunicipalityAltitude, Name,
    Altitude, Category, BedsNumber; Altitude may be empty.
    """

    def __init__(self, encoding: str = "utf-8", logger_instance: Optional[logging.Logger] = None):
        """
        Initialize the repository.

        Args:
            encoding: Text encoding of the data files
            logger_instance: Optional logger (defaults to module logger)
        """
        self.encoding = encoding
        self._logger = logger_instance or logger

    def read_data(self, path: str | Path) -> list[str]:
        """
        Read the lines of a text file.

        Args:
            path: Path of the file

        Returns:
            One element per line, without line terminators. An empty list
            if the file cannot be read.
        """
        try:
            with open(path, "r", encoding=self.encoding) as f:
                lines = f.read().splitlines()
        except OSError as e:
            self._logger.error(f"Cannot read huts data file '{path}': {e}")
            return []
        self._logger.debug(f"Read {len(lines)} lines from {path}")
        return lines

    @staticmethod
    def split_line(line: str) -> list[str]:
        """Split a data line into fields, keeping empty trailing fields."""
        return line.split(FIELD_SEPARATOR)

    def parse_records(self, lines: Iterable[str]) -> Iterator[HutRecord]:
        """
        Yield a HutRecord for every data line, skipping the header.

        Blank lines are ignored. Line numbers in errors are 1-based and
        count the header.

        Raises:
            ParseError: If a data line is malformed
        """
        for line_number, line in enumerate(lines, start=1):
            if line_number == 1 or not line.strip():
                continue
            yield HutRecord.from_fields(self.split_line(line), line_number)

    def load_records(self, path: str | Path) -> list[HutRecord]:
        """Read a data file and return its parsed rows."""
        return list(self.parse_records(self.read_data(path)))


def get_huts_file_repository() -> HutsFileRepository:
    """Factory function returning a repository with default settings."""
    return HutsFileRepository()
