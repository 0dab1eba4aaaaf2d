"""Main sort orchestrator."""

from __future__ import annotations

import os
import time
from typing import BinaryIO

from proximity_sort.io.records import NEWLINE, NUL, read_records, write_records
from proximity_sort.ranking.ranker import ProximityRanker
from proximity_sort.utils.config import ProximitySortConfig
from proximity_sort.utils.logging import get_logger, setup_logging
from proximity_sort.utils.types import PathLike

logger = get_logger("pipeline")


class SortPipeline:
    """Reads records, ranks them against a reference path and writes them back."""

    def __init__(self, config: ProximitySortConfig):
        self.config = config

    @property
    def input_delimiter(self) -> bytes:
        return NUL if self.config.sort.read0 else NEWLINE

    @property
    def output_delimiter(self) -> bytes:
        return NUL if self.config.sort.print0 else NEWLINE

    def run(self, reference: PathLike, stdin: BinaryIO, stdout: BinaryIO) -> int:
        """Run the sort over a whole input stream.

        Args:
            reference: Path to rank against. Strings are encoded with the
                filesystem encoding so they compare against raw input bytes.
            stdin: Binary input stream.
            stdout: Binary output stream.

        Returns:
            Number of records written.
        """
        setup_logging(self.config.logging)
        start_time = time.time()

        reference = os.fsencode(reference)
        records = read_records(stdin, self.input_delimiter)
        logger.debug("Read %d records", len(records))

        ranker = ProximityRanker(reference)
        ranker.add_many(records)
        written = write_records(stdout, ranker.drain(), self.output_delimiter)

        elapsed = time.time() - start_time
        logger.info("Sorted %d paths against %r in %.3fs", written, reference, elapsed)
        return written
