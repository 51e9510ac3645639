# aitp/result_sink.py
import csv
import logging
import os
from pathlib import Path
from typing import Sequence

from .config import HEADER_LABEL, OUTPUT_DATA_DIR, RESULT_FILE_PREFIX
from .params import ConfigurationError

logger = logging.getLogger(__name__)


def sweep_header(n_sta_values: Sequence[int]):
    """Column labels for a result table: nSta=50, nSta=100, ..."""
    return [f"{HEADER_LABEL}={n}" for n in n_sta_values]


class CsvResultSink:
    """
    Append-only CSV tables, one file per table id.

    The first write of a table id in this instance writes the header. With
    accumulate=False that first write also truncates any file left by an
    earlier run; with accumulate=True it appends, and the header is written
    only when the file is missing or empty.
    """

    def __init__(self, output_dir=OUTPUT_DATA_DIR, prefix=RESULT_FILE_PREFIX, accumulate=False):
        self.output_dir = Path(output_dir)
        self.prefix = prefix
        self.accumulate = accumulate
        self._initialized = set()

    def path_for(self, table_id: str) -> Path:
        return self.output_dir / f"{self.prefix}_{table_id}.csv"

    def has_table(self, table_id: str) -> bool:
        return table_id in self._initialized

    def write(self, table_id, header_columns, row_values):
        filepath = self.path_for(table_id)
        first = table_id not in self._initialized
        if first and not self.accumulate:
            mode, write_header = "w", True
        elif first:
            mode = "a"
            write_header = not filepath.exists() or filepath.stat().st_size == 0
            if not write_header:
                self._check_header(filepath, header_columns)
        else:
            mode, write_header = "a", False

        try:
            with open(filepath, mode, newline="", encoding="utf-8") as f:
                writer = csv.writer(f)
                if write_header:
                    writer.writerow(header_columns)
                writer.writerow([float(v) for v in row_values])
        except OSError as exc:
            raise ConfigurationError(
                f"cannot write results to '{filepath}': {exc.strerror or exc}"
            ) from exc

        self._initialized.add(table_id)
        logger.debug("Saved results to '%s'", filepath)
        return filepath

    def _check_header(self, filepath, header_columns):
        """Rows appended to an existing table must line up with its columns."""
        try:
            with open(filepath, newline="", encoding="utf-8") as f:
                existing = next(csv.reader(f), [])
        except OSError as exc:
            raise ConfigurationError(
                f"cannot read results header from '{filepath}': {exc.strerror or exc}"
            ) from exc
        while existing and existing[-1] == "":
            existing.pop()
        if existing != list(header_columns):
            raise ConfigurationError(
                f"'{filepath}' has columns {','.join(existing)}; "
                f"this run writes {','.join(header_columns)}"
            )

    def ensure_output_dir(self):
        try:
            os.makedirs(self.output_dir, exist_ok=True)
        except OSError as exc:
            raise ConfigurationError(
                f"cannot create output directory '{self.output_dir}': {exc.strerror or exc}"
            ) from exc
