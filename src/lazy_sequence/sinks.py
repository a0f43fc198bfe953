"""Streaming sinks that turn sequence values into pandas and Arrow data."""

import logging
import time
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

from .models import WriteStatistics
from .protocols import LoggerProtocol


class SequenceBatcher:
    """
    Groups sequence values into fixed-size batches.

    Single Responsibility: Group values into batches.
    """

    def __init__(self, batch_size: int = 1000):
        """
        Initialize batcher.

        Args:
            batch_size: Number of values per batch
        """
        if batch_size <= 0:
            raise ValueError("batch_size must be positive")
        self.batch_size = batch_size

    def batch(self, values: Iterable[Any]) -> Iterator[List[Any]]:
        """
        Batch values into lists.

        Args:
            values: A Sequence, or any iterable

        Yields:
            Lists of at most batch_size values
        """
        batch: List[Any] = []
        for value in values:
            batch.append(value)
            if len(batch) >= self.batch_size:
                yield batch
                batch = []

        if batch:
            yield batch


class DataFrameTransformer:
    """
    Transforms value batches into pandas DataFrames.

    Dict values become one column per key; anything else lands in a single
    column named ``column``.
    """

    def __init__(self, column: str = "value", logger: Optional[LoggerProtocol] = None):
        self.column = column
        self._logger = logger or logging.getLogger(__name__)

    def _rows(self, batch: List[Any]) -> List[Dict[str, Any]]:
        return [v if isinstance(v, dict) else {self.column: v} for v in batch]

    def transform(self, batches: Iterable[List[Any]]) -> Iterator[pd.DataFrame]:
        """
        Transform batches to DataFrames.

        Args:
            batches: Iterable of value batches

        Yields:
            One DataFrame per batch, with a batch_number column

        Raises:
            ValueError: If a value already has a batch_number key
        """
        for batch_num, batch in enumerate(batches, 1):
            df = pd.DataFrame(self._rows(batch))
            if "batch_number" in df.columns:
                raise ValueError("batch_number is a reserved column name")
            df["batch_number"] = batch_num

            self._logger.debug(f"Created DataFrame batch {batch_num} with {len(df)} records")
            yield df


class ParquetSequenceWriter:
    """
    Writes DataFrame blocks to one Parquet file.

    Uses context manager pattern for resource management.
    """

    def __init__(
        self,
        output_path: Path,
        compression: str = "snappy",
        logger: Optional[LoggerProtocol] = None,
    ):
        """
        Initialize Parquet writer.

        Args:
            output_path: Path to output Parquet file
            compression: Compression codec
            logger: Logger instance
        """
        self.output_path = Path(output_path)
        self.compression = compression
        self._logger = logger or logging.getLogger(__name__)
        self._writer: Optional[pq.ParquetWriter] = None
        self._total_rows = 0
        self._written = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def write(self, dataframes: Iterable[pd.DataFrame]) -> WriteStatistics:
        """
        Write dataframes to the Parquet file.

        Args:
            dataframes: Iterable of DataFrames sharing one schema

        Returns:
            WriteStatistics with operation details

        Raises:
            RuntimeError: If write() was already called on this writer
            ValueError: If a block's schema differs from the first block's
        """
        if self._written:
            raise RuntimeError("Writer already used. Create a new writer for each file.")
        self._written = True

        start_time = time.time()
        batch_count = 0

        for df in dataframes:
            if df.empty:
                self._logger.warning("Received empty DataFrame block, skipping...")
                continue

            table = pa.Table.from_pandas(df, preserve_index=False)

            if self._writer is None:
                self.output_path.parent.mkdir(parents=True, exist_ok=True)
                self._writer = pq.ParquetWriter(
                    str(self.output_path),
                    table.schema,
                    compression=self.compression,
                )
            elif not table.schema.equals(self._writer.schema):
                raise ValueError(
                    f"DataFrame schema mismatch. Expected {self._writer.schema}, got {table.schema}"
                )

            self._writer.write_table(table)
            self._total_rows += len(df)
            batch_count += 1
            self._logger.debug(f"Written {len(df)} rows (total: {self._total_rows})")

        # Flush the footer so the reported size is final.
        self.close()
        elapsed_time = time.time() - start_time
        file_size = self.output_path.stat().st_size if self.output_path.exists() else 0

        self._logger.info(
            f"Successfully wrote {self._total_rows} total rows to {self.output_path}"
        )

        return WriteStatistics(
            total_rows=self._total_rows,
            total_batches=batch_count,
            file_size_bytes=file_size,
            elapsed_time=elapsed_time,
        )

    def close(self):
        """Close the Parquet writer."""
        if self._writer:
            self._writer.close()
            self._writer = None


def to_dataframes(
    values: Iterable[Any], batch_size: int = 1000, column: str = "value"
) -> Iterator[pd.DataFrame]:
    """Stream values as DataFrame blocks of at most ``batch_size`` rows."""
    batches = SequenceBatcher(batch_size).batch(values)
    return DataFrameTransformer(column).transform(batches)


def to_arrow_table(values: Iterable[Any], column: str = "value") -> pa.Table:
    """
    Materialize values into a single Arrow table.

    Args:
        values: A Sequence, or any iterable
        column: Column name for non-dict values

    Returns:
        pyarrow Table with one row per value
    """
    rows = [v if isinstance(v, dict) else {column: v} for v in values]
    if not rows:
        return pa.table({column: pa.array([], type=pa.null())})
    return pa.Table.from_pylist(rows)
