"""Parquet persistence helper for the growth-log stream."""

from __future__ import annotations

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from maze_walkers.io.schemas import GROWTH_LOG_SCHEMA


def new_growth_columns() -> dict[str, list[int | str]]:
    return {f.name: [] for f in GROWTH_LOG_SCHEMA}


def flush_growth_columns(
    growth_columns: dict[str, list[int | str]],
    growth_log_path: Path,
    writer: pq.ParquetWriter | None,
) -> pq.ParquetWriter | None:
    """Write accumulated growth rows to Parquet and clear in-memory buffers."""
    if not growth_columns["tick"]:
        return writer
    table = pa.Table.from_pydict(growth_columns, schema=GROWTH_LOG_SCHEMA)
    if writer is None:
        writer = pq.ParquetWriter(growth_log_path, GROWTH_LOG_SCHEMA)
    writer.write_table(table)
    for values in growth_columns.values():
        values.clear()
    return writer
