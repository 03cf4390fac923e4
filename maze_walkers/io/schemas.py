"""Parquet schema definitions for generation artifacts.

Only per-tick growth diagnostics are persisted; carved layouts themselves are
never written out.
"""

from __future__ import annotations

import pyarrow as pa

GROWTH_LOG_SCHEMA_VERSION = 1

GROWTH_LOG_SCHEMA = pa.schema(
    [
        ("tick", pa.int64()),
        ("walker_index", pa.int64()),
        ("kind", pa.string()),
        ("x", pa.int64()),
        ("y", pa.int64()),
        ("trail_size", pa.int64()),
        ("occupied_cells", pa.int64()),
    ]
)

# Keys of the layout-metric block in generation_summary.json.
LAYOUT_METRIC_NAMES = [
    "occupied_cells",
    "component_count",
    "dead_end_count",
    "fill_ratio",
    "bbox_width",
    "bbox_height",
]
