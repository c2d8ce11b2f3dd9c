from __future__ import annotations

from pathlib import Path

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

from mo_reader.catalog import Catalog

SCHEMA = pa.schema(
    [
        ("msgid", pa.string()),
        ("msgstr", pa.string()),
    ]
)


def catalog_frame(catalog: Catalog) -> pd.DataFrame:
    """One row per message, sorted by msgid."""
    rows = [{"msgid": k, "msgstr": v} for k, v in catalog.messages.items()]
    df = pd.DataFrame(rows, columns=["msgid", "msgstr"])
    return df.sort_values("msgid").reset_index(drop=True)


def write_catalog_parquet(catalog: Catalog, out_path: Path) -> Path:
    """Write ``catalog`` to ``out_path`` as Parquet.

    Encoding and revision travel in the schema metadata so the file can be
    traced back to the catalog it came from.
    """
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    df = catalog_frame(catalog)
    table = pa.Table.from_pandas(df, schema=SCHEMA, preserve_index=False)
    metadata = dict(table.schema.metadata or {})
    metadata[b"encoding"] = catalog.encoding.encode("utf-8")
    metadata[b"version"] = str(catalog.version).encode("utf-8")
    table = table.replace_schema_metadata(metadata)
    pq.write_table(table, out_path)
    return out_path
