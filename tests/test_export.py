import pyarrow.parquet as pq

from mo_export import SCHEMA, catalog_frame, write_catalog_parquet
from mo_reader import Catalog

CATALOG = Catalog(
    "latin-1",
    (0, 1),
    {"Hello World": "Olá Mundo", "Goodbye World": "Adeus Mundo"},
)


def test_catalog_frame_sorted():
    df = catalog_frame(CATALOG)
    assert list(df.columns) == ["msgid", "msgstr"]
    assert df["msgid"].tolist() == ["Goodbye World", "Hello World"]
    assert df["msgstr"].tolist() == ["Adeus Mundo", "Olá Mundo"]
    assert df.index.tolist() == [0, 1]


def test_write_catalog_parquet(tmp_path):
    out = write_catalog_parquet(CATALOG, tmp_path / "export" / "pt-PT.parquet")
    assert out.exists()

    table = pq.read_table(out)
    assert table.schema.field("msgid").type == SCHEMA.field("msgid").type
    assert table.column("msgid").to_pylist() == ["Goodbye World", "Hello World"]
    assert table.schema.metadata[b"encoding"] == b"latin-1"
    assert table.schema.metadata[b"version"] == b"0.1"


def test_write_empty_catalog(tmp_path):
    out = write_catalog_parquet(Catalog("utf-8", (0, 0)), tmp_path / "empty.parquet")
    table = pq.read_table(out)
    assert table.num_rows == 0
    assert table.column_names == ["msgid", "msgstr"]
