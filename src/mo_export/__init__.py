"""mo export - Tabular views of decoded catalogs."""
from .parquet import SCHEMA, catalog_frame, write_catalog_parquet

__all__ = ["SCHEMA", "catalog_frame", "write_catalog_parquet"]
