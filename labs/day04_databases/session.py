"""
A database session against an embedded DuckDB engine.

Connect, copy tables in, query them lazily or with literal SQL, disconnect.
With database=":memory:" everything lives in process memory and is gone
after disconnect().
"""

from collections.abc import Sequence

import ibis
import polars as pl

from labs.common.logging_config import get_logger
from labs.common.sample_data import load_sample_table

from .config import SAMPLE_INDEXES, IndexColumns
from .lazy import LazyQuery

logger = get_logger(__name__)


def _as_columns(index: str | IndexColumns) -> IndexColumns:
    return (index,) if isinstance(index, str) else tuple(index)


def _quote(identifier: str) -> str:
    return '"' + identifier.replace('"', '""') + '"'


class DatabaseSession:
    """
    One connection to an embedded DuckDB database.

    Usage:
        with DatabaseSession() as session:
            session.copy_sample_tables()
            flights = session.table("flights")
            flights.filter(_.dep_delay > 240).show_query()
    """

    def __init__(self, database: str = ":memory:"):
        self.database = database
        self._con = None
        self.logger = logger.bind(database=database)

    @property
    def is_connected(self) -> bool:
        return self._con is not None

    @property
    def con(self):
        """The open Ibis DuckDB backend"""
        if self._con is None:
            raise RuntimeError("Session is not connected; call connect() first")
        return self._con

    def connect(self) -> "DatabaseSession":
        if self._con is None:
            self._con = ibis.duckdb.connect(database=self.database)
            self.logger.info("session_opened")
        return self

    def disconnect(self) -> None:
        if self._con is not None:
            self._con.disconnect()
            self._con = None
            self.logger.info("session_closed")

    def __enter__(self) -> "DatabaseSession":
        return self.connect()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.disconnect()

    # -- loading ---------------------------------------------------------

    def copy_to(
        self,
        name: str,
        df: pl.DataFrame,
        indexes: Sequence[str | IndexColumns] = (),
        unique_indexes: Sequence[str | IndexColumns] = (),
        overwrite: bool = False,
    ) -> LazyQuery:
        """
        Bulk-copy a DataFrame into a new table, then index it.

        If an index cannot be built (e.g. a unique index over duplicate
        keys) the new table is dropped again and the error re-raised.

        Args:
            name: Table name
            df: Rows to copy
            indexes: Columns (or column tuples) to index
            unique_indexes: Columns (or column tuples) to index as unique
            overwrite: Replace an existing table of the same name

        Returns:
            LazyQuery over the new table
        """
        con = self.con
        if not overwrite and name in con.list_tables():
            raise ValueError(f"Table already exists: {name}. Pass overwrite=True to replace it")

        specs = [(_as_columns(i), False) for i in indexes]
        specs += [(_as_columns(i), True) for i in unique_indexes]
        for columns, _unique in specs:
            missing = [c for c in columns if c not in df.columns]
            if missing:
                raise ValueError(f"Index columns not in '{name}': {missing}")

        if overwrite and name in con.list_tables():
            con.drop_table(name)
        con.create_table(name, df)
        try:
            for columns, unique in specs:
                self._create_index(name, columns, unique)
        except Exception:
            con.drop_table(name)
            self.logger.error("index_failed", table=name)
            raise

        self.logger.info("table_copied", table=name, rows=df.height, indexes=len(specs))
        return self.table(name)

    def _create_index(self, table: str, columns: IndexColumns, unique: bool) -> str:
        index_name = "_".join([table, *columns])
        kind = "UNIQUE INDEX" if unique else "INDEX"
        column_list = ", ".join(_quote(c) for c in columns)
        self.con.raw_sql(
            f"CREATE {kind} IF NOT EXISTS {_quote(index_name)} ON {_quote(table)} ({column_list})"
        )
        self.logger.debug("index_created", table=table, index=index_name, unique=unique)
        return index_name

    def copy_sample_tables(
        self, tables: Sequence[str] | None = None, create_indexes: bool = True
    ) -> list[str]:
        """
        Copy the nycflights13 tables in, with the fixed index list.

        Args:
            tables: Subset of sample table names (all by default)
            create_indexes: Skip index creation when False

        Returns:
            Names of the copied tables
        """
        names = list(tables) if tables is not None else list(SAMPLE_INDEXES)
        unknown = [n for n in names if n not in SAMPLE_INDEXES]
        if unknown:
            available = ", ".join(SAMPLE_INDEXES)
            raise ValueError(f"Unknown sample tables: {unknown}. Available: {available}")

        for name in names:
            spec = SAMPLE_INDEXES[name]
            self.copy_to(
                name,
                load_sample_table(name),
                indexes=spec.indexes if create_indexes else (),
                unique_indexes=spec.unique_indexes if create_indexes else (),
                overwrite=True,
            )
        return names

    # -- querying --------------------------------------------------------

    def list_tables(self) -> list[str]:
        return sorted(self.con.list_tables())

    def list_indexes(self, table: str | None = None) -> list[str]:
        """Index names from the engine catalogue, optionally for one table."""
        rows = self.con.raw_sql(
            "SELECT table_name, index_name FROM duckdb_indexes() ORDER BY table_name, index_name"
        ).fetchall()
        return [index for table_name, index in rows if table is None or table_name == table]

    def table(self, name: str) -> LazyQuery:
        """A lazy reference to a table; nothing is read yet."""
        if name not in self.con.list_tables():
            available = ", ".join(self.list_tables())
            raise ValueError(f"Unknown table: {name}. Available: {available}")
        return LazyQuery(self.con.table(name), self, source=name)

    def run_sql(self, sql: str) -> pl.DataFrame:
        """Run a literal SQL query and return the rows."""
        df = self.con.sql(sql).to_polars()
        self.logger.info("sql_executed", sql=sql, rows=df.height)
        return df
