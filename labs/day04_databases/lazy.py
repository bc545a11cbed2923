"""
Lazy queries: data-manipulation verbs that build SQL instead of running it.

Each verb wraps an Ibis table expression and returns a new LazyQuery. The
database does no work until collect(), preview() or row_count() is called,
so the row count and the last rows of a query are unknown until then. All of
them go through the owning session and fail with RuntimeError once it is
disconnected.
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

import ibis
import polars as pl
from ibis.expr.types import Table

from labs.common.logging_config import get_logger

if TYPE_CHECKING:
    from .session import DatabaseSession

logger = get_logger(__name__)


class UnmaterializedQueryError(RuntimeError):
    """The operation needs the full result of a query that has not been collected."""


class LazyQuery:
    """
    A deferred query against one database session.

    Verbs (filter, select, mutate, arrange, group_by/summarise, count, head,
    joins) return new LazyQuery objects. group_by only records the keys;
    they are used by the next summarise, count or mutate.
    """

    def __init__(
        self,
        expr: Table,
        session: "DatabaseSession",
        source: str,
        groups: Sequence[str] = (),
    ):
        self._expr = expr
        self._session = session
        self.source = source
        self.groups = tuple(groups)
        self.logger = logger.bind(source=source)

    @property
    def expr(self) -> Table:
        """The underlying Ibis expression"""
        return self._expr

    @property
    def columns(self) -> list[str]:
        return list(self._expr.columns)

    @property
    def ncol(self) -> int:
        return len(self._expr.columns)

    @property
    def nrow(self) -> None:
        """
        Always None: the number of rows is unknown until the query runs.
        Use row_count() to run a COUNT(*), or collect() and check .height.
        """
        return None

    def _derive(self, expr: Table, groups: Sequence[str] = ()) -> "LazyQuery":
        return LazyQuery(expr, self._session, self.source, groups)

    # -- verbs -----------------------------------------------------------

    def filter(self, *predicates: Any) -> "LazyQuery":
        """Keep rows matching every predicate, e.g. filter(_.dep_delay > 240)."""
        return self._derive(self._expr.filter(*predicates), self.groups)

    def select(self, *columns: Any) -> "LazyQuery":
        return self._derive(self._expr.select(*columns), self.groups)

    def mutate(self, **columns: Any) -> "LazyQuery":
        """Add or replace columns; computed per group when grouped."""
        if self.groups:
            expr = self._expr.group_by(list(self.groups)).mutate(**columns)
        else:
            expr = self._expr.mutate(**columns)
        return self._derive(expr, self.groups)

    def arrange(self, *keys: Any) -> "LazyQuery":
        """Sort rows; wrap a key in ibis.desc() for descending order."""
        return self._derive(self._expr.order_by(list(keys)), self.groups)

    def group_by(self, *keys: str) -> "LazyQuery":
        return self._derive(self._expr, keys)

    def ungroup(self) -> "LazyQuery":
        return self._derive(self._expr)

    def summarise(self, **metrics: Any) -> "LazyQuery":
        """One row per group (or one row overall) with the given aggregates."""
        if self.groups:
            expr = self._expr.group_by(list(self.groups)).aggregate(**metrics)
        else:
            expr = self._expr.aggregate(**metrics)
        return self._derive(expr)

    def count(self, *keys: str, name: str = "n", sort: bool = False) -> "LazyQuery":
        """Row count per combination of keys (or per current group)."""
        keys = keys or self.groups
        metric = {name: self._expr.count()}
        if keys:
            expr = self._expr.group_by(list(keys)).aggregate(**metric)
        else:
            expr = self._expr.aggregate(**metric)
        if sort:
            expr = expr.order_by(ibis.desc(name))
        return self._derive(expr)

    def head(self, n: int = 6) -> "LazyQuery":
        """First n rows, as a LIMIT clause."""
        return self._derive(self._expr.limit(n), self.groups)

    def inner_join(self, other: "LazyQuery", on: str | Sequence[str]) -> "LazyQuery":
        return self._join(other, on, "inner")

    def left_join(self, other: "LazyQuery", on: str | Sequence[str]) -> "LazyQuery":
        return self._join(other, on, "left")

    def _join(self, other: "LazyQuery", on: str | Sequence[str], how: str) -> "LazyQuery":
        predicates = [on] if isinstance(on, str) else list(on)
        return self._derive(self._expr.join(other.expr, predicates, how=how))

    # -- inspection ------------------------------------------------------

    def show_query(self) -> str:
        """SQL text the engine would run for this query."""
        sql = str(ibis.to_sql(self._expr))
        self.logger.debug("generated_sql", sql=sql)
        return sql

    def explain(self) -> str:
        """The engine's physical plan for this query."""
        rows = self._session.con.raw_sql(f"EXPLAIN {self.show_query()}").fetchall()
        return "\n".join(row[-1] for row in rows)

    def tail(self, n: int = 6) -> pl.DataFrame:
        """
        Not available: the last rows are only known once the whole result exists.

        Raises:
            UnmaterializedQueryError: always; collect() first, then use DataFrame.tail()
        """
        raise UnmaterializedQueryError(
            f"Cannot take the last {n} rows of a lazy query on '{self.source}'; "
            "call collect() first and use DataFrame.tail()"
        )

    # -- materialization -------------------------------------------------

    def collect(self) -> pl.DataFrame:
        """Run the query and bring the full result into memory."""
        df = self._session.con.to_polars(self._expr)
        self.logger.info("query_collected", rows=df.height, columns=df.width)
        return df

    def preview(self, n: int = 10) -> pl.DataFrame:
        """Run the query for its first n rows only."""
        return self._session.con.to_polars(self._expr.limit(n))

    def row_count(self) -> int:
        """Run SELECT COUNT(*) over this query."""
        return int(self._session.con.execute(self._expr.count()))

    def __repr__(self) -> str:
        return f"# Source: table<{self.source}> [?? x {self.ncol}]"
