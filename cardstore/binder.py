"""Named-parameter statement binding.

SQL templates are written with ``:name`` placeholders so they stay readable
and independent of argument order. The binder compiles a template with
SQLAlchemy's ``text()`` construct against the active dialect, which renders
the driver's own placeholder style (and doubles literal ``%`` for
``format``/``pyformat`` drivers). The resulting statement and arguments are
ready for ``Connection.exec_driver_sql``: a tuple in placeholder order for
positional paramstyles, a mapping for named ones.

``::`` casts are not placeholders; a literal colon before a word is written
as ``\\:``.
"""

from collections.abc import Mapping
from functools import lru_cache
from typing import Any

from sqlalchemy import text
from sqlalchemy.engine import Dialect as SQLDialect
from sqlalchemy.sql.compiler import SQLCompiler

from cardstore.exceptions import BindError


@lru_cache(maxsize=256)
def compile_template(template: str, dialect: SQLDialect) -> SQLCompiler:
    """Compile ``template`` for ``dialect``."""
    return text(template).compile(dialect=dialect)


class StatementBinder:
    """Binds named-parameter templates for one SQLAlchemy dialect."""

    def __init__(self, dialect: SQLDialect) -> None:
        self._dialect = dialect

    @property
    def paramstyle(self) -> str:
        return self._dialect.paramstyle

    def bind(
        self, template: str, params: Mapping[str, Any]
    ) -> tuple[str, tuple[Any, ...] | dict[str, Any]]:
        """Return ``(sql, args)`` for ``template`` bound against ``params``.

        Raises:
            BindError: If the template names a parameter missing from ``params``.
        """
        compiled = compile_template(template, self._dialect)
        for name in compiled.binds:
            if name not in params:
                raise BindError(template, name)

        values = compiled.construct_params(params)
        if compiled.positional:
            return compiled.string, tuple(values[name] for name in compiled.positiontup)
        return compiled.string, values
