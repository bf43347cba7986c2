import re
from collections import namedtuple

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from skillswap.errors import StoreError

# Quoted literals are matched first so a "?" inside them is left alone.
_PLACEHOLDER = re.compile(r"'(?:[^']|'')*'|\?")
_INSERT = re.compile(r"^insert\s+", re.IGNORECASE)
_RETURNING_ID = re.compile(r"\breturning\s+id\b", re.IGNORECASE)

ExecuteResult = namedtuple("ExecuteResult", ["generated_id", "affected_rows"])


def translate_placeholders(statement, params=()):
    """Rewrite ``?`` placeholders into SQLAlchemy named binds.

    Returns the rewritten statement and the bind dictionary, e.g.
    ``"... WHERE id = ?", (5,)`` becomes ``"... WHERE id = :p1", {"p1": 5}``.
    """
    params = tuple(params or ())
    counter = {"n": 0}

    def _bind(match):
        if match.group(0) != "?":
            return match.group(0)
        counter["n"] += 1
        return f":p{counter['n']}"

    translated = _PLACEHOLDER.sub(_bind, statement)
    if counter["n"] != len(params):
        raise StoreError(
            f"Statement expects {counter['n']} parameters but {len(params)} were given."
        )
    binds = {f"p{index}": value for index, value in enumerate(params, start=1)}
    return translated, binds


class SqlGateway:
    """Uniform query/execute surface over a SQLAlchemy session.

    Services receive an instance of this class instead of touching the
    session directly, so tests can hand them a gateway over any session
    (or a stand-in object with the same three methods).
    """

    def __init__(self, session):
        self.session = session

    def _supports_insert_returning(self):
        return bool(getattr(self.session.get_bind().dialect, "insert_returning", False))

    def _run(self, statement, params):
        sql, binds = translate_placeholders(statement, params)
        try:
            return self.session.execute(text(sql), binds)
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StoreError(str(getattr(exc, "orig", None) or exc)) from exc

    def execute(self, statement, params=()):
        sql = statement.strip()
        is_insert = bool(_INSERT.match(sql))
        if is_insert and not _RETURNING_ID.search(sql) and self._supports_insert_returning():
            sql = f"{sql} RETURNING id"

        result = self._run(sql, params)
        if is_insert and _RETURNING_ID.search(sql):
            rows = result.fetchall()
            generated_id = rows[0][0] if rows else None
            return ExecuteResult(generated_id, len(rows))
        if is_insert:
            return ExecuteResult(result.lastrowid, result.rowcount)
        return ExecuteResult(None, result.rowcount)

    def query_one(self, statement, params=()):
        row = self._run(statement, params).mappings().first()
        return dict(row) if row is not None else None

    def query_all(self, statement, params=()):
        return [dict(row) for row in self._run(statement, params).mappings().all()]

    def commit(self):
        try:
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StoreError(str(getattr(exc, "orig", None) or exc)) from exc

    def rollback(self):
        self.session.rollback()
