"""SQL Procedure Store — call building, driver error mapping and transaction handling.

Tests:
    - Named-argument SELECT with quoted identifiers; bad identifiers refused
    - Error number read from number / sqlstate / chained cause
    - 51000 → BusinessRuleError with the procedure's own message
    - Any other driver error → DatabaseError, rolled back
    - fetch_one on an empty result → ProcedureContractError

Design Decisions:
    - AsyncSession replaced by a recording fake: the SQL itself targets PostgreSQL
      procedures that the test database does not have
"""

import pytest
from sqlalchemy.exc import DBAPIError

from app.core.errors import BusinessRuleError, DatabaseError, ProcedureContractError
from app.infrastructure.procedure_store import (
    SqlProcedureStore, build_procedure_call, extract_error_message,
    extract_error_number,
)


class _DriverError(Exception):
    def __init__(self, text, sqlstate=None, number=None, message=None):
        super().__init__(text)
        if sqlstate is not None:
            self.sqlstate = sqlstate
        if number is not None:
            self.number = number
        if message is not None:
            self.message = message


def _dbapi_error(orig: Exception) -> DBAPIError:
    return DBAPIError("SELECT 1", {}, orig)


class _Result:
    def __init__(self, rows):
        self._rows = rows

    def mappings(self):
        return self

    def all(self):
        return self._rows


class _FakeSession:
    def __init__(self, rows=None, error=None):
        self.rows = rows or []
        self.error = error
        self.executed = []
        self.commits = 0
        self.rollbacks = 0

    async def execute(self, statement, params):
        self.executed.append((str(statement), params))
        if self.error is not None:
            raise self.error
        return _Result(self.rows)

    async def commit(self):
        self.commits += 1

    async def rollback(self):
        self.rollbacks += 1


# --- build_procedure_call ---------------------------------------------------

def test_call_uses_named_arguments():
    stmt = build_procedure_call(
        "functional", "spCategoryGet", {"idAccount": 1, "idCategory": 2},
    )
    assert str(stmt) == (
        'SELECT * FROM "functional"."spCategoryGet"'
        '("idAccount" => :idAccount, "idCategory" => :idCategory)'
    )


def test_call_without_arguments():
    stmt = build_procedure_call("functional", "spPing", {})
    assert str(stmt) == 'SELECT * FROM "functional"."spPing"()'


@pytest.mark.parametrize("schema,procedure,params", [
    ('functional"; DROP', "spCategoryGet", {}),
    ("functional", "sp Category", {}),
    ("functional", "spCategoryGet", {"id-account": 1}),
])
def test_call_rejects_bad_identifiers(schema, procedure, params):
    with pytest.raises(ValueError):
        build_procedure_call(schema, procedure, params)


# --- error extraction -------------------------------------------------------

def test_error_number_from_sqlstate():
    err = _dbapi_error(_DriverError("boom", sqlstate="51000"))
    assert extract_error_number(err) == 51000


def test_error_number_from_number_attribute():
    err = _dbapi_error(_DriverError("boom", number=51000))
    assert extract_error_number(err) == 51000


def test_error_number_from_cause():
    cause = _DriverError("inner", sqlstate="51000", message="categoryDoesntExist")
    outer = _DriverError("wrapped")
    outer.__cause__ = cause

    err = _dbapi_error(outer)

    assert extract_error_number(err) == 51000
    assert extract_error_message(err) == "categoryDoesntExist"


def test_non_numeric_sqlstate_is_ignored():
    err = _dbapi_error(_DriverError("unique violation", sqlstate="23P01"))
    assert extract_error_number(err) is None


def test_message_falls_back_to_text():
    err = _dbapi_error(_DriverError("plain failure"))
    assert extract_error_message(err) == "plain failure"


# --- SqlProcedureStore ------------------------------------------------------

async def test_fetch_all_returns_rows_and_commits():
    session = _FakeSession(rows=[{"idCategory": 1}, {"idCategory": 2}])
    store = SqlProcedureStore(session)

    rows = await store.fetch_all("spCategoryList", {"idAccount": 1})

    assert rows == [{"idCategory": 1}, {"idCategory": 2}]
    assert session.commits == 1
    assert session.executed[0][1] == {"idAccount": 1}
    assert '"functional"."spCategoryList"' in session.executed[0][0]


async def test_custom_schema():
    session = _FakeSession(rows=[{"idTask": 1}])
    store = SqlProcedureStore(session, schema="tasks")

    await store.fetch_one("spTaskCreate", {"title": "x"})

    assert '"tasks"."spTaskCreate"' in session.executed[0][0]


async def test_business_rule_error_is_mapped():
    orig = _DriverError(
        "categoryNameAlreadyExists", sqlstate="51000",
        message="categoryNameAlreadyExists",
    )
    session = _FakeSession(error=_dbapi_error(orig))
    store = SqlProcedureStore(session)

    with pytest.raises(BusinessRuleError) as exc_info:
        await store.fetch_one("spCategoryCreate", {"idAccount": 3, "name": "Work"})

    assert exc_info.value.message == "categoryNameAlreadyExists"
    assert exc_info.value.context.procedure == "spCategoryCreate"
    assert exc_info.value.context.account_id == 3
    assert session.rollbacks == 1
    assert session.commits == 0


async def test_other_driver_error_is_database_error():
    session = _FakeSession(error=_dbapi_error(_DriverError("relation missing")))
    store = SqlProcedureStore(session)

    with pytest.raises(DatabaseError) as exc_info:
        await store.fetch_all("spCategoryList", {"idAccount": 1})

    assert exc_info.value.http_status == 500
    assert "relation missing" not in exc_info.value.public_message
    assert session.rollbacks == 1


async def test_fetch_one_without_rows_is_contract_error():
    store = SqlProcedureStore(_FakeSession(rows=[]))

    with pytest.raises(ProcedureContractError):
        await store.fetch_one("spCategoryGet", {"idAccount": 1, "idCategory": 9})


async def test_fetch_one_returns_first_row():
    store = SqlProcedureStore(_FakeSession(rows=[{"idTask": 7}, {"idTask": 8}]))
    assert await store.fetch_one("spTaskCreate", {"title": "x"}) == {"idTask": 7}
