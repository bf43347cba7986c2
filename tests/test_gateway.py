import pytest

from skillswap.errors import StoreError
from skillswap.gateway import translate_placeholders


def test_translate_placeholders_numbers_binds_in_order():
    sql, binds = translate_placeholders("SELECT * FROM users WHERE id = ? AND status = ?", (7, "active"))
    assert sql == "SELECT * FROM users WHERE id = :p1 AND status = :p2"
    assert binds == {"p1": 7, "p2": "active"}


def test_translate_placeholders_skips_quoted_literals():
    sql, binds = translate_placeholders("SELECT * FROM users WHERE name = 'Who? It''s ?' AND id = ?", (3,))
    assert sql == "SELECT * FROM users WHERE name = 'Who? It''s ?' AND id = :p1"
    assert binds == {"p1": 3}


def test_translate_placeholders_rejects_param_mismatch():
    with pytest.raises(StoreError):
        translate_placeholders("SELECT * FROM users WHERE id = ?", ())


def test_insert_returns_generated_id(gateway):
    first = gateway.execute(
        "INSERT INTO users (name, email, password_hash) VALUES (?, ?, ?)", ("A", "a@example.com", "x")
    )
    second = gateway.execute(
        "INSERT INTO users (name, email, password_hash) VALUES (?, ?, ?)", ("B", "b@example.com", "x")
    )
    gateway.commit()
    assert first.generated_id is not None
    assert second.generated_id == first.generated_id + 1
    assert first.affected_rows == 1


def test_update_reports_affected_rows(gateway, users):
    result = gateway.execute("UPDATE users SET status = ? WHERE status = ?", ("flagged", "active"))
    assert result.generated_id is None
    assert result.affected_rows == 3

    missing = gateway.execute("UPDATE users SET status = ? WHERE id = ?", ("banned", 999))
    assert missing.affected_rows == 0


def test_query_one_and_all(gateway, users):
    alice_id = users[0]
    row = gateway.query_one("SELECT id, name FROM users WHERE id = ?", (alice_id,))
    assert row == {"id": alice_id, "name": "Alice Brown"}
    assert gateway.query_one("SELECT id FROM users WHERE id = ?", (999,)) is None

    rows = gateway.query_all("SELECT name FROM users ORDER BY id")
    assert [r["name"] for r in rows] == ["Alice Brown", "Bob Johnson", "Carol White"]


def test_store_failure_surfaces_driver_message(gateway):
    with pytest.raises(StoreError) as excinfo:
        gateway.query_all("SELECT * FROM no_such_table")
    assert "no_such_table" in excinfo.value.message
    assert excinfo.value.status_code == 500
