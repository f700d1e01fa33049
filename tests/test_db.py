from seed_users import main as seed_main
from user_listing_api.app.core.db import MIGRATIONS, check_connection, get_cursor, init_db


def test_init_db_is_repeatable(tmp_path):
    path = str(tmp_path / "nested" / "users.db")
    latest = MIGRATIONS[-1][0]
    assert init_db(path) == latest
    assert init_db(path) == latest
    with get_cursor(path) as cursor:
        versions = [row["version"] for row in cursor.execute("SELECT version FROM migrations")]
    assert versions == [version for version, _ in MIGRATIONS]


def test_check_connection(tmp_path):
    path = str(tmp_path / "users.db")
    assert not check_connection(path)
    init_db(path)
    assert check_connection(path)


def test_seed_users_skips_existing(tmp_path, capsys):
    path = str(tmp_path / "users.db")
    assert seed_main(["--db", f"sqlite:///{path}", "--count", "7"]) == 0
    assert seed_main(["--db", path, "--count", "9"]) == 0
    with get_cursor(path) as cursor:
        count = cursor.execute("SELECT COUNT(*) AS count FROM users").fetchone()["count"]
    assert count == 9
    out = capsys.readouterr().out
    assert "Added 7 user(s)" in out
    assert "Added 2 user(s)" in out


def test_seed_users_rejects_unsupported_url(capsys):
    assert seed_main(["--db", "postgresql://localhost/db"]) == 1
    assert "Unsupported database scheme" in capsys.readouterr().err
