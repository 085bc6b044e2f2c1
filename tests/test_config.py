"""Tests for config.json loading."""

import json

import pytest

from config import load_config


def write(path, text):
    path.write_text(text, encoding="utf-8")
    return str(path)


class TestLoadConfig:
    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "config.json"))

    def test_invalid_json_reports_line(self, tmp_path):
        path = write(tmp_path / "config.json", '{\n  "DB_BACKEND": "sqlite",\n  oops\n}')
        with pytest.raises(ValueError) as exc:
            load_config(path)
        assert "oops" in str(exc.value)

    def test_missing_required_key(self, tmp_path):
        path = write(tmp_path / "config.json", json.dumps({"DB_PATH": "x.db"}))
        with pytest.raises(KeyError, match="DB_BACKEND"):
            load_config(path)

    def test_unknown_backend(self, tmp_path):
        path = write(tmp_path / "config.json", json.dumps({"DB_BACKEND": "oracle"}))
        with pytest.raises(ValueError, match="oracle"):
            load_config(path)

    def test_defaults_filled(self, tmp_path):
        path = write(tmp_path / "config.json", json.dumps({"DB_BACKEND": "sqlite"}))
        config = load_config(path)

        assert config["DB_PATH"] == "myproducts.db"
        assert config["MYSQL_HOST"] == "localhost"
        assert config["APPEARANCE_MODE"] == "dark"
        assert config["COLOR_THEME"] == "green"

    def test_explicit_values_kept(self, tmp_path):
        path = write(tmp_path / "config.json", json.dumps({"DB_BACKEND": "mysql", "MYSQL_HOST": "db.local"}))
        config = load_config(path)
        assert config["DB_BACKEND"] == "mysql"
        assert config["MYSQL_HOST"] == "db.local"

    def test_in_memory_sqlite_rejected(self, tmp_path):
        path = write(tmp_path / "config.json", json.dumps({"DB_BACKEND": "sqlite", "DB_PATH": ":memory:"}))
        with pytest.raises(ValueError, match=":memory:"):
            load_config(path)

    def test_memory_path_ignored_for_mysql(self, tmp_path):
        path = write(tmp_path / "config.json", json.dumps({"DB_BACKEND": "mysql", "DB_PATH": ":memory:"}))
        assert load_config(path)["DB_BACKEND"] == "mysql"
