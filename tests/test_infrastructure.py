"""
Tests for configuration, error translation and database seeding.
"""

from pathlib import Path

import pytest
from fastapi import HTTPException

from petclinic.config.settings import load_settings
from petclinic.exceptions import ApplicationError, ConfigurationError, DatabaseError, NotFoundError
from petclinic.init_db import seed_pet_types
from petclinic.models import PetType
from petclinic.utils.error_handlers import handle_api_errors, to_http_exception


class TestSettings:

    def test_defaults_use_data_dir(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PETCLINIC_DATA_DIR", str(tmp_path))
        monkeypatch.delenv("PETCLINIC_DATABASE_URL", raising=False)
        monkeypatch.delenv("PETCLINIC_LOG_LEVEL", raising=False)
        monkeypatch.delenv("PETCLINIC_SEED_PET_TYPES", raising=False)

        settings = load_settings()

        assert settings.data_dir == Path(tmp_path)
        assert settings.database_url == f"sqlite:///{tmp_path / 'petclinic.db'}"
        assert settings.log_dir == Path(tmp_path) / "logs"
        assert settings.log_level == "INFO"
        assert settings.seed_pet_types
        assert settings.is_sqlite

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("PETCLINIC_DATABASE_URL", "postgresql://clinic@localhost/petclinic")
        monkeypatch.setenv("PETCLINIC_LOG_LEVEL", "debug")
        monkeypatch.setenv("PETCLINIC_SEED_PET_TYPES", "false")

        settings = load_settings()

        assert not settings.is_sqlite
        assert settings.log_level == "DEBUG"
        assert not settings.seed_pet_types

    def test_unknown_log_level(self, monkeypatch):
        monkeypatch.setenv("PETCLINIC_LOG_LEVEL", "chatty")

        with pytest.raises(ConfigurationError) as exc_info:
            load_settings()

        assert exc_info.value.details == {"setting": "PETCLINIC_LOG_LEVEL"}


class TestErrorTranslation:

    @pytest.mark.parametrize("error, status", [
        (NotFoundError("Owner", 3), 404),
        (ConfigurationError("bad setting"), 500),
        (DatabaseError("Save owner", "disk full"), 500),
        (ApplicationError("broken"), 500),
        (RuntimeError("boom"), 500),
    ])
    def test_status_codes(self, error, status):
        assert to_http_exception("Show owner", error).status_code == status

    def test_unexpected_error_detail_is_generic(self):
        exc = to_http_exception("Show owner", RuntimeError("secret"))

        assert "secret" not in exc.detail

    def test_database_error_detail_hides_statement(self):
        error = DatabaseError("Save visit", "(sqlite3.IntegrityError) NOT NULL constraint failed: visits.visit_date [SQL: INSERT INTO visits ...]")

        exc = to_http_exception("Record visit", error)

        assert exc.status_code == 500
        assert "INSERT" not in exc.detail
        assert "visit_date" not in exc.detail

    def test_decorator_translates_sync_errors(self):
        @handle_api_errors("Show owner")
        def show_owner(owner_id: int):
            raise NotFoundError("Owner", owner_id)

        with pytest.raises(HTTPException) as exc_info:
            show_owner(4)

        assert exc_info.value.status_code == 404
        assert exc_info.value.detail == "Owner '4' not found"

    def test_decorator_passes_http_exceptions_through(self):
        @handle_api_errors("Show owner")
        def show_owner():
            raise HTTPException(status_code=418, detail="teapot")

        with pytest.raises(HTTPException) as exc_info:
            show_owner()

        assert exc_info.value.status_code == 418


class TestSeeding:

    def test_seed_is_idempotent(self, db_session):
        # The engine fixture has already seeded the defaults
        assert seed_pet_types(db_session) == 0
        assert db_session.query(PetType).count() == 6

    def test_seed_adds_missing_types(self, db_session):
        db_session.query(PetType).filter(PetType.name == "snake").delete()
        db_session.commit()

        assert seed_pet_types(db_session) == 1
        assert {t.name for t in db_session.query(PetType)} >= {"snake", "cat"}
