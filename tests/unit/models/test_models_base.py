"""
Unit tests for base model functionality.
"""

import uuid
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.dialects import postgresql, sqlite

from postbook.core.models.base import BaseModel, utcnow
from postbook.core.models.types import GUID
from postbook.core.models.user import User


class TestBaseModel:
    """Test BaseModel functionality."""

    def test_base_model_abstract(self):
        assert BaseModel.__abstract__ is True

    def test_repr_method(self):
        model = User(username="u", password_hash="h")
        # User overrides __repr__; the base one is still reachable
        model.id = uuid.uuid4()
        assert BaseModel.__repr__(model) == f"<User(id={model.id})>"

    def test_touch_bumps_updated_at(self):
        model = User(username="u", password_hash="h")
        model.updated_at = datetime.now(timezone.utc) - timedelta(days=1)
        before = model.updated_at
        model.touch()
        assert model.updated_at > before
        assert model.updated_at.tzinfo is not None

    def test_utcnow_is_aware(self):
        assert utcnow().tzinfo == timezone.utc


class TestGUID:
    def test_sqlite_round_trip(self):
        guid = GUID()
        value = uuid.uuid4()
        dialect = sqlite.dialect()
        stored = guid.process_bind_param(value, dialect)
        assert stored == str(value)
        assert guid.process_result_value(stored, dialect) == value

    def test_accepts_string_input(self):
        value = uuid.uuid4()
        assert GUID().process_bind_param(str(value), sqlite.dialect()) == str(value)

    def test_postgres_keeps_uuid(self):
        value = uuid.uuid4()
        assert GUID().process_bind_param(value, postgresql.dialect()) == value

    def test_none_passes_through(self):
        assert GUID().process_bind_param(None, sqlite.dialect()) is None
        assert GUID().process_result_value(None, sqlite.dialect()) is None

    def test_rejects_garbage(self):
        with pytest.raises(ValueError):
            GUID().process_bind_param("nope", sqlite.dialect())
