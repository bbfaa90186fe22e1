"""Unit tests for BaseModel.

Uses a concrete test model created via Django's SchemaEditor so we can
exercise the abstract class against a real database.
"""

from __future__ import annotations

from datetime import timedelta

import pytest
from freezegun import freeze_time

from django.db import connection, models
from django.utils import timezone

from modules.core.models import BaseModel

pytestmark = pytest.mark.unit


class ConcreteBaseModel(BaseModel):
    name = models.CharField(max_length=100)

    class Meta(BaseModel.Meta):
        app_label = "core"
        db_table = "test_concrete_base"


@pytest.fixture(scope="session")
def _test_tables(django_db_setup, django_db_blocker):
    """Create the DB table for the concrete test model (idempotent for --reuse-db)."""
    with django_db_blocker.unblock():
        with connection.schema_editor() as editor:
            if ConcreteBaseModel._meta.db_table not in connection.introspection.table_names():
                editor.create_model(ConcreteBaseModel)


@pytest.fixture(autouse=True)
def _use_test_tables(_test_tables):
    """Ensure the test table exists for every test in this module."""


class TestBaseModel:
    """Tests for the integer PK and timestamp behaviour."""

    def test_id_is_integer(self):
        obj = ConcreteBaseModel.objects.create(name="test")
        assert isinstance(obj.id, int)

    def test_ids_are_increasing(self):
        a = ConcreteBaseModel.objects.create(name="first")
        b = ConcreteBaseModel.objects.create(name="second")
        assert b.id > a.id

    def test_id_is_explicit_auto_primary_key(self):
        field = ConcreteBaseModel._meta.get_field("id")
        assert field.primary_key is True
        assert field.auto_created is False
        assert field.get_internal_type() == "BigAutoField"

    def test_timestamps_set_on_create(self):
        obj = ConcreteBaseModel.objects.create(name="test")
        assert obj.created_at is not None
        assert obj.updated_at is not None

    def test_updated_at_changes_on_save(self):
        with freeze_time("2025-06-15 12:00:00"):
            obj = ConcreteBaseModel.objects.create(name="original")
        with freeze_time("2025-06-15 12:05:00"):
            obj.name = "modified"
            obj.save()
        obj.refresh_from_db()
        assert obj.updated_at - obj.created_at == timedelta(minutes=5)

    def test_created_at_does_not_change_on_save(self):
        with freeze_time("2025-06-15 12:00:00"):
            obj = ConcreteBaseModel.objects.create(name="original")
            original_created = obj.created_at
        with freeze_time("2025-06-15 13:00:00"):
            obj.name = "modified"
            obj.save()
        obj.refresh_from_db()
        assert obj.created_at == original_created

    def test_save_with_update_fields_includes_updated_at(self):
        """The save() guard must inject updated_at into update_fields."""
        with freeze_time("2025-06-15 12:00:00"):
            obj = ConcreteBaseModel.objects.create(name="original")
        with freeze_time("2025-06-15 12:01:00"):
            obj.name = "modified"
            obj.save(update_fields=["name"])
            expected = timezone.now()
        obj.refresh_from_db()
        assert obj.updated_at == expected
        assert obj.name == "modified"
