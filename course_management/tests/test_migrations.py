from __future__ import annotations

import importlib.util
from pathlib import Path

import sqlalchemy as sa
from alembic.migration import MigrationContext
from alembic.operations import Operations

from course_management.db import Base
from course_management.db import models  # noqa: F401

VERSIONS_DIR = Path(__file__).resolve().parents[1] / "db" / "migrations" / "versions"


def _load_revision(name: str):
    path = VERSIONS_DIR / f"{name}.py"
    spec = importlib.util.spec_from_file_location(name, path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_initial_revision_matches_models() -> None:
    revision = _load_revision("20250301_000001_initial_schema")
    engine = sa.create_engine("sqlite:///:memory:", future=True)

    with engine.begin() as connection:
        with Operations.context(MigrationContext.configure(connection)):
            revision.upgrade()

        inspector = sa.inspect(connection)
        assert set(inspector.get_table_names()) == set(Base.metadata.tables)
        for name, table in Base.metadata.tables.items():
            columns = {column["name"] for column in inspector.get_columns(name)}
            assert columns == set(table.columns.keys()), name

        constraints = inspector.get_unique_constraints("courses")
        assert any(item["name"] == "uq_courses_title_instructor" for item in constraints)

        with Operations.context(MigrationContext.configure(connection)):
            revision.downgrade()
        assert sa.inspect(connection).get_table_names() == []
