"""
Tests for migration file name parsing.
"""

import pytest

from codeup_migrate.exceptions import MigrationParseError
from codeup_migrate.migrations import Direction, MigrationRecord, parse


class TestParse:
    """Test parsing of migration file names."""

    @pytest.mark.parametrize(
        "name, version, direction, identifier",
        [
            ("1_init.up.sql", 1, Direction.UP, "init"),
            ("1_init.down.sql", 1, Direction.DOWN, "init"),
            ("001_create_users.up.sql", 1, Direction.UP, "create_users"),
            ("20240101120000_add.index.down.sql", 20240101120000, Direction.DOWN, "add.index"),
            ("7_.up.sql", 7, Direction.UP, ""),
        ],
    )
    def test_directional_names(self, name, version, direction, identifier):
        """Test names carrying an up/down marker."""
        record = parse(name)

        assert record == MigrationRecord(
            version=version, direction=direction, identifier=identifier, raw=name
        )

    def test_combined_name_is_up(self):
        """Test a name without direction marker is a combined up migration."""
        record = parse("2_seed.sql")

        assert record.version == 2
        assert record.direction is Direction.UP
        assert record.identifier == "seed"
        assert record.raw == "2_seed.sql"

    @pytest.mark.parametrize(
        "name",
        [
            "README.md",
            "init.up.sql",
            "v1_init.up.sql",
            "1init.up.sql",
            "1_init",
            "1_init.up",
            "1_init.down",
            "1_init.DOWN",
            "",
        ],
    )
    def test_rejects_unrecognised_names(self, name):
        """Test names without a leading version or extension are rejected."""
        with pytest.raises(MigrationParseError) as exc_info:
            parse(name)

        assert exc_info.value.name == name

    def test_rejects_version_out_of_range(self):
        """Test versions wider than 64 bits are rejected."""
        name = f"{2**64}_huge.up.sql"

        with pytest.raises(MigrationParseError):
            parse(name)

    def test_largest_version_accepted(self):
        record = parse(f"{2**64 - 1}_max.up.sql")
        assert record.version == 2**64 - 1


class TestMigrationRecord:
    """Test MigrationRecord validation."""

    def test_record_is_immutable(self):
        record = parse("1_init.up.sql")

        with pytest.raises(AttributeError):
            record.version = 2

    def test_negative_version_rejected(self):
        with pytest.raises(ValueError, match="cannot be negative"):
            MigrationRecord(version=-1, direction=Direction.UP, identifier="x", raw="x")

    def test_empty_raw_rejected(self):
        with pytest.raises(ValueError, match="raw name cannot be empty"):
            MigrationRecord(version=1, direction=Direction.UP, identifier="x", raw="")
