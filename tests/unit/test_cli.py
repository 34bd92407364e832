"""
Tests for the codeup-migrate command line.
"""

from unittest.mock import patch

import pytest

from codeup_migrate import cli
from codeup_migrate.exceptions import RemoteRequestError
from codeup_migrate.source import CodeupSource

from conftest import InMemoryFetcher

URL = "codeup://host/db/migrations?projectId=1&organizationId=o&accessToken=t"


@pytest.fixture(autouse=True)
def keep_logging():
    """Leave the test runner's logging handlers in place."""
    with patch.object(cli, "configure_logging"):
        yield


@pytest.fixture
def use_fetcher():
    """Route the CLI's registry to an in-memory fetcher."""

    def install(fetcher):
        def register(registry):
            registry.register(
                "codeup", lambda: CodeupSource(fetcher_factory=lambda credentials, options: fetcher)
            )

        return patch.object(cli, "register_codeup", register)

    return install


class TestCli:
    """Test the list and show commands."""

    def test_list(self, use_fetcher, fetcher, capsys):
        with use_fetcher(fetcher):
            exit_code = cli.main(["list", URL])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "1_init.up.sql" in out
        assert "1_init.down.sql" in out
        assert "3_add.up.sql" in out
        assert "2 versions" in out

    def test_show_up(self, use_fetcher, fetcher, capsys):
        with use_fetcher(fetcher):
            exit_code = cli.main(["show", URL, "3"])

        assert exit_code == 0
        assert capsys.readouterr().out == "ALTER TABLE users ADD COLUMN name TEXT;\n"

    def test_show_down(self, use_fetcher, fetcher, capsys):
        with use_fetcher(fetcher):
            exit_code = cli.main(["show", URL, "1", "--down"])

        assert exit_code == 0
        assert capsys.readouterr().out == "DROP TABLE users;\n"

    def test_show_missing(self, use_fetcher, fetcher, capsys):
        with use_fetcher(fetcher):
            exit_code = cli.main(["show", URL, "3", "--down"])

        assert exit_code == 1
        assert "read version 3 /db/migrations: file does not exist" in capsys.readouterr().err

    def test_listing_denied(self, use_fetcher, capsys):
        fetcher = InMemoryFetcher()
        fetcher.list_error = RemoteRequestError("permission denied")

        with use_fetcher(fetcher):
            exit_code = cli.main(["list", URL])

        assert exit_code == 1
        assert "permission denied" in capsys.readouterr().err

    def test_command_required(self):
        with pytest.raises(SystemExit):
            cli.main([])
