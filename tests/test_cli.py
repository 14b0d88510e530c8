"""
Tests for the llrb-insert command-line driver.
"""

import logging

import pytest

from llrb import cli
from llrb.models.exceptions import InvariantViolationError


class TestCli:
    """Tests for argument handling, logging and exit codes."""

    def test_summary_logged(self, caplog):
        caplog.set_level(logging.INFO)
        assert cli.main(["10", "5", "15", "3", "7"]) == 0
        assert "Inserted 5 of 5 values, distinct=5 height=3 black_height=2" in caplog.text

    def test_duplicates_counted_not_logged(self, caplog):
        caplog.set_level(logging.DEBUG)
        assert cli.main(["5", "5", "5"]) == 0
        assert caplog.text.count("Inserted 5\n") == 1
        assert "Inserted 1 of 3 values, distinct=1" in caplog.text

    def test_render_flag(self, capsys):
        assert cli.main(["2", "1", "--render"]) == 0
        out = capsys.readouterr().out
        assert out.splitlines() == ["2 (BLACK)", "    1 (RED)"]

    def test_validate_flag_passes(self):
        assert cli.main(["3", "1", "2", "--validate"]) == 0

    def test_validate_failure_exit_code(self, monkeypatch, caplog):
        def _broken(tree):
            raise InvariantViolationError("black root", 1, "root is red")

        monkeypatch.setattr(cli, "validate", _broken)
        assert cli.run([1], check=True) == 1
        assert "Tree is invalid" in caplog.text

    def test_non_integer_rejected(self):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["1", "two"])
        assert exc_info.value.code == 2

    def test_values_required(self):
        with pytest.raises(SystemExit) as exc_info:
            cli.main([])
        assert exc_info.value.code == 2
