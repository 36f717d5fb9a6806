"""
CLI tests.

Runs main() in-process against the bundled and temporary rules files.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from solid_examples.app_shell.cli import DEMOS, main


@pytest.fixture
def run_cli(rules_path: Path):
    def _run(*args: str) -> None:
        main(["--rules", str(rules_path), *args])

    return _run


class TestList:
    def test_lists_all_principles(self, run_cli, capsys) -> None:
        run_cli("list")
        out = capsys.readouterr().out
        for acronym in ("SRP", "OCP", "LSP", "ISP", "DIP"):
            assert acronym in out


class TestInvoice:
    def test_known_country(self, run_cli, capsys) -> None:
        """Country lookup ignores case."""
        run_cli("invoice", "INDIA", "--amount", "100")
        out = capsys.readouterr().out
        assert "INR" in out
        assert "118.00" in out

    def test_unknown_country_exits(self, run_cli, caplog) -> None:
        """Unknown country logs an error and exits 1."""
        with caplog.at_level(logging.ERROR), pytest.raises(SystemExit) as exc_info:
            run_cli("invoice", "France")
        assert exc_info.value.code == 1
        assert "Not Valid" in caplog.text

    @pytest.mark.parametrize("amount", ["NaN", "sNaN", "Infinity"])
    def test_non_finite_amount_is_usage_error(self, run_cli, amount: str) -> None:
        """Non-finite amounts are rejected by argument parsing."""
        with pytest.raises(SystemExit) as exc_info:
            run_cli("invoice", "india", "--amount", amount)
        assert exc_info.value.code == 2

    def test_bad_amount_is_usage_error(self, run_cli) -> None:
        with pytest.raises(SystemExit) as exc_info:
            run_cli("invoice", "india", "--amount", "lots")
        assert exc_info.value.code == 2


class TestPay:
    def test_pay_succeeds(self, run_cli, capsys) -> None:
        run_cli("pay", "10")
        assert "Paid 10 via stub" in capsys.readouterr().out

    def test_pay_declined_exits(self, run_cli) -> None:
        with pytest.raises(SystemExit) as exc_info:
            run_cli("pay", "10", "--decline")
        assert exc_info.value.code == 1

    @pytest.mark.parametrize("amount", ["NaN", "Infinity"])
    def test_pay_non_finite_is_usage_error(self, run_cli, amount: str) -> None:
        with pytest.raises(SystemExit) as exc_info:
            run_cli("pay", amount)
        assert exc_info.value.code == 2

    def test_pay_negative_exits(self, run_cli) -> None:
        with pytest.raises(SystemExit) as exc_info:
            run_cli("pay", "-5")
        assert exc_info.value.code == 1


class TestDemo:
    @pytest.mark.parametrize("principle", sorted(DEMOS))
    def test_demo_runs(self, run_cli, capsys, principle: str) -> None:
        run_cli("demo", principle)
        out = capsys.readouterr().out
        assert "Violation" in out
        assert "Refactor" in out

    def test_demo_accepts_upper_case(self, run_cli, capsys) -> None:
        run_cli("demo", "LSP")
        out = capsys.readouterr().out
        assert "Penguin cannot fly" in out
        assert "Penguin is Swimming" in out


class TestRulesErrors:
    def test_missing_rules_file_exits(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--rules", str(tmp_path / "missing.yaml"), "list"])
        assert exc_info.value.code == 1

    def test_invalid_rules_file_exits(self, write_rules) -> None:
        path = write_rules("project: [")
        with pytest.raises(SystemExit) as exc_info:
            main(["--rules", str(path), "list"])
        assert exc_info.value.code == 1
