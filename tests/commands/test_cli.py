"""Smoke tests for the fintrack CLI."""

from pathlib import Path

import pandas as pd
import pytest
from typer.testing import CliRunner

from fintrack.cli import app
from fintrack.commands.transactions import EXPORT_COLUMNS
from fintrack.config import load_config, update_config

runner = CliRunner()


@pytest.fixture(autouse=True)
def config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    return tmp_path / "config"


class TestExport:
    """Tests for the export command."""

    def test_writes_demo_transactions(self, tmp_path: Path) -> None:
        """Should write every demo transaction, most recent first."""
        output = tmp_path / "out" / "transactions.csv"

        result = runner.invoke(app, ["export", str(output)])

        assert result.exit_code == 0
        frame = pd.read_csv(output)
        assert list(frame.columns) == EXPORT_COLUMNS
        assert len(frame) == 5
        assert frame.loc[0, "Description"] == "Client payment for website development"
        assert frame.loc[0, "Amount"] == 2500.0
        assert frame.loc[0, "Type"] == "income"


class TestInitAndConfig:
    """Tests for the init and config commands."""

    def test_init_refuses_to_overwrite(self, config_home: Path) -> None:
        """Should fail on a second init without --force."""
        first = runner.invoke(app, ["init"])
        second = runner.invoke(app, ["init"])
        forced = runner.invoke(app, ["init", "--force"])

        assert first.exit_code == 0
        assert second.exit_code == 1
        assert forced.exit_code == 0
        assert (config_home / "fintrack" / "config.toml").exists()

    def test_config_updates_business_name(self, config_home: Path) -> None:
        """Should save the new business name."""
        result = runner.invoke(app, ["config", "--business-name", "Acme"])

        assert result.exit_code == 0
        assert load_config(config_home / "fintrack" / "config.toml")["business_name"] == "Acme"

    def test_config_rejects_bad_month(self) -> None:
        """Should exit 1 for a malformed month."""
        result = runner.invoke(app, ["config", "--month", "2025-13"])

        assert result.exit_code == 1


class TestReadOnlyCommands:
    """Tests for dashboard, list, budget and inventory."""

    @pytest.mark.parametrize(
        "args",
        [["dashboard"], ["list"], ["list", "--all"], ["budget", "--month", "2025-09"], ["inventory"]],
    )
    def test_runs(self, args: list[str]) -> None:
        """Should render without error."""
        result = runner.invoke(app, args)

        assert result.exit_code == 0, result.output

    def test_budget_rejects_bad_month(self) -> None:
        """Should exit 1 for a malformed month."""
        result = runner.invoke(app, ["budget", "--month", "September"])

        assert result.exit_code == 1


class TestShell:
    """Tests for the interactive shell."""

    def test_quit(self) -> None:
        """Should end the session from the tab prompt."""
        result = runner.invoke(app, ["shell", "--month", "2025-09"], input="n\nq\n")

        assert result.exit_code == 0
        assert "Session ended" in result.output

    def test_add_returns_to_dashboard(self) -> None:
        """Should record a transaction and show the dashboard again."""
        answers = ["n", "a", "income", "Consulting", "100", "1", "2025-09-20", "n", "q"]

        result = runner.invoke(app, ["shell", "--month", "2025-09"], input="\n".join(answers) + "\n")

        assert result.exit_code == 0, result.output
        assert "Transaction added" in result.output
        assert "Session ended" in result.output

    def test_delete_transaction(self) -> None:
        """Should delete a selected transaction after confirmation."""
        answers = ["n", "t", "d", "1", "y", "q"]

        result = runner.invoke(app, ["shell", "--month", "2025-09"], input="\n".join(answers) + "\n")

        assert result.exit_code == 0, result.output
        assert "Transaction deleted" in result.output

    def test_list_inventory_item(self) -> None:
        """Should move an unlisted item onto the market."""
        answers = ["n", "i", "s", "1", "q"]

        result = runner.invoke(app, ["shell", "--month", "2025-09"], input="\n".join(answers) + "\n")

        assert result.exit_code == 0, result.output
        assert "is now On Market" in result.output

    def test_text_with_markup_characters(self) -> None:
        """Should show bracketed descriptions literally instead of as styling."""
        answers = ["n", "a", "expense", "Paid [/b] invoice", "10", "1", "2025-09-20", "n", "q"]

        result = runner.invoke(app, ["shell", "--month", "2025-09"], input="\n".join(answers) + "\n")

        assert result.exit_code == 0, result.output
        assert "Description: Paid [/b] invoice" in result.output
        assert "Session ended" in result.output

    def test_add_inventory_item_with_brackets(self) -> None:
        """Should add and list an item whose name contains brackets."""
        answers = ["n", "i", "a", "Van [/x]", "2025-09-01", "500", "", "", "", "i", "", "q"]

        result = runner.invoke(app, ["shell", "--month", "2025-09"], input="\n".join(answers) + "\n")

        assert result.exit_code == 0, result.output
        assert "Added Van [/x] ($500.00)" in result.output

    def test_change_business_name(self) -> None:
        """Should show the new business name on the next dashboard."""
        answers = ["y", "Acme [/b] Ltd", "d", "n", "q"]

        result = runner.invoke(app, ["shell", "--month", "2025-09"], input="\n".join(answers) + "\n")

        assert result.exit_code == 0, result.output
        # Once echoed at the prompt, once in the dashboard header
        assert result.output.count("Acme [/b] Ltd") >= 2


class TestShellBudget:
    """Tests for the budget tab of the interactive shell."""

    def run_budget(self, actions: list[str]) -> str:
        answers = ["n", "b", *actions, "b", "", "q"]
        result = runner.invoke(app, ["shell", "--month", "2025-09"], input="\n".join(answers) + "\n")
        assert result.exit_code == 0, result.output
        return result.output

    def test_add_category(self) -> None:
        """Should add the category to the expense budget."""
        output = self.run_budget(["a", "Travel", "300", "expense"])

        assert "Added Travel: $300.00" in output
        assert "$1,300.00 of $5,700.00 spent" in output

    def test_rename_category_detaches_spend(self) -> None:
        """Should warn on rename and stop counting spend under the old name."""
        output = self.run_budget(["e", "4", "Ads", "800"])

        assert "$1,300.00 of $5,400.00 spent" in output
        assert "will no longer count towards it" in output
        assert "Ads now budgeted: $800.00" in output
        assert "$950.00 of $5,400.00 spent" in output

    def test_remove_category(self) -> None:
        """Should drop the category and its budget."""
        output = self.run_budget(["r", "4", "y"])

        assert "Removed Marketing" in output
        assert "$950.00 of $4,600.00 spent" in output

    def test_switch_month(self) -> None:
        """Should report on the chosen month."""
        output = self.run_budget(["m", "2025-10"])

        assert "$0.00 of $5,400.00 spent" in output


class TestConfigValues:
    """Tests for config values read at startup."""

    def test_seed_flag_as_text(self, config_home: Path) -> None:
        """Should treat the text 'false' as false."""
        update_config({"seed_demo_data": "false"}, config_home / "fintrack" / "config.toml")

        result = runner.invoke(app, ["list"])

        assert result.exit_code == 0, result.output
        assert "No transactions found" in result.output

    def test_bad_recent_limit(self, config_home: Path) -> None:
        """Should exit 1 with a message for a non-numeric limit."""
        update_config({"recent_limit": "lots"}, config_home / "fintrack" / "config.toml")

        result = runner.invoke(app, ["dashboard"])

        assert result.exit_code == 1
        assert "Invalid config value" in result.output
