"""Tests for the MCP tool functions."""

import json
from decimal import Decimal

import pytest

from splitledger import mcp_server
from splitledger.mcp_server import (
    SessionState,
    get_balances,
    list_expenses,
    list_users,
    load_ledger,
    record_expense,
    register_user,
    settle_up,
)
from splitledger.models import Split


@pytest.fixture(autouse=True)
def fresh_state(monkeypatch):
    """Give every test its own session ledger."""
    state = SessionState(currency_symbol="$")
    monkeypatch.setattr(mcp_server, "_state", state)
    return state


@pytest.fixture
def three_users():
    for user_id, name in [("A", "Alice"), ("B", "Bob"), ("C", "Carol")]:
        register_user(user_id, name)


def even_split(*user_ids: str, amount: str) -> list[Split]:
    return [Split(user_id=u, amount=Decimal(amount)) for u in user_ids]


class TestRegisterUser:
    """Tests for the register_user tool."""

    def test_registers(self):
        assert register_user("A", "Alice") == "Registered Alice (id: A)"
        assert "A: Alice" in list_users()

    def test_duplicate_returns_error(self):
        register_user("A", "Alice")

        result = register_user("A", "Alice")

        assert result.startswith("Error:")
        assert "already exists" in result

    def test_empty_name_returns_error(self):
        assert register_user("A", "").startswith("Error:")
        assert list_users() == "No users registered."


class TestRecordExpense:
    """Tests for the record_expense tool."""

    def test_records(self, three_users):
        result = record_expense(
            paid_by="A",
            total_amount=Decimal("90"),
            splits=even_split("A", "B", "C", amount="30"),
            description="Dinner",
            expense_id="dinner",
        )

        assert result.startswith("Recorded expense dinner: Dinner")
        assert "$90.00 paid by A" in result
        assert "[dinner] Dinner" in list_expenses()

    def test_unknown_user_returns_error(self, three_users):
        result = record_expense(
            paid_by="Z",
            total_amount=Decimal("10"),
            splits=even_split("A", amount="10"),
        )

        assert result == "Error: Payer Z does not exist"
        assert list_expenses() == "No expenses recorded."

    def test_amount_mismatch_returns_error(self, three_users):
        result = record_expense(
            paid_by="A",
            total_amount=Decimal("100"),
            splits=even_split("A", "B", amount="49"),
        )

        assert result.startswith("Error: Total amount 100 does not match")


class TestQueries:
    """Tests for get_balances and settle_up."""

    def test_balances_and_settlement(self, three_users):
        record_expense(
            paid_by="A",
            total_amount=Decimal("90"),
            splits=even_split("A", "B", "C", amount="30"),
        )

        balances = get_balances()
        plan = settle_up()

        assert "Alice (A): $60.00" in balances
        assert "Bob (B): ($30.00)" in balances
        assert "Settle Up (2 payments):" in plan
        assert "B pays A $30.00" in plan
        assert "C pays A $30.00" in plan

    def test_nothing_to_settle(self, three_users):
        assert settle_up() == "All settled up, no payments needed."

    def test_no_users(self):
        assert get_balances() == "No users registered."


class TestLoadLedger:
    """Tests for the load_ledger tool."""

    def test_loads_file(self, tmp_path):
        path = tmp_path / "ledger.json"
        path.write_text(
            json.dumps(
                {
                    "users": [{"id": "A", "name": "Alice"}, {"id": "B", "name": "Bob"}],
                    "expenses": [
                        {
                            "total_amount": "20",
                            "paid_by": "A",
                            "splits": [{"user_id": "B", "amount": "20"}],
                        }
                    ],
                }
            )
        )

        result = load_ledger(str(path))

        assert result == f"Loaded 2 users and 1 expenses from {path}"
        assert "B pays A $20.00" in settle_up()

    def test_missing_file_returns_error(self, tmp_path):
        result = load_ledger(str(tmp_path / "missing.json"))

        assert result.startswith("Error: Cannot read ledger file")
