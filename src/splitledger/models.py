"""Pydantic domain models for SplitLedger."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

# ============================================================================
# Ledger Models
# ============================================================================


class User(BaseModel):
    """A participant in the ledger."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str


class Split(BaseModel):
    """How much a specific user owes for one expense."""

    model_config = ConfigDict(frozen=True)

    user_id: str
    amount: Decimal


class Expense(BaseModel):
    """A shared cost paid by one user and split across participants."""

    model_config = ConfigDict(frozen=True)

    id: str = ""  # assigned by the service when left empty
    description: str = ""
    total_amount: Decimal
    paid_by: str  # User ID of who paid
    splits: tuple[Split, ...] = ()

    @property
    def split_total(self) -> Decimal:
        """Sum of all split amounts."""
        return sum((split.amount for split in self.splits), Decimal("0"))


# ============================================================================
# Derived Models
# ============================================================================


class UserBalance(BaseModel):
    """Net position of a user.

    Positive means the user is owed money, negative means they owe.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    user_id: str
    name: str
    amount: Decimal = Field(alias="balance")


class Settlement(BaseModel):
    """A suggested payment that clears part of a debt."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_user: str = Field(alias="from")  # User who pays
    to_user: str = Field(alias="to")  # User who receives
    amount: Decimal


class LedgerSnapshot(BaseModel):
    """A consistent copy of the ledger taken under a single read lock."""

    model_config = ConfigDict(frozen=True)

    users: tuple[User, ...] = ()
    expenses: tuple[Expense, ...] = ()


# ============================================================================
# Import Models
# ============================================================================


class LedgerFile(BaseModel):
    """A JSON ledger document: users first, then expenses in order."""

    users: list[User] = Field(default_factory=list)
    expenses: list[Expense] = Field(default_factory=list)
