# groupledger/models.py
from dataclasses import dataclass


class Member:
    def __init__(self, user_id, user_name):
        self.user_id = user_id
        self.user_name = user_name

    def __repr__(self):
        return f"Member({self.user_id!r}, {self.user_name!r})"


class ExpenseParticipant:
    def __init__(self, user_id, amount):
        self.user_id = user_id
        self.amount = float(amount)

    def __repr__(self):
        return f"ExpenseParticipant({self.user_id!r}, {self.amount!r})"

    def to_dict(self):
        return {"userId": self.user_id, "amount": self.amount}


class Expense:
    """One logged expense. `participants` hold the final per-person shares."""

    def __init__(self, amount, paid_by, participants, is_settlement=False):
        self.amount = float(amount)
        self.paid_by = paid_by
        self.participants = list(participants)
        self.is_settlement = bool(is_settlement)

    def __repr__(self):
        return (
            f"Expense(amount={self.amount!r}, paid_by={self.paid_by!r}, "
            f"participants={self.participants!r}, is_settlement={self.is_settlement!r})"
        )

    def to_dict(self):
        return {
            "amount": self.amount,
            "paidBy": self.paid_by,
            "participants": [p.to_dict() for p in self.participants],
            "isSettlement": self.is_settlement,
        }


@dataclass(frozen=True)
class SimplifiedDebt:
    from_user: str
    from_name: str
    to_user: str
    to_name: str
    amount: float

    def to_dict(self):
        return {
            "from": self.from_user,
            "fromName": self.from_name,
            "to": self.to_user,
            "toName": self.to_name,
            "amount": self.amount,
        }
