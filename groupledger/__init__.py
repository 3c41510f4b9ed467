from .models import Expense, ExpenseParticipant, Member, SimplifiedDebt
from .settlement import (
    build_participants,
    calculate_net_balances,
    find_unknown_users,
    get_settlement_suggestions,
    get_user_balance,
    settlement_expense,
    simplify_debts,
)

__all__ = [
    "build_participants",
    "Expense",
    "ExpenseParticipant",
    "Member",
    "SimplifiedDebt",
    "calculate_net_balances",
    "find_unknown_users",
    "get_settlement_suggestions",
    "get_user_balance",
    "settlement_expense",
    "simplify_debts",
]
