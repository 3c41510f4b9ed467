# groupledger/payloads.py
# Converts JSON request bodies into our Python objects.
import math

from .errors import PayloadError
from .models import Expense, ExpenseParticipant, Member, SimplifiedDebt
from .settlement import SPLIT_TYPES, build_participants


def _require(item, key, where):
    if not isinstance(item, dict):
        raise PayloadError(f"{where} must be an object")
    if key not in item:
        raise PayloadError(f"{where} is missing '{key}'")
    return item[key]


def _user_id(value, where):
    if not isinstance(value, str) or not value:
        raise PayloadError(f"{where} must be a non-empty string")
    return value


def _name(value, fallback, where):
    if not value:
        return fallback
    if not isinstance(value, str):
        raise PayloadError(f"{where} must be a string")
    return value


def _number(value, where):
    # bool is an int subclass, but true/false is never a valid amount
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PayloadError(f"{where} must be a number")
    try:
        value = float(value)
    except OverflowError:
        raise PayloadError(f"{where} must be finite") from None
    if not math.isfinite(value):
        raise PayloadError(f"{where} must be finite")
    return value


def _list(value, where):
    if not isinstance(value, list):
        raise PayloadError(f"{where} must be a list")
    return value


def parse_member(item, where="member"):
    user_id = _user_id(_require(item, "userId", where), f"{where}.userId")
    user_name = _name(item.get("userName"), user_id, f"{where}.userName")
    return Member(user_id, user_name)


def parse_participant(item, where="participant"):
    user_id = _user_id(_require(item, "userId", where), f"{where}.userId")
    amount = _number(_require(item, "amount", where), f"{where}.amount")
    return ExpenseParticipant(user_id, amount)


def _split_participants(item, amount, paid_by, where):
    """Shares for a body that names a splitType and participantIds instead of shares."""
    split_type = item["splitType"]
    if split_type not in SPLIT_TYPES:
        raise PayloadError(f"{where}.splitType must be one of: {', '.join(SPLIT_TYPES)}")
    participant_ids = [
        _user_id(uid, f"{where}.participantIds[{i}]")
        for i, uid in enumerate(_list(_require(item, "participantIds", where), f"{where}.participantIds"))
    ]

    custom_amounts = item.get("customAmounts") or {}
    if not isinstance(custom_amounts, dict):
        raise PayloadError(f"{where}.customAmounts must be an object")
    custom_amounts = {
        uid: _number(value, f"{where}.customAmounts.{uid}") for uid, value in custom_amounts.items()
    }
    return build_participants(split_type, amount, participant_ids, paid_by, custom_amounts)


def parse_expense(item, where="expense"):
    amount = _number(_require(item, "amount", where), f"{where}.amount")
    paid_by = _user_id(_require(item, "paidBy", where), f"{where}.paidBy")
    if "participants" not in item and "splitType" in item:
        participants = _split_participants(item, amount, paid_by, where)
    else:
        participants = [
            parse_participant(p, f"{where}.participants[{i}]")
            for i, p in enumerate(_list(_require(item, "participants", where), f"{where}.participants"))
        ]
    is_settlement = item.get("isSettlement", False)
    if not isinstance(is_settlement, bool):
        raise PayloadError(f"{where}.isSettlement must be a boolean")
    return Expense(amount, paid_by, participants, is_settlement)


def parse_group(data):
    """Returns (expenses, members) from a {"expenses": [...], "members": [...]} body."""
    if not isinstance(data, dict):
        raise PayloadError("Request body must be a JSON object")
    expenses = [
        parse_expense(e, f"expenses[{i}]")
        for i, e in enumerate(_list(data.get("expenses", []), "expenses"))
    ]
    members = [
        parse_member(m, f"members[{i}]")
        for i, m in enumerate(_list(data.get("members", []), "members"))
    ]
    return expenses, members


def parse_balances(data):
    """Returns (balances, names) from a {"balances": {...}, "names": {...}} body."""
    if not isinstance(data, dict):
        raise PayloadError("Request body must be a JSON object")
    raw = _require(data, "balances", "body")
    if not isinstance(raw, dict):
        raise PayloadError("balances must be an object")
    balances = {user_id: _number(value, f"balances.{user_id}") for user_id, value in raw.items()}

    names = data.get("names") or {}
    if not isinstance(names, dict) or not all(isinstance(v, str) for v in names.values()):
        raise PayloadError("names must be an object of strings")
    return balances, names


def parse_debt(data):
    where = "debt"
    from_user = _user_id(_require(data, "from", where), "debt.from")
    to_user = _user_id(_require(data, "to", where), "debt.to")
    amount = _number(_require(data, "amount", where), "debt.amount")
    if amount <= 0:
        raise PayloadError("debt.amount must be positive")
    if from_user == to_user:
        raise PayloadError("debt.from and debt.to must differ")
    return SimplifiedDebt(
        from_user=from_user,
        from_name=_name(data.get("fromName"), from_user, "debt.fromName"),
        to_user=to_user,
        to_name=_name(data.get("toName"), to_user, "debt.toName"),
        amount=amount,
    )
