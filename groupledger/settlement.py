# groupledger/settlement.py
import logging

from .models import Expense, ExpenseParticipant, SimplifiedDebt
from .money import EPSILON, round_cents

logger = logging.getLogger(__name__)

SPLIT_TYPES = ("equal", "custom", "one_owes_all")


def build_participants(split_type, amount, participant_ids, paid_by, custom_amounts=None):
    """Per-person shares for an expense of `amount`.

    equal: everyone in `participant_ids` pays amount / n, rounded to cents.
    custom: shares come from `custom_amounts`, 0 for anyone missing.
    one_owes_all: like equal, but the payer is left out.
    """
    if split_type not in SPLIT_TYPES:
        raise ValueError(f"Unknown split type: {split_type!r}")

    if split_type == "custom":
        custom_amounts = custom_amounts or {}
        return [ExpenseParticipant(uid, custom_amounts.get(uid, 0.0)) for uid in participant_ids]

    if split_type == "one_owes_all":
        participant_ids = [uid for uid in participant_ids if uid != paid_by]

    if not participant_ids:
        return []
    share = round_cents(amount / len(participant_ids))
    return [ExpenseParticipant(uid, share) for uid in participant_ids]


def calculate_net_balances(expenses, members):
    """Net balance per user. Positive = owed money, negative = owes money.

    Every member starts at 0 so callers never have to handle missing keys.
    Users that show up in expenses but not in `members` are accumulated
    like anyone else.
    """
    balances = {member.user_id: 0.0 for member in members}
    unknown = set()

    for expense in expenses:
        payer = expense.paid_by
        total_participant_amount = sum(p.amount for p in expense.participants)

        # Payer is owed whatever the participants' shares add up to
        if payer not in balances:
            balances[payer] = 0.0
            unknown.add(payer)
        balances[payer] += total_participant_amount

        for participant in expense.participants:
            if participant.user_id not in balances:
                balances[participant.user_id] = 0.0
                unknown.add(participant.user_id)
            balances[participant.user_id] -= participant.amount

    if unknown:
        logger.warning("Expenses reference non-members: %s", ", ".join(sorted(unknown)))
    logger.debug("Computed balances for %d users from %d expenses", len(balances), len(expenses))
    return balances


def get_user_balance(expenses, members, user_id):
    return calculate_net_balances(expenses, members).get(user_id, 0.0)


def find_unknown_users(expenses, members):
    known = {member.user_id for member in members}
    unknown = set()
    for expense in expenses:
        if expense.paid_by not in known:
            unknown.add(expense.paid_by)
        for participant in expense.participants:
            if participant.user_id not in known:
                unknown.add(participant.user_id)
    return sorted(unknown)


def simplify_debts(balances, names=None):
    """Greedy settlement: largest debtor pays largest creditor until one side runs out.

    Balances within one cent of zero are treated as settled. Equal amounts
    are ordered by user id so the same input always gives the same plan.
    """
    names = names or {}

    # 1. Separate Debtors and Creditors
    debtors = []
    creditors = []

    for person, amount in balances.items():
        # NaN fails both tests and is dropped with the settled balances
        if amount > EPSILON:
            creditors.append({'person': person, 'amount': amount})
        elif amount < -EPSILON:
            debtors.append({'person': person, 'amount': -amount})

    creditors.sort(key=lambda x: (-x['amount'], x['person']))
    debtors.sort(key=lambda x: (-x['amount'], x['person']))

    # 2. Match them up
    debts = []
    i = 0
    j = 0

    while i < len(debtors) and j < len(creditors):
        debtor = debtors[i]
        creditor = creditors[j]

        settle_amount = min(debtor['amount'], creditor['amount'])
        if settle_amount > EPSILON:
            debts.append(SimplifiedDebt(
                from_user=debtor['person'],
                from_name=names.get(debtor['person']) or debtor['person'],
                to_user=creditor['person'],
                to_name=names.get(creditor['person']) or creditor['person'],
                amount=round_cents(settle_amount),
            ))

        debtor['amount'] -= settle_amount
        creditor['amount'] -= settle_amount

        if debtor['amount'] < EPSILON: i += 1
        if creditor['amount'] < EPSILON: j += 1

    logger.debug("Simplified %d debtors and %d creditors into %d payments",
                 len(debtors), len(creditors), len(debts))
    return debts


def get_settlement_suggestions(expenses, members):
    balances = calculate_net_balances(expenses, members)
    names = {member.user_id: member.user_name for member in members}
    return simplify_debts(balances, names)


def settlement_expense(debt):
    """The settlement expense that records `debt` as paid."""
    return Expense(
        amount=debt.amount,
        paid_by=debt.from_user,
        participants=[
            ExpenseParticipant(debt.from_user, 0),
            ExpenseParticipant(debt.to_user, debt.amount),
        ],
        is_settlement=True,
    )
