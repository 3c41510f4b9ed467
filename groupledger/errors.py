# groupledger/errors.py


class GroupLedgerError(Exception):
    """Base exception for groupledger errors."""
    pass


class PayloadError(GroupLedgerError):
    """Raised when a request body can't be turned into expenses, members or balances."""
    pass


class UnknownMemberError(PayloadError):
    """Raised in strict mode when expenses reference users outside the group."""

    def __init__(self, user_ids):
        self.user_ids = list(user_ids)
        super().__init__("Expenses reference users who are not group members: " + ", ".join(self.user_ids))
