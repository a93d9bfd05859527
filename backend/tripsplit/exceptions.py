"""Domain errors raised by the ledger services."""


class UnknownMemberError(ValueError):
    """An expense references a member id that is not in the ledger."""

    def __init__(self, expense_id: str, member_id: str):
        self.expense_id = expense_id
        self.member_id = member_id
        super().__init__(f"Expense {expense_id!r} references unknown member {member_id!r}")
