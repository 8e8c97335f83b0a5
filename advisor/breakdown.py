from typing import Iterator, Tuple

from advisor.domain import EXPENSE_FIELDS, BudgetRecord

LABELS = {
    "housing": "Housing",
    "food": "Food",
    "transportation": "Transportation",
    "entertainment": "Entertainment",
    "utilities": "Utilities",
    "other": "Other",
}


def iter_expense_categories(record: BudgetRecord) -> Iterator[Tuple[str, float]]:
    for name in EXPENSE_FIELDS:
        amount = getattr(record, name)
        if amount > 0:
            yield LABELS[name], amount


def top_expense_categories(record: BudgetRecord, k: int) -> Iterator[Tuple[str, float]]:
    ordered = sorted(iter_expense_categories(record), key=lambda item: item[1], reverse=True)
    for label, amount in ordered[: max(0, k)]:
        yield label, amount
