import logging

from advisor.domain import EXPENSE_FIELDS, BudgetMetrics, BudgetRecord

logger = logging.getLogger(__name__)


def total_expenses(record: BudgetRecord) -> float:
    return sum(getattr(record, name) for name in EXPENSE_FIELDS)


def compute_metrics(record: BudgetRecord) -> BudgetMetrics:
    """Derive totals and ratios from a budget record.

    Ratios are 0 when income is not positive, so nothing divides by zero.
    """
    total = total_expenses(record)
    remaining = record.income - total
    if record.income > 0:
        savings_rate = remaining / record.income * 100
        housing_ratio = record.housing / record.income
    else:
        savings_rate = 0
        housing_ratio = 0

    metrics = BudgetMetrics(
        income=record.income,
        total_expenses=total,
        remaining_budget=remaining,
        savings_rate=savings_rate,
        housing_ratio=housing_ratio,
    )
    logger.debug("computed %s", metrics)
    return metrics


class BudgetAggregator:

    def compute(self, record: BudgetRecord) -> BudgetMetrics:
        return compute_metrics(record)
