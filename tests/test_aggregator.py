from advisor.aggregator import BudgetAggregator, compute_metrics
from advisor.domain import BudgetRecord


def make_record(**amounts):
    return BudgetRecord(**amounts)


def test_total_expenses_is_sum_of_categories():
    record = make_record(income=5000, housing=1200, food=400, transportation=150,
                         entertainment=90, utilities=110, other=50)
    metrics = compute_metrics(record)
    assert metrics.total_expenses == 1200 + 400 + 150 + 90 + 110 + 50
    assert metrics.remaining_budget == 5000 - 2000


def test_income_excluded_from_total():
    metrics = compute_metrics(make_record(income=1000))
    assert metrics.total_expenses == 0
    assert metrics.remaining_budget == 1000
    assert metrics.savings_rate == 100


def test_savings_rate_and_housing_ratio():
    record = make_record(income=2000, housing=600, food=400)
    metrics = compute_metrics(record)
    assert metrics.total_expenses == 1000
    assert metrics.remaining_budget == 1000
    assert metrics.savings_rate == 50
    assert metrics.housing_ratio == 0.3


def test_zero_income_has_no_ratios():
    metrics = compute_metrics(make_record(income=0, housing=500, food=100))
    assert metrics.savings_rate == 0
    assert metrics.housing_ratio == 0
    assert metrics.remaining_budget == -600


def test_negative_income_has_no_ratios():
    metrics = compute_metrics(make_record(income=-100, housing=50))
    assert metrics.savings_rate == 0
    assert metrics.housing_ratio == 0


def test_overspending_gives_negative_savings_rate():
    metrics = compute_metrics(make_record(income=1000, housing=800, food=400))
    assert metrics.remaining_budget == -200
    assert metrics.savings_rate == -20


def test_compute_is_idempotent():
    record = make_record(income=3000, housing=1000, food=250.5)
    aggregator = BudgetAggregator()
    assert aggregator.compute(record) == aggregator.compute(record)


def test_compute_recomputes_for_each_record():
    aggregator = BudgetAggregator()
    first = aggregator.compute(make_record(income=1000, housing=100))
    second = aggregator.compute(make_record(income=1000, housing=700))
    assert first.total_expenses == 100
    assert second.total_expenses == 700
