from itertools import islice

from advisor.breakdown import iter_expense_categories, top_expense_categories
from advisor.domain import BudgetRecord


def make_record():
    return BudgetRecord(income=3000, housing=1000, food=400, transportation=0,
                        entertainment=200, utilities=150, other=0)


def test_skips_zero_categories_in_display_order():
    result = list(iter_expense_categories(make_record()))
    assert result == [("Housing", 1000), ("Food", 400), ("Entertainment", 200), ("Utilities", 150)]


def test_income_is_not_an_expense():
    assert list(iter_expense_categories(BudgetRecord(income=500))) == []


def test_is_lazy():
    gen = iter_expense_categories(make_record())
    assert list(islice(gen, 1)) == [("Housing", 1000)]


def test_top_expense_categories():
    record = BudgetRecord(income=0, housing=100, food=900, other=300)
    assert list(top_expense_categories(record, 2)) == [("Food", 900), ("Other", 300)]
    assert len(list(top_expense_categories(record, 10))) == 3
    assert list(top_expense_categories(record, -1)) == []
