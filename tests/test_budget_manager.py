"""
Tests for the budget ledger
"""
import pytest

from budget_manager import parse_amount, format_amount


def test_expense_then_income_totals(budget):
    budget.add("Coffee", 4.5, is_expense=True)
    assert budget.total() == pytest.approx(-4.5)
    budget.add("Paycheck", 100, is_expense=False)
    assert budget.total() == pytest.approx(95.5)


def test_sign_follows_type_not_input(budget):
    assert budget.add("Refund", -20, is_expense=False)['cost'] == 20
    assert budget.add("Milk", "-3.25", is_expense=True)['cost'] == -3.25


def test_invalid_amount_counts_as_zero(budget):
    record = budget.add("Mystery", "abc")
    assert record['cost'] == 0
    assert budget.total() == 0


def test_blank_name_rejected(budget):
    with pytest.raises(ValueError):
        budget.add("   ", 5)
    assert budget.list_expenses() == []


def test_non_text_name_rejected(budget):
    with pytest.raises(ValueError):
        budget.add(5, 3)
    with pytest.raises(ValueError):
        budget.add_income(["Paycheck"], 100)
    assert budget.list_expenses() == []


def test_list_is_newest_first(budget):
    budget.add_expense("Sugar", 2)
    budget.add_income("Sale", 10)
    assert [e['name'] for e in budget.list_expenses()] == ["Sale", "Sugar"]


def test_delete_one(budget):
    keep = budget.add_expense("Cream", 6)
    drop = budget.add_expense("Cones", 3)
    assert budget.delete_one(drop['id']) is True
    assert budget.delete_one(drop['id']) is False
    assert [e['id'] for e in budget.list_expenses()] == [keep['id']]
    assert budget.total() == -6


def test_delete_all(budget):
    budget.add_expense("a", 1)
    budget.add_income("b", 2)
    assert budget.delete_all() == 2
    assert budget.total() == 0


def test_summary(budget):
    budget.add_expense("Cream", 6)
    budget.add_income("Sale", 10)
    budget.add_expense("Cones", 1.5)
    summary = budget.summary()
    assert summary['income'] == 10
    assert summary['expenses'] == pytest.approx(7.5)
    assert summary['balance'] == pytest.approx(2.5)
    assert summary['count'] == 3


def test_running_balance_oldest_first(budget):
    budget.add_income("Sale", 10)
    budget.add_expense("Cream", 4)
    assert budget.running_balance() == [("Sale", 10), ("Cream", 6)]


def test_listeners_notified_on_mutation(budget):
    calls = []
    budget.subscribe(lambda: calls.append(budget.total()))
    record = budget.add_expense("Cream", 6)
    budget.delete_one(record['id'])
    budget.delete_all()
    assert calls == [-6, 0, 0]


def test_unsubscribe(budget):
    calls = []
    listener = budget.subscribe(lambda: calls.append(1))
    budget.unsubscribe(listener)
    budget.add_expense("Cream", 6)
    assert calls == []


def test_parse_amount():
    assert parse_amount("4.50") == 4.5
    assert parse_amount(" 1,200 ") == 1200
    assert parse_amount("") == 0
    assert parse_amount(None) == 0
    assert parse_amount("nan") == 0
    assert parse_amount(7) == 7


def test_format_amount():
    assert format_amount(-4.5) == "-$4.50"
    assert format_amount(100) == "+$100.00"
    assert format_amount(0) == "+$0.00"
