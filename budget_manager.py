"""
Budget Manager for SweetLogic
Handles the income and expense ledger
"""
import config
from notifier import ChangeNotifier

COLLECTION = 'expenses'


def parse_amount(value):
    """Read an amount typed by the user; invalid or empty text counts as zero"""
    try:
        amount = float(str(value).strip().replace(',', ''))
    except (TypeError, ValueError):
        return 0.0
    # nan/inf parse as floats but are not amounts
    if amount != amount or amount in (float('inf'), float('-inf')):
        return 0.0
    return amount


def format_amount(cost):
    """Format a signed cost for display, e.g. -$4.50 or +$100.00"""
    sign = "-" if cost < 0 else "+"
    return f"{sign}{config.CURRENCY_SYMBOL}{abs(cost):.2f}"


class BudgetManager(ChangeNotifier):
    def __init__(self, db):
        super().__init__()
        self.db = db

    def add(self, name, magnitude, is_expense=True):
        """Record an expense (stored negative) or income (stored positive)"""
        if name is not None and not isinstance(name, str):
            raise ValueError("Name must be text")
        name = (name or "").strip()
        if not name:
            raise ValueError("Please enter a name")

        amount = abs(parse_amount(magnitude))
        cost = -amount if is_expense else amount
        record = self.db.insert(COLLECTION, {'name': name, 'cost': cost})
        self.notify()
        return record

    def add_expense(self, name, magnitude):
        return self.add(name, magnitude, is_expense=True)

    def add_income(self, name, magnitude):
        return self.add(name, magnitude, is_expense=False)

    def delete_one(self, expense_id):
        """Delete a single transaction"""
        deleted = self.db.delete(COLLECTION, expense_id)
        if deleted:
            self.notify()
        return deleted

    def delete_all(self):
        """Delete every transaction in the ledger"""
        count = self.db.delete_all(COLLECTION)
        self.notify()
        return count

    def list_expenses(self):
        """All transactions, newest first"""
        return self.db.list_all(COLLECTION)

    def get(self, expense_id):
        return self.db.get(COLLECTION, expense_id)

    def total(self):
        """Current balance: the sum of every signed cost"""
        return sum(expense['cost'] for expense in self.list_expenses())

    def summary(self):
        """Balance plus income and expense totals"""
        expenses = self.list_expenses()
        income = sum(e['cost'] for e in expenses if e['cost'] >= 0)
        spent = sum(-e['cost'] for e in expenses if e['cost'] < 0)

        return {
            'balance': income - spent,
            'income': income,
            'expenses': spent,
            'count': len(expenses)
        }

    def running_balance(self):
        """(name, balance after that entry) pairs, oldest first"""
        balance = 0
        points = []
        for expense in reversed(self.list_expenses()):
            balance += expense['cost']
            points.append((expense['name'], balance))
        return points

    def format_expense(self, expense):
        """Format one ledger row for display"""
        return f"{expense['name']}: {format_amount(expense['cost'])}"
