"""
Tests for the budget charts
"""
from graph_generator import GraphGenerator


def test_empty_ledger_shows_placeholder(budget):
    graphs = GraphGenerator(budget)
    for fig in (graphs.create_balance_graph(), graphs.create_breakdown_graph()):
        ax = fig.axes[0]
        assert [t.get_text() for t in ax.texts] == ['No data available']


def test_balance_graph_follows_ledger(budget):
    budget.add_income("Sale", 10)
    budget.add_expense("Cream", 4)
    fig = GraphGenerator(budget).create_balance_graph()
    ax = fig.axes[0]
    assert ax.get_title() == 'Running Balance'
    assert list(ax.lines[0].get_ydata()) == [10, 6]


def test_breakdown_graph_bars(budget):
    budget.add_income("Sale", 10)
    budget.add_expense("Cream", 4)
    fig = GraphGenerator(budget).create_breakdown_graph()
    ax = fig.axes[0]
    assert ax.get_title() == 'Income vs Expenses'
    assert [p.get_height() for p in ax.patches] == [10, 4]
