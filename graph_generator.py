"""
Graph Generator for SweetLogic
Creates visualizations for the budget ledger
"""
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
import config


class GraphGenerator:
    def __init__(self, budget_manager):
        self.bm = budget_manager
        try:
            plt.style.use('seaborn-v0_8-darkgrid')
        except OSError:
            plt.style.use('ggplot')

    def _create_fig(self, figsize=None):
        """Internal helper to create a figure with optional custom size"""
        if figsize is None:
            figsize = config.GRAPH_FIGSIZE
        return Figure(figsize=figsize, dpi=config.GRAPH_DPI)

    def _empty_fig(self, figsize=None):
        fig = self._create_fig(figsize)
        ax = fig.add_subplot(111)
        ax.text(0.5, 0.5, 'No data available', ha='center', va='center', fontsize=14)
        ax.axis('off')
        return fig

    def create_balance_graph(self, figsize=None):
        """Running balance after each transaction, oldest to newest"""
        points = self.bm.running_balance()
        if not points:
            return self._empty_fig(figsize)

        names = [name for name, _ in points]
        balances = [balance for _, balance in points]

        fig = self._create_fig(figsize)
        ax = fig.add_subplot(111)

        x = range(len(points))
        ax.plot(x, balances, marker='o', color='#0A6E40', linewidth=2)
        ax.fill_between(x, balances, 0, where=[b >= 0 for b in balances],
                        color='#1E9E4F', alpha=0.15, interpolate=True)
        ax.fill_between(x, balances, 0, where=[b < 0 for b in balances],
                        color='#C0392B', alpha=0.15, interpolate=True)
        ax.axhline(y=0, color='black', linestyle='-', linewidth=0.5)

        ax.set_xlabel('Transaction')
        ax.set_ylabel(f'Balance ({config.CURRENCY_SYMBOL})')
        ax.set_title('Running Balance')
        ax.set_xticks(list(x))
        ax.set_xticklabels(names, rotation=45, ha='right')
        ax.grid(True, alpha=0.3)

        fig.tight_layout()
        return fig

    def create_breakdown_graph(self, figsize=None):
        """Income vs expenses bar chart"""
        summary = self.bm.summary()
        if summary['count'] == 0:
            return self._empty_fig(figsize)

        fig = self._create_fig(figsize)
        ax = fig.add_subplot(111)

        labels = ['Income', 'Expenses']
        values = [summary['income'], summary['expenses']]
        bars = ax.bar(labels, values, color=['#1E9E4F', '#C0392B'], alpha=0.8)

        for bar in bars:
            height = bar.get_height()
            ax.text(bar.get_x() + bar.get_width() / 2., height,
                    f'{config.CURRENCY_SYMBOL}{height:.2f}',
                    ha='center', va='bottom', fontsize=10)

        ax.set_ylabel(f'Amount ({config.CURRENCY_SYMBOL})')
        ax.set_title('Income vs Expenses')
        ax.grid(True, alpha=0.3, axis='y')

        fig.tight_layout()
        return fig
