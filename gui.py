"""
GUI for SweetLogic
Tkinter interface: a home menu routing to the Recipes, Calculator and Budget tools
"""
import tkinter as tk
from tkinter import ttk
from datetime import date
import json
import webbrowser
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
import config
import calculator as calc_keys
from calculator import Calculator
from database import Database
from budget_manager import BudgetManager, format_amount
from recipe_manager import RecipeManager, format_last_made
from graph_generator import GraphGenerator
from navigation import Navigator


class SweetLogicGUI:
    def __init__(self, root, db=None):
        self.root = root
        self.root.title(config.APP_NAME)
        self.root.geometry(f"{config.WINDOW_WIDTH}x{config.WINDOW_HEIGHT}")

        # Initialize components
        self.db = db if db is not None else Database()
        self.budget_manager = BudgetManager(self.db)
        self.recipe_manager = RecipeManager(self.db)
        self.graph_generator = GraphGenerator(self.budget_manager)

        # ── Theme state (load before any widget is created) ───────────────
        settings = self._load_settings()
        self.dark_mode: bool = settings.get("dark_mode", False)
        self.T: dict = config.get_theme(self.dark_mode)
        self._apply_ttk_styles()
        self.root.configure(bg=self.T["bg"])

        self.navigator = Navigator(on_home=self.show_home)
        self.navigator.register("Recipes", lambda dismiss: RecipesView(
            self, self.content_frame, self.recipe_manager, dismiss))
        self.navigator.register("Calculator", lambda dismiss: CalculatorView(
            self, self.content_frame, Calculator(), dismiss))
        self.navigator.register("Budget", lambda dismiss: BudgetView(
            self, self.content_frame, self.budget_manager, self.graph_generator, dismiss))

        # Create UI
        self.create_widgets()
        self.show_home()

    # ── Settings persistence ─────────────────────────────────────────────
    def _load_settings(self):
        try:
            with open(config.SETTINGS_FILE, "r") as f:
                return json.load(f)
        except (OSError, ValueError):
            return {}

    def _save_settings(self, data):
        existing = self._load_settings()
        existing.update(data)
        with open(config.SETTINGS_FILE, "w") as f:
            json.dump(existing, f, indent=2)

    # ── Theme helpers ──────────────────────────────────────────────────────────
    def _apply_ttk_styles(self):
        """Configure ttk widget styles for the active palette."""
        T = self.T
        style = ttk.Style()
        try:
            style.theme_use("clam")
        except tk.TclError:
            pass
        style.configure("Treeview",         background=T["tree_even"],
                        fieldbackground=T["tree_even"], foreground=T["tree_fg"],
                        rowheight=26, font=config.LABEL_FONT)
        style.configure("Treeview.Heading", background=T["bg_dark"],
                        foreground=T["accent"],
                        font=(config.LABEL_FONT[0], config.LABEL_FONT[1], "bold"))
        style.map("Treeview",
                  background=[("selected", T["accent"])],
                  foreground=[("selected", "#FFFFFF")])
        style.configure("Vertical.TScrollbar",
                        background=T["shadow_dark"], troughcolor=T["bg"],
                        borderwidth=0, relief="flat", width=10, arrowsize=0)

    def apply_theme(self):
        """Refresh T, re-style ttk, then rebuild the window on the current page."""
        self.T = config.get_theme(self.dark_mode)
        self._apply_ttk_styles()
        self.root.configure(bg=self.T["bg"])
        current = self.navigator.current
        if self.navigator.current_view is not None:
            self.navigator.current_view.close()
            self.navigator.current_view = None
        for w in self.root.winfo_children():
            w.destroy()
        self.create_widgets()
        if current:
            self.navigator.open(current)
        else:
            self.show_home()

    def _toggle_dark_mode(self):
        """Persist dark_mode setting and apply theme immediately."""
        self.dark_mode = not self.dark_mode
        self._save_settings({"dark_mode": self.dark_mode})
        self.apply_theme()

    def button(self, parent, text, command=None, kind="normal", **kw):
        """Create a flat styled button."""
        T = self.T
        if kind == "operator":
            bg, fg = T["operator_bg"], T["operator_fg"]
        elif kind == "control":
            bg, fg = T["control_bg"], T["control_fg"]
        elif kind == "primary":
            bg, fg = T["accent"], "#FFFFFF"
        elif kind == "danger":
            bg, fg = T["danger"], "#FFFFFF"
        else:
            bg, fg = T["btn_bg"], T["btn_fg"]
        return tk.Button(
            parent, text=text, command=command,
            font=kw.pop("font", config.BUTTON_FONT),
            bg=bg, fg=fg,
            activebackground=T["shadow_dark"], activeforeground=fg,
            relief=tk.FLAT, bd=0, cursor="hand2",
            highlightthickness=1,
            highlightbackground=T["shadow_dark"],
            **kw
        )

    def entry(self, parent, var, width=28):
        T = self.T
        return tk.Entry(parent, textvariable=var, font=config.LABEL_FONT, width=width,
                        bg=T["entry_bg"], fg=T["entry_fg"],
                        insertbackground=T["text"], relief=tk.FLAT,
                        highlightthickness=1, highlightbackground=T["shadow_dark"])

    def header(self, parent, title, on_back):
        """Lab name over a page title, with a back button; returns the right-hand action frame"""
        T = self.T
        bar = tk.Frame(parent, bg=T["bg"])
        bar.pack(fill=tk.X, padx=20, pady=(12, 6))
        self.button(bar, "←", command=on_back, font=(config.BUTTON_FONT[0], 12),
                    width=3).pack(side=tk.LEFT, padx=(0, 12))
        titles = tk.Frame(bar, bg=T["bg"])
        titles.pack(side=tk.LEFT)
        tk.Label(titles, text=config.LAB_NAME, font=(config.LABEL_FONT[0], 9, "bold"),
                 bg=T["bg"], fg=T["subtext"]).pack(anchor=tk.W)
        tk.Label(titles, text=title, font=config.TITLE_FONT,
                 bg=T["bg"], fg=T["text"]).pack(anchor=tk.W)
        actions = tk.Frame(bar, bg=T["bg"])
        actions.pack(side=tk.RIGHT, anchor=tk.S)
        tk.Frame(parent, bg=T["shadow_dark"], height=1).pack(fill=tk.X, padx=20)
        return actions

    # ── Inline toast / confirm ────────────────────────────────────────────
    def show_toast(self, msg, kind="success", duration=2500, parent=None):
        """Show an inline toast banner at the top of the window.
        kind: 'success' | 'error'
        parent: window to draw on; pass the dialog when it holds the grab
        """
        T = self.T
        bg = T["success"] if kind == "success" else T["danger"]
        icon = "✓" if kind == "success" else "✗"
        toast = tk.Frame(parent or self.root, bg=bg)
        toast.place(relx=0.05, y=55, relwidth=0.9, height=42)
        toast.lift()
        tk.Label(toast, text=f"  {icon}  {msg}",
                 font=(config.BUTTON_FONT[0], 10, "bold"),
                 bg=bg, fg="#FFFFFF", anchor="w").pack(side=tk.LEFT, fill=tk.X, expand=True)
        tk.Button(toast, text="✕", font=(config.BUTTON_FONT[0], 9),
                  bg=bg, fg="#FFFFFF", relief=tk.FLAT, bd=0,
                  command=toast.destroy, cursor="hand2",
                  activebackground=bg).pack(side=tk.RIGHT, padx=4)
        self.root.after(duration, lambda: toast.destroy() if toast.winfo_exists() else None)

    def show_confirm(self, msg, on_yes, on_no=None):
        """Show an inline confirmation bar instead of messagebox.askyesno."""
        T = self.T
        bar = tk.Frame(self.root, bg=T["warning"])
        bar.place(relx=0.02, y=55, relwidth=0.96, height=48)
        bar.lift()
        tk.Label(bar, text=f"  ⚠  {msg}",
                 font=(config.BUTTON_FONT[0], 10, "bold"),
                 bg=T["warning"], fg="#FFFFFF", anchor="w").pack(side=tk.LEFT, fill=tk.X, expand=True)

        def _yes():
            bar.destroy()
            on_yes()

        def _no():
            bar.destroy()
            if on_no:
                on_no()

        tk.Button(bar, text=" Cancel ", font=(config.BUTTON_FONT[0], 10, "bold"),
                  bg=T["shadow_dark"], fg="#FFFFFF", relief=tk.FLAT, bd=0,
                  command=_no, cursor="hand2").pack(side=tk.RIGHT, padx=2)
        tk.Button(bar, text=" Delete Everything ", font=(config.BUTTON_FONT[0], 10, "bold"),
                  bg=T["danger"], fg="#FFFFFF", relief=tk.FLAT, bd=0,
                  command=_yes, cursor="hand2").pack(side=tk.RIGHT, padx=2)

    def open_dialog(self, title, width=460, height=420):
        """Modal sheet on top of the main window"""
        T = self.T
        dialog = tk.Toplevel(self.root)
        dialog.title(title)
        dialog.configure(bg=T["bg"])
        dialog.geometry(f"{width}x{height}")
        dialog.transient(self.root)
        dialog.grab_set()
        tk.Label(dialog, text=title, font=(config.BUTTON_FONT[0], 16, "bold"),
                 bg=T["bg"], fg=T["text"]).pack(anchor=tk.W, padx=20, pady=(16, 8))
        return dialog

    # ── Main window ──────────────────────────────────────────────────────
    def create_widgets(self):
        """Create main UI components"""
        T = self.T
        self.top_frame = tk.Frame(self.root, bg=T["bg_dark"], height=50)
        self.top_frame.pack(fill=tk.X)
        self.top_frame.pack_propagate(False)

        tk.Label(
            self.top_frame, text=config.APP_NAME,
            font=(config.BUTTON_FONT[0], 16, "bold"),
            bg=T["bg_dark"], fg=T["accent"]
        ).place(relx=0.5, rely=0.5, anchor=tk.CENTER)

        self.button(self.top_frame, "☾" if not self.dark_mode else "☀",
                    command=self._toggle_dark_mode, width=3,
                    font=(config.BUTTON_FONT[0], 12)).pack(side=tk.RIGHT, padx=8, pady=8)

        self.content_frame = tk.Frame(self.root, bg=T["bg"])
        self.content_frame.pack(fill=tk.BOTH, expand=True)

    def clear_content_frame(self):
        """Clear the content frame"""
        for widget in self.content_frame.winfo_children():
            widget.destroy()

    def show_home(self):
        """Home menu with one card per tool"""
        T = self.T
        self.clear_content_frame()
        self.root.bind("<Key>", lambda e: None)

        tk.Label(self.content_frame, text=config.APP_SUBTITLE,
                 font=(config.BUTTON_FONT[0], 26, "bold"),
                 bg=T["bg"], fg=T["text"]).pack(pady=(40, 4))
        tk.Label(self.content_frame, text="Pick a tool to get started",
                 font=config.LABEL_FONT, bg=T["bg"], fg=T["subtext"]).pack(pady=(0, 30))

        cards = tk.Frame(self.content_frame, bg=T["bg"])
        cards.pack(fill=tk.X, padx=120)
        for name, icon, colour in self.navigator.menu():
            self._menu_card(cards, name, icon, colour)

    def _menu_card(self, parent, name, icon, colour):
        T = self.T
        card = tk.Frame(parent, bg=T["btn_bg"], cursor="hand2",
                        highlightthickness=1, highlightbackground=T["shadow_dark"])
        card.pack(fill=tk.X, pady=8, ipady=10)
        widgets = [
            tk.Label(card, text=icon, font=(config.BUTTON_FONT[0], 18, "bold"),
                     bg=T["btn_bg"], fg=colour, width=3),
            tk.Label(card, text=name, font=(config.BUTTON_FONT[0], 14, "bold"),
                     bg=T["btn_bg"], fg=T["text"], anchor="w"),
            tk.Label(card, text="›", font=(config.BUTTON_FONT[0], 16),
                     bg=T["btn_bg"], fg=T["subtext"]),
        ]
        widgets[0].pack(side=tk.LEFT, padx=(12, 8))
        widgets[1].pack(side=tk.LEFT, fill=tk.X, expand=True)
        widgets[2].pack(side=tk.RIGHT, padx=12)

        def _open(event=None):
            self.clear_content_frame()
            self.navigator.open(name)

        for w in [card] + widgets:
            w.bind("<Button-1>", _open)


class CalculatorView:
    """Display plus keypad; every press goes through Calculator.handle_input"""

    def __init__(self, ui, parent, calculator, on_dismiss):
        self.ui = ui
        self.calculator = calculator
        self.on_dismiss = on_dismiss
        T = ui.T

        self.frame = tk.Frame(parent, bg=T["bg"])
        self.frame.pack(fill=tk.BOTH, expand=True)
        ui.header(self.frame, "Calculator", on_dismiss)

        body = tk.Frame(self.frame, bg=T["bg"])
        body.pack(fill=tk.BOTH, expand=True, padx=20, pady=12)

        display_card = tk.Frame(body, bg=T["display_bg"],
                                highlightthickness=1, highlightbackground=T["shadow_dark"])
        display_card.pack(fill=tk.X, pady=(0, 12))
        self.expression_label = tk.Label(display_card, text="", font=("Consolas", 14),
                                         bg=T["display_bg"], fg=T["subtext"], anchor=tk.E, padx=16)
        self.expression_label.pack(fill=tk.X, pady=(8, 0))
        self.display = tk.Label(display_card, text="0", font=config.DISPLAY_FONT,
                                bg=T["display_bg"], fg=T["display_fg"], anchor=tk.E, padx=16)
        self.display.pack(fill=tk.X, pady=(0, 8))

        pad = tk.Frame(body, bg=T["bg"])
        pad.pack(fill=tk.BOTH, expand=True)
        for c in range(4):
            pad.columnconfigure(c, weight=1, uniform="keys")
        for r, row in enumerate(calc_keys.BUTTON_ROWS):
            pad.rowconfigure(r, weight=1)
            for c, label in enumerate(row):
                self._key(pad, label, r, c, len(row))

        ui.root.bind("<Key>", self.on_key_press)
        self.refresh()

    def _key(self, pad, label, row, col, row_len):
        if label in calc_keys.OPERATOR_TOKENS or label == calc_keys.EQUALS:
            kind = "operator"
        elif label in (calc_keys.CLEAR, calc_keys.BACKSPACE):
            kind = "control"
        else:
            kind = "normal"
        # Short rows stretch their first key so the last lands in the operator column
        span = 5 - row_len if col == 0 else 1
        column = col if col == 0 else col + 4 - row_len
        btn = self.ui.button(pad, label, command=lambda: self.press(label), kind=kind,
                             font=(config.BUTTON_FONT[0], 18))
        btn.grid(row=row, column=column, columnspan=span, sticky="nsew", padx=4, pady=4)

    def press(self, token):
        self.calculator.handle_input(token)
        self.refresh()

    def on_key_press(self, event):
        """Handle keyboard input"""
        token = calc_keys.key_to_token(event.char, event.keysym)
        if token is not None:
            self.press(token)

    def refresh(self):
        self.display.config(text=self.calculator.display)
        self.expression_label.config(text=self.calculator.get_expression())

    def close(self):
        self.ui.root.bind("<Key>", lambda e: None)
        self.frame.destroy()


class BudgetView:
    """Balance card, transaction list and charts; redraws whenever the ledger changes"""

    def __init__(self, ui, parent, budget_manager, graph_generator, on_dismiss):
        self.ui = ui
        self.bm = budget_manager
        self.graphs = graph_generator
        self.on_dismiss = on_dismiss
        self.chart = "balance"
        self._canvas = None
        T = ui.T

        self.frame = tk.Frame(parent, bg=T["bg"])
        self.frame.pack(fill=tk.BOTH, expand=True)
        actions = ui.header(self.frame, "Budget", on_dismiss)
        ui.button(actions, "+ Add Transaction", command=self.show_add_dialog,
                  kind="primary").pack(side=tk.RIGHT, padx=(8, 0), ipadx=6)
        self.clear_btn = ui.button(actions, "Clear All", command=self.confirm_delete_all)

        self.balance_card = tk.Frame(self.frame, bg=T["success"])
        self.balance_card.pack(fill=tk.X, padx=20, pady=12)
        self.balance_title = tk.Label(self.balance_card, text="Current Balance",
                                      font=(config.LABEL_FONT[0], 12, "bold"),
                                      bg=T["success"], fg="#FFFFFF")
        self.balance_title.pack(anchor=tk.W, padx=20, pady=(12, 0))
        self.balance_label = tk.Label(self.balance_card, text="",
                                      font=("Consolas", 28, "bold"),
                                      bg=T["success"], fg="#FFFFFF")
        self.balance_label.pack(anchor=tk.W, padx=20, pady=(0, 12))

        notebook = ttk.Notebook(self.frame)
        notebook.pack(fill=tk.BOTH, expand=True, padx=20, pady=(0, 12))

        list_frame = tk.Frame(notebook, bg=T["bg"])
        notebook.add(list_frame, text="Recent Transactions")
        cols = ("Name", "Amount")
        self.tree = ttk.Treeview(list_frame, columns=cols, show="headings")
        self.tree.heading("Name", text="Name")
        self.tree.column("Name", width=380, anchor=tk.W)
        self.tree.heading("Amount", text=f"Amount ({config.CURRENCY_SYMBOL})")
        self.tree.column("Amount", width=140, anchor=tk.E)
        self.tree.tag_configure("expense", foreground=T["tree_fg"])
        self.tree.tag_configure("income", foreground=T["income_fg"])
        sb = ttk.Scrollbar(list_frame, orient=tk.VERTICAL, command=self.tree.yview)
        self.tree.configure(yscrollcommand=sb.set)
        self.tree.pack(side=tk.LEFT, fill=tk.BOTH, expand=True, pady=5)
        sb.pack(side=tk.RIGHT, fill=tk.Y, pady=5)
        self.empty_label = tk.Label(list_frame, text="No Transactions",
                                    font=(config.LABEL_FONT[0], 14), bg=T["tree_even"], fg=T["subtext"])

        self.menu = tk.Menu(self.tree, tearoff=0)
        self.menu.add_command(label="Delete Transaction", command=self.delete_selected)
        self.tree.bind("<Button-3>", self._on_right_click)
        self.tree.bind("<Button-2>", self._on_right_click)
        self.tree.bind("<Delete>", lambda e: self.delete_selected())

        chart_frame = tk.Frame(notebook, bg=T["bg"])
        notebook.add(chart_frame, text="Charts")
        chart_buttons = tk.Frame(chart_frame, bg=T["bg"])
        chart_buttons.pack(fill=tk.X, pady=4)
        ui.button(chart_buttons, "Running Balance", command=lambda: self.show_chart("balance"),
                  font=config.LABEL_FONT).pack(side=tk.LEFT, padx=3)
        ui.button(chart_buttons, "Income vs Expenses", command=lambda: self.show_chart("breakdown"),
                  font=config.LABEL_FONT).pack(side=tk.LEFT, padx=3)
        self.graph_frame = tk.Frame(chart_frame, bg=T["bg"])
        self.graph_frame.pack(fill=tk.BOTH, expand=True)

        self.bm.subscribe(self.refresh)
        self.refresh()

    def refresh(self):
        """Redraw the balance, list and chart from the ledger"""
        T = self.ui.T
        expenses = self.bm.list_expenses()
        total = self.bm.total()

        colour = T["success"] if total >= 0 else T["danger"]
        for w in (self.balance_card, self.balance_title, self.balance_label):
            w.config(bg=colour)
        arrow = "↗" if total >= 0 else "↙"
        self.balance_label.config(text=f"{config.CURRENCY_SYMBOL}{total:.2f}  {arrow}")

        self.tree.delete(*self.tree.get_children())
        for expense in expenses:
            tag = "expense" if expense['cost'] < 0 else "income"
            self.tree.insert("", tk.END, iid=expense['id'],
                             values=(expense['name'], format_amount(expense['cost'])), tags=(tag,))

        if expenses:
            self.empty_label.place_forget()
            self.clear_btn.pack(side=tk.RIGHT)
        else:
            self.empty_label.place(relx=0.5, rely=0.4, anchor=tk.CENTER)
            self.clear_btn.pack_forget()

        self.show_chart(self.chart)

    def show_chart(self, chart):
        self.chart = chart
        for widget in self.graph_frame.winfo_children():
            widget.destroy()
        if chart == "breakdown":
            fig = self.graphs.create_breakdown_graph()
        else:
            fig = self.graphs.create_balance_graph()
        self._canvas = FigureCanvasTkAgg(fig, master=self.graph_frame)
        self._canvas.draw()
        self._canvas.get_tk_widget().pack(fill=tk.BOTH, expand=True)

    def _on_right_click(self, event):
        row = self.tree.identify_row(event.y)
        if row:
            self.tree.selection_set(row)
            self.menu.tk_popup(event.x_root, event.y_root)

    def delete_selected(self):
        for expense_id in self.tree.selection():
            self.bm.delete_one(expense_id)

    def confirm_delete_all(self):
        self.ui.show_confirm(
            "Delete all transactions? This action cannot be undone.",
            on_yes=self.bm.delete_all)

    def show_add_dialog(self):
        """Sheet for adding an expense or income entry"""
        ui = self.ui
        T = ui.T
        dialog = ui.open_dialog("Add Transaction", height=300)
        form = tk.Frame(dialog, bg=T["bg"])
        form.pack(fill=tk.BOTH, expand=True, padx=20)

        kind_var = tk.StringVar(value="Expense")
        name_var = tk.StringVar()
        amount_var = tk.StringVar()

        kinds = tk.Frame(form, bg=T["bg"])
        kinds.grid(row=0, column=0, columnspan=2, sticky=tk.W, pady=6)
        for kind in ("Expense", "Income"):
            tk.Radiobutton(kinds, text=kind, value=kind, variable=kind_var,
                           indicatoron=False, width=10, font=config.LABEL_FONT,
                           bg=T["btn_bg"], fg=T["btn_fg"], selectcolor=T["bg_dark"],
                           relief=tk.FLAT).pack(side=tk.LEFT, padx=(0, 4))

        name_label = tk.Label(form, text="Expense Name:", font=config.LABEL_FONT, bg=T["bg"], fg=T["text"])
        name_label.grid(row=1, column=0, sticky=tk.W, pady=6)
        name_entry = ui.entry(form, name_var)
        name_entry.grid(row=1, column=1, pady=6, padx=10)
        tk.Label(form, text="Amount:", font=config.LABEL_FONT,
                 bg=T["bg"], fg=T["text"]).grid(row=2, column=0, sticky=tk.W, pady=6)
        ui.entry(form, amount_var).grid(row=2, column=1, pady=6, padx=10)

        buttons = tk.Frame(dialog, bg=T["bg"])
        buttons.pack(fill=tk.X, padx=20, pady=16)

        def save():
            try:
                self.bm.add(name_var.get(), amount_var.get(), is_expense=(kind_var.get() == "Expense"))
            except ValueError as e:
                ui.show_toast(str(e), kind="error", parent=dialog)
                return
            dialog.destroy()

        save_btn = ui.button(buttons, "Save", command=save, kind="primary", width=10)
        save_btn.pack(side=tk.RIGHT)
        ui.button(buttons, "Cancel", command=dialog.destroy, width=10).pack(side=tk.RIGHT, padx=6)

        def _update(*_):
            name_label.config(text=f"{kind_var.get()} Name:")
            dialog.title(f"Add {kind_var.get()}")
            ready = name_var.get().strip() and amount_var.get().strip()
            save_btn.config(state=tk.NORMAL if ready else tk.DISABLED)

        for var in (kind_var, name_var, amount_var):
            var.trace_add("write", _update)
        _update()
        name_entry.focus_set()

    def close(self):
        self.bm.unsubscribe(self.refresh)
        self.frame.destroy()


class RecipesView:
    """Searchable recipe gallery with add, edit and delete"""

    def __init__(self, ui, parent, recipe_manager, on_dismiss):
        self.ui = ui
        self.rm = recipe_manager
        self.on_dismiss = on_dismiss
        T = ui.T

        self.frame = tk.Frame(parent, bg=T["bg"])
        self.frame.pack(fill=tk.BOTH, expand=True)
        actions = ui.header(self.frame, "Recipes Gallery", on_dismiss)
        ui.button(actions, "+ New Recipe", command=lambda: self.show_recipe_dialog(),
                  kind="primary").pack(side=tk.RIGHT, padx=(8, 0), ipadx=6)
        self.search_var = tk.StringVar()
        ui.entry(actions, self.search_var, width=20).pack(side=tk.RIGHT, ipady=3)
        tk.Label(actions, text="\U0001F50D", bg=T["bg"], fg=T["subtext"]).pack(side=tk.RIGHT)
        self.search_var.trace_add("write", lambda *_: self.refresh())

        list_frame = tk.Frame(self.frame, bg=T["bg"])
        list_frame.pack(fill=tk.BOTH, expand=True, padx=20, pady=12)
        cols = ("Name", "Ingredients", "Last Made", "Tutorial")
        self.tree = ttk.Treeview(list_frame, columns=cols, show="headings")
        widths = {"Name": 180, "Ingredients": 320, "Last Made": 120, "Tutorial": 80}
        for col in cols:
            self.tree.heading(col, text=col)
            self.tree.column(col, width=widths[col], anchor=tk.W)
        self.tree.tag_configure("odd", background=T["tree_odd"])
        self.tree.tag_configure("even", background=T["tree_even"])
        sb = ttk.Scrollbar(list_frame, orient=tk.VERTICAL, command=self.tree.yview)
        self.tree.configure(yscrollcommand=sb.set)
        self.tree.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        sb.pack(side=tk.RIGHT, fill=tk.Y)
        self.empty_label = tk.Label(list_frame, text="No Recipes Found",
                                    font=(config.LABEL_FONT[0], 14), bg=T["tree_even"], fg=T["subtext"])

        self.menu = tk.Menu(self.tree, tearoff=0)
        self.menu.add_command(label="Edit", command=self.edit_selected)
        self.menu.add_command(label="Open Tutorial", command=self.open_tutorial)
        self.menu.add_command(label="Delete", command=self.delete_selected)
        self.tree.bind("<Double-1>", lambda e: self.edit_selected())
        self.tree.bind("<Button-3>", self._on_right_click)
        self.tree.bind("<Button-2>", self._on_right_click)
        self.tree.bind("<Delete>", lambda e: self.delete_selected())

        self.rm.subscribe(self.refresh)
        self.refresh()

    def refresh(self):
        """Re-run the search and redraw the list"""
        recipes = self.rm.search(self.search_var.get())
        self.tree.delete(*self.tree.get_children())
        for i, recipe in enumerate(recipes):
            tag = "even" if i % 2 == 0 else "odd"
            link = "↗ Link" if recipe['tutorial_link'] else ""
            self.tree.insert("", tk.END, iid=recipe['id'], tags=(tag,), values=(
                recipe['name'], recipe['ingredients'], format_last_made(recipe), link))
        if recipes:
            self.empty_label.place_forget()
        else:
            self.empty_label.place(relx=0.5, rely=0.4, anchor=tk.CENTER)

    def _selected_id(self):
        selection = self.tree.selection()
        return selection[0] if selection else None

    def _on_right_click(self, event):
        row = self.tree.identify_row(event.y)
        if row:
            self.tree.selection_set(row)
            self.menu.tk_popup(event.x_root, event.y_root)

    def edit_selected(self):
        recipe_id = self._selected_id()
        if recipe_id:
            recipe = self.rm.get(recipe_id)
            if recipe:
                self.show_recipe_dialog(recipe)

    def delete_selected(self):
        recipe_id = self._selected_id()
        if recipe_id:
            self.rm.delete(recipe_id)

    def open_tutorial(self):
        recipe_id = self._selected_id()
        recipe = self.rm.get(recipe_id) if recipe_id else None
        if recipe and recipe['tutorial_link']:
            webbrowser.open(recipe['tutorial_link'])

    def show_recipe_dialog(self, recipe=None):
        """Add a recipe, or edit an existing one when recipe is given"""
        ui = self.ui
        T = ui.T
        dialog = ui.open_dialog("Edit Recipe" if recipe else "Add a Recipe", width=520, height=480)
        form = tk.Frame(dialog, bg=T["bg"])
        form.pack(fill=tk.BOTH, expand=True, padx=20)

        values = {
            'name': tk.StringVar(value=recipe['name'] if recipe else ""),
            'ingredients': tk.StringVar(value=recipe['ingredients'] if recipe else ""),
            'last_made': tk.StringVar(value=recipe['last_made'] if recipe else date.today().isoformat()),
            'tutorial_link': tk.StringVar(value=recipe['tutorial_link'] if recipe else ""),
        }
        labels = [
            ('name', "Name \U0001F366"),
            ('ingredients', "Ingredients \U0001F95B"),
            ('last_made', "Last Made (YYYY-MM-DD)"),
            ('tutorial_link', "Tutorial Link \U0001F517"),
        ]
        for row, (field, text) in enumerate(labels):
            tk.Label(form, text=text, font=config.LABEL_FONT,
                     bg=T["bg"], fg=T["text"]).grid(row=row, column=0, sticky=tk.W, pady=5)
            ui.entry(form, values[field], width=32).grid(row=row, column=1, pady=5, padx=10)

        tk.Label(form, text="Notes", font=config.LABEL_FONT,
                 bg=T["bg"], fg=T["text"]).grid(row=len(labels), column=0, sticky=tk.NW, pady=5)
        notes = tk.Text(form, font=config.LABEL_FONT, width=32, height=6,
                        bg=T["entry_bg"], fg=T["entry_fg"], insertbackground=T["text"],
                        relief=tk.FLAT, highlightthickness=1, highlightbackground=T["shadow_dark"])
        notes.grid(row=len(labels), column=1, pady=5, padx=10)
        if recipe:
            notes.insert("1.0", recipe['notes'])

        buttons = tk.Frame(dialog, bg=T["bg"])
        buttons.pack(fill=tk.X, padx=20, pady=16)

        def save():
            fields = {name: var.get() for name, var in values.items()}
            fields['notes'] = notes.get("1.0", "end-1c")
            try:
                if recipe:
                    if self.rm.edit(recipe['id'], fields) is None:
                        # Gone already; close first so the grab is released
                        dialog.destroy()
                        ui.show_toast("This recipe was deleted", kind="error")
                        return
                else:
                    self.rm.add(fields)
            except ValueError as e:
                ui.show_toast(str(e), kind="error", parent=dialog)
                return
            dialog.destroy()

        save_btn = ui.button(buttons, "Done" if recipe else "Save", command=save, kind="primary", width=10)
        save_btn.pack(side=tk.RIGHT)
        ui.button(buttons, "Cancel", command=dialog.destroy, width=10).pack(side=tk.RIGHT, padx=6)

        def _update(*_):
            save_btn.config(state=tk.NORMAL if values['name'].get().strip() else tk.DISABLED)

        values['name'].trace_add("write", _update)
        _update()

    def close(self):
        self.rm.unsubscribe(self.refresh)
        self.frame.destroy()
