"""
Navigation for SweetLogic
Routes between the home menu and the three tools
"""
import config


class Navigator:
    def __init__(self, on_home=None):
        self.routes = {}
        self.on_home = on_home
        self.current = None
        self.current_view = None

    def register(self, name, factory):
        """factory(on_dismiss) builds and returns the view for a menu entry"""
        self.routes[name] = factory

    def menu(self):
        """Menu entries (name, icon, colour) that have a registered view"""
        return [item for item in config.MENU_ITEMS if item[0] in self.routes]

    def open(self, name):
        """Show the tool called name. Unknown names raise KeyError."""
        if name not in self.routes:
            raise KeyError(f"Unknown page: {name}")
        self.current = name
        self.current_view = self.routes[name](self.dismiss)
        return self.current_view

    def dismiss(self):
        """Close the current tool and go back to the home menu"""
        view = self.current_view
        self.current = None
        self.current_view = None
        if view is not None and hasattr(view, 'close'):
            view.close()
        if self.on_home:
            self.on_home()

    def is_home(self):
        return self.current is None
