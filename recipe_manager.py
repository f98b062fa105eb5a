"""
Recipe Manager for SweetLogic
Handles the recipe gallery: adding, editing, deleting and searching recipes
"""
from datetime import date, datetime
from notifier import ChangeNotifier

COLLECTION = 'recipes'

EDITABLE_FIELDS = ('name', 'ingredients', 'last_made', 'tutorial_link', 'notes')

DATE_FORMAT = "%Y-%m-%d"


def normalize_date(value):
    """Accept a date, datetime or YYYY-MM-DD string and return YYYY-MM-DD"""
    if isinstance(value, datetime):
        return value.date().strftime(DATE_FORMAT)
    if isinstance(value, date):
        return value.strftime(DATE_FORMAT)
    text = str(value).strip()
    try:
        return datetime.strptime(text, DATE_FORMAT).strftime(DATE_FORMAT)
    except ValueError:
        raise ValueError(f"Last made date must be YYYY-MM-DD, got {text!r}")


def format_last_made(recipe):
    """Abbreviated date for recipe cards, e.g. Mar 05, 2025"""
    try:
        return datetime.strptime(recipe['last_made'], DATE_FORMAT).strftime("%b %d, %Y")
    except (KeyError, TypeError, ValueError):
        return ""


class RecipeManager(ChangeNotifier):
    def __init__(self, db):
        super().__init__()
        self.db = db

    def _clean_fields(self, fields):
        unknown = [name for name in fields if name not in EDITABLE_FIELDS]
        if unknown:
            raise ValueError(f"Unknown recipe field(s): {', '.join(sorted(unknown))}")

        cleaned = {}
        for name, value in fields.items():
            if name == 'last_made':
                cleaned[name] = normalize_date(value)
                continue
            if value is not None and not isinstance(value, str):
                raise ValueError(f"Recipe {name} must be text")
            if name == 'name':
                cleaned[name] = (value or "").strip()
            else:
                cleaned[name] = value if value is not None else ""
        if 'name' in cleaned and not cleaned['name']:
            raise ValueError("Recipe name is required")
        return cleaned

    def add(self, fields):
        """Add a new recipe. Only the name is required."""
        record = {
            'name': "",
            'ingredients': "",
            'last_made': date.today(),
            'tutorial_link': "",
            'notes': "",
        }
        record.update(fields)
        recipe = self.db.insert(COLLECTION, self._clean_fields(record))
        self.notify()
        return recipe

    def get(self, recipe_id):
        return self.db.get(COLLECTION, recipe_id)

    def edit(self, recipe_id, fields):
        """Load the recipe, apply the changed fields and write it back.

        Returns the updated recipe, or None if it no longer exists.
        """
        recipe = self.get(recipe_id)
        if recipe is None:
            return None

        changes = self._clean_fields(fields)
        recipe.update(changes)
        self.db.update(COLLECTION, recipe_id, {name: recipe[name] for name in EDITABLE_FIELDS})
        self.notify()
        return recipe

    def delete(self, recipe_id):
        """Delete a recipe"""
        deleted = self.db.delete(COLLECTION, recipe_id)
        if deleted:
            self.notify()
        return deleted

    def list_recipes(self):
        """All recipes, newest first"""
        return self.db.list_all(COLLECTION)

    def search(self, query):
        """Recipes whose name contains query, ignoring case. Empty query returns all."""
        query = (query or "").strip().lower()
        if not query:
            return self.list_recipes()
        return self.db.filter(COLLECTION, lambda recipe: query in recipe['name'].lower())
