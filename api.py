"""
Flask REST API for the SweetLogic Web Portal
Exposes the budget ledger, recipe gallery and calculator as JSON endpoints
"""
from flask import Flask, jsonify, request
from flask_cors import CORS
from calculator import Calculator
from database import Database
from budget_manager import BudgetManager
from recipe_manager import RecipeManager
import config


class RecordNotFound(Exception):
    pass


def create_app(db):
    """Build the web portal app around an existing Database"""
    app = Flask(__name__)
    CORS(app)  # Enable CORS for all routes

    budget_manager = BudgetManager(db)
    recipe_manager = RecipeManager(db)

    @app.errorhandler(ValueError)
    def handle_value_error(e):
        return jsonify({'success': False, 'error': str(e)}), 400

    @app.errorhandler(RecordNotFound)
    def handle_not_found(e):
        return jsonify({'success': False, 'error': str(e)}), 404

    @app.errorhandler(Exception)
    def handle_error(e):
        code = getattr(e, 'code', 500)
        if not isinstance(code, int):
            code = 500
        return jsonify({'success': False, 'error': str(e)}), code

    def json_body():
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            raise ValueError("Request body must be a JSON object")
        return body

    @app.route('/api')
    def api_info():
        """List the available endpoints"""
        return jsonify({
            'success': True,
            'data': {
                'name': config.APP_NAME,
                'version': config.VERSION,
                'endpoints': [
                    'GET /api/expenses',
                    'POST /api/expenses',
                    'DELETE /api/expenses',
                    'DELETE /api/expenses/<id>',
                    'GET /api/expenses/total',
                    'GET /api/recipes?q=<search>',
                    'POST /api/recipes',
                    'PUT /api/recipes/<id>',
                    'DELETE /api/recipes/<id>',
                    'POST /api/calculator',
                ]
            }
        })

    # ── Budget ────────────────────────────────────────────────────────────────
    @app.route('/api/expenses', methods=['GET'])
    def list_expenses():
        """Get the ledger, newest first"""
        expenses = budget_manager.list_expenses()
        return jsonify({'success': True, 'data': expenses, 'count': len(expenses)})

    @app.route('/api/expenses', methods=['POST'])
    def add_expense():
        """Add an expense or income entry"""
        body = json_body()
        kind = body.get('type', 'expense')
        if kind not in ('expense', 'income'):
            raise ValueError("type must be 'expense' or 'income'")
        expense = budget_manager.add(body.get('name'), body.get('amount'), is_expense=(kind == 'expense'))
        return jsonify({'success': True, 'data': expense}), 201

    @app.route('/api/expenses', methods=['DELETE'])
    def delete_all_expenses():
        """Clear the whole ledger"""
        count = budget_manager.delete_all()
        return jsonify({'success': True, 'data': {'deleted': count}})

    @app.route('/api/expenses/<expense_id>', methods=['DELETE'])
    def delete_expense(expense_id):
        if not budget_manager.delete_one(expense_id):
            raise RecordNotFound(f"No transaction with id {expense_id}")
        return jsonify({'success': True, 'data': {'deleted': 1}})

    @app.route('/api/expenses/total')
    def expense_total():
        """Get the current balance with income and expense totals"""
        summary = budget_manager.summary()
        summary['balance'] = budget_manager.total()
        return jsonify({'success': True, 'data': summary})

    # ── Recipes ───────────────────────────────────────────────────────────────
    @app.route('/api/recipes', methods=['GET'])
    def list_recipes():
        """Get recipes, optionally filtered by ?q= on the name"""
        recipes = recipe_manager.search(request.args.get('q', ''))
        return jsonify({'success': True, 'data': recipes, 'count': len(recipes)})

    @app.route('/api/recipes', methods=['POST'])
    def add_recipe():
        recipe = recipe_manager.add(json_body())
        return jsonify({'success': True, 'data': recipe}), 201

    @app.route('/api/recipes/<recipe_id>', methods=['GET'])
    def get_recipe(recipe_id):
        recipe = recipe_manager.get(recipe_id)
        if recipe is None:
            raise RecordNotFound(f"No recipe with id {recipe_id}")
        return jsonify({'success': True, 'data': recipe})

    @app.route('/api/recipes/<recipe_id>', methods=['PUT', 'PATCH'])
    def edit_recipe(recipe_id):
        recipe = recipe_manager.edit(recipe_id, json_body())
        if recipe is None:
            raise RecordNotFound(f"No recipe with id {recipe_id}")
        return jsonify({'success': True, 'data': recipe})

    @app.route('/api/recipes/<recipe_id>', methods=['DELETE'])
    def delete_recipe(recipe_id):
        if not recipe_manager.delete(recipe_id):
            raise RecordNotFound(f"No recipe with id {recipe_id}")
        return jsonify({'success': True, 'data': {'deleted': 1}})

    # ── Calculator ────────────────────────────────────────────────────────────
    @app.route('/api/calculator', methods=['POST'])
    def calculate():
        """Run a sequence of button presses through a fresh calculator"""
        tokens = json_body().get('tokens')
        if not isinstance(tokens, list):
            raise ValueError("tokens must be a list of button labels")
        calc = Calculator()
        for token in tokens:
            calc.handle_input(token)
        return jsonify({'success': True, 'data': calc.get_state()})

    return app


if __name__ == '__main__':
    print("\n" + "="*60)
    print(f"{config.APP_NAME} Web Portal API Server")
    print("="*60)
    print(f"Server starting on http://{config.WEB_HOST}:{config.WEB_PORT}")
    print(f"Endpoint list: http://localhost:{config.WEB_PORT}/api")
    print("="*60 + "\n")

    create_app(Database()).run(host=config.WEB_HOST, port=config.WEB_PORT, debug=False)
