"""
Database Manager for SweetLogic
Handles SQLite storage for the expense and recipe collections
"""
import sqlite3
import uuid
from datetime import datetime, timezone
import config

# Collection name -> ordered column list (id and date_created are managed here)
COLLECTIONS = {
    'expenses': ['id', 'name', 'cost', 'date_created'],
    'recipes': ['id', 'name', 'ingredients', 'last_made', 'tutorial_link', 'notes', 'date_created'],
}

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S.%f"


class Database:
    def __init__(self, db_path=config.DB_PATH):
        self.db_path = db_path
        self.init_database()

    def get_connection(self):
        """Create and return a database connection"""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def init_database(self):
        """Initialize database tables"""
        conn = self.get_connection()
        cursor = conn.cursor()

        # Expenses table (cost < 0 is an expense, cost >= 0 is income)
        cursor.execute('''
            CREATE TABLE IF NOT EXISTS expenses (
                id TEXT PRIMARY KEY,
                name TEXT NOT NULL,
                cost REAL NOT NULL,
                date_created TEXT NOT NULL
            )
        ''')

        # Recipes table
        cursor.execute('''
            CREATE TABLE IF NOT EXISTS recipes (
                id TEXT PRIMARY KEY,
                name TEXT NOT NULL,
                ingredients TEXT NOT NULL DEFAULT '',
                last_made TEXT NOT NULL,
                tutorial_link TEXT NOT NULL DEFAULT '',
                notes TEXT NOT NULL DEFAULT '',
                date_created TEXT NOT NULL
            )
        ''')

        # Migration: recipe files from before links and notes existed
        cursor.execute("PRAGMA table_info(recipes)")
        columns = [column[1] for column in cursor.fetchall()]
        if 'tutorial_link' not in columns:
            cursor.execute("ALTER TABLE recipes ADD COLUMN tutorial_link TEXT NOT NULL DEFAULT ''")
            print("Database migrated: Added tutorial_link column to recipes")
        if 'notes' not in columns:
            cursor.execute("ALTER TABLE recipes ADD COLUMN notes TEXT NOT NULL DEFAULT ''")
            print("Database migrated: Added notes column to recipes")

        conn.commit()
        conn.close()

    def _check_collection(self, collection):
        if collection not in COLLECTIONS:
            raise ValueError(f"Unknown collection: {collection}")
        return COLLECTIONS[collection]

    def _check_fields(self, collection, fields):
        columns = self._check_collection(collection)
        unknown = [name for name in fields if name not in columns or name in ('id', 'date_created')]
        if unknown:
            raise ValueError(f"Unknown {collection} field(s): {', '.join(sorted(unknown))}")

    def insert(self, collection, record):
        """Insert a record and return it with its generated id and timestamp"""
        self._check_fields(collection, record)
        row = dict(record)
        row['id'] = uuid.uuid4().hex
        row['date_created'] = datetime.now(timezone.utc).strftime(TIMESTAMP_FORMAT)

        names = list(row)
        placeholders = ', '.join('?' for _ in names)
        conn = self.get_connection()
        cursor = conn.cursor()
        cursor.execute(
            f'INSERT INTO {collection} ({", ".join(names)}) VALUES ({placeholders})',
            [row[name] for name in names]
        )
        conn.commit()
        conn.close()
        return self.get(collection, row['id'])

    def get(self, collection, record_id):
        """Return a single record as a dict, or None"""
        self._check_collection(collection)
        conn = self.get_connection()
        cursor = conn.cursor()
        cursor.execute(f'SELECT * FROM {collection} WHERE id = ?', (record_id,))
        row = cursor.fetchone()
        conn.close()
        return dict(row) if row else None

    def list_all(self, collection):
        """Return every record, most recently inserted first"""
        self._check_collection(collection)
        conn = self.get_connection()
        cursor = conn.cursor()
        cursor.execute(f'SELECT * FROM {collection} ORDER BY rowid DESC')
        rows = [dict(row) for row in cursor.fetchall()]
        conn.close()
        return rows

    def filter(self, collection, predicate):
        """Return the records (newest first) for which predicate(record) is true"""
        return [record for record in self.list_all(collection) if predicate(record)]

    def update(self, collection, record_id, fields):
        """Overwrite the given fields on one record. Returns True if it existed."""
        self._check_fields(collection, fields)
        if not fields:
            return self.get(collection, record_id) is not None

        assignments = ', '.join(f'{name}=?' for name in fields)
        conn = self.get_connection()
        cursor = conn.cursor()
        cursor.execute(
            f'UPDATE {collection} SET {assignments} WHERE id=?',
            list(fields.values()) + [record_id]
        )
        conn.commit()
        updated = cursor.rowcount > 0
        conn.close()
        return updated

    def delete(self, collection, record_id):
        """Delete one record by id. Returns True if a record was removed."""
        self._check_collection(collection)
        conn = self.get_connection()
        cursor = conn.cursor()
        cursor.execute(f'DELETE FROM {collection} WHERE id = ?', (record_id,))
        conn.commit()
        deleted = cursor.rowcount > 0
        conn.close()
        return deleted

    def delete_all(self, collection):
        """Delete every record in a collection and return how many were removed"""
        self._check_collection(collection)
        conn = self.get_connection()
        cursor = conn.cursor()
        cursor.execute(f'DELETE FROM {collection}')
        conn.commit()
        count = cursor.rowcount
        conn.close()
        return count
