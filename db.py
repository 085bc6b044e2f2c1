import os
import sqlite3
import mysql.connector
from models import Product

CREATE_TABLE = {
    'sqlite': """
        CREATE TABLE IF NOT EXISTS products (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            quantity INTEGER NOT NULL
        )
    """,
    'mysql': """
        CREATE TABLE IF NOT EXISTS products (
            id INT AUTO_INCREMENT PRIMARY KEY,
            name VARCHAR(255) NOT NULL,
            quantity INT NOT NULL
        )
    """,
}

LIKE_ESCAPE = '!'

def db_connect(config):
    backend = config.get('DB_BACKEND', 'sqlite')
    if backend == 'mysql':
        return mysql.connector.connect(
            host=config.get('MYSQL_HOST', 'localhost'),
            user=config.get('MYSQL_USER', 'root'),
            password=config.get('MYSQL_PASSWORD', ''),
            database=config.get('MYSQL_DATABASE', 'myproducts')
        )
    if backend == 'sqlite':
        db_path = config.get('DB_PATH', 'myproducts.db')
        parent = os.path.dirname(os.path.abspath(db_path))
        os.makedirs(parent, exist_ok=True)
        conn = sqlite3.connect(db_path)
        conn.row_factory = sqlite3.Row
        return conn
    raise ValueError(f"Unknown DB_BACKEND '{backend}'")

def _cursor(conn, config):
    if config.get('DB_BACKEND', 'sqlite') == 'mysql':
        return conn.cursor(dictionary=True)
    return conn.cursor()

def _execute(cur, config, query, params=()):
    # Queries are written with %s; sqlite3 wants qmark style
    if config.get('DB_BACKEND', 'sqlite') == 'sqlite':
        query = query.replace('%s', '?')
    cur.execute(query, params)

def escape_like(text):
    return (text.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
                .replace('%', LIKE_ESCAPE + '%')
                .replace('_', LIKE_ESCAPE + '_'))

# --------- SETUP ----------
def init_db(config):
    conn = db_connect(config)
    backend = config.get('DB_BACKEND', 'sqlite')
    cur = _cursor(conn, config)
    try:
        _execute(cur, config, CREATE_TABLE[backend])
        conn.commit()
    finally:
        cur.close(); conn.close()
    print(f"[init_db] Table 'products' ready ({backend})")

# --------- PRODUCTS ----------
def insert_product(config, product):
    conn = db_connect(config)
    cur = _cursor(conn, config)
    try:
        _execute(cur, config, "INSERT INTO products (name, quantity) VALUES (%s, %s)",
                 (product.name, product.quantity))
        conn.commit()
        product_id = cur.lastrowid
    finally:
        cur.close(); conn.close()
    print(f"[insert_product] Inserted '{product.name}' x{product.quantity} with id {product_id}")
    return Product(name=product.name, quantity=product.quantity, id=product_id)

def get_all_products(config):
    conn = db_connect(config)
    cur = _cursor(conn, config)
    try:
        _execute(cur, config, "SELECT id, name, quantity FROM products ORDER BY id")
        rows = cur.fetchall()
    finally:
        cur.close(); conn.close()
    return [Product.from_row(row) for row in rows]

def find_products(config, name):
    conn = db_connect(config)
    cur = _cursor(conn, config)
    try:
        _execute(cur, config,
                 f"SELECT id, name, quantity FROM products WHERE name LIKE %s ESCAPE '{LIKE_ESCAPE}' ORDER BY id",
                 (escape_like(name) + '%',))
        rows = cur.fetchall()
    finally:
        cur.close(); conn.close()
    print(f"[find_products] '{name}' matched {len(rows)} row(s)")
    return [Product.from_row(row) for row in rows]

def delete_products(config, name):
    conn = db_connect(config)
    cur = _cursor(conn, config)
    try:
        _execute(cur, config, "DELETE FROM products WHERE name=%s", (name,))
        conn.commit()
        deleted = cur.rowcount
    finally:
        cur.close(); conn.close()
    print(f"[delete_products] Deleted {deleted} row(s) named '{name}'")
    return deleted
