#!/usr/bin/env python3
"""
数据库连接和表结构管理
使用SQLite作为持久化存储，实例由应用创建后注入各个仓库
"""
import sqlite3
from pathlib import Path
from typing import Dict, List
from contextlib import contextmanager
import logging

logger = logging.getLogger(__name__)

class Database:
    """数据库连接管理器"""

    def __init__(self, db_path: str = "data/bookstore.db"):
        self.db_path = db_path
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        self.init_database()

    @contextmanager
    def get_connection(self):
        """获取数据库连接的上下文管理器"""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def init_database(self):
        """初始化数据库表结构"""
        with self.get_connection() as conn:
            cursor = conn.cursor()

            # 1. 作者表（名称可重复，仅作展示）
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS authors (
                    author_id INTEGER PRIMARY KEY AUTOINCREMENT,
                    author_name TEXT NOT NULL,
                    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            """)

            # 2. 出版社表
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS publishers (
                    publisher_id INTEGER PRIMARY KEY AUTOINCREMENT,
                    publisher_name TEXT NOT NULL,
                    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            """)

            # 3. 分类表，名称是接口路径使用的业务键
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS categories (
                    category_id INTEGER PRIMARY KEY AUTOINCREMENT,
                    category_name TEXT UNIQUE NOT NULL,
                    description TEXT,
                    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            """)

            # 4. 书籍表，ISBN为主键
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS books (
                    isbn TEXT PRIMARY KEY,
                    title TEXT NOT NULL,
                    author_id INTEGER REFERENCES authors(author_id) ON DELETE SET NULL,
                    publisher_id INTEGER REFERENCES publishers(publisher_id) ON DELETE SET NULL,
                    category_id INTEGER REFERENCES categories(category_id) ON DELETE SET NULL,
                    price REAL,
                    stock_quantity INTEGER DEFAULT 0,
                    pages INTEGER,
                    description TEXT,
                    image_url TEXT,
                    publication_date TEXT,
                    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            """)

            # 5. 用户表
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS users (
                    user_id INTEGER PRIMARY KEY AUTOINCREMENT,
                    first_name TEXT NOT NULL,
                    last_name TEXT,
                    email TEXT UNIQUE NOT NULL,
                    phone TEXT,
                    address TEXT,
                    city TEXT,
                    postal_code TEXT,
                    user_type TEXT DEFAULT 'customer',
                    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            """)

            # 6. 订单表
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS orders (
                    order_id INTEGER PRIMARY KEY AUTOINCREMENT,
                    order_number TEXT UNIQUE NOT NULL,
                    user_id INTEGER REFERENCES users(user_id) ON DELETE SET NULL,
                    total_amount REAL NOT NULL,
                    payment_status TEXT NOT NULL DEFAULT 'pending',
                    shipping_address TEXT,
                    shipping_city TEXT,
                    shipping_postal_code TEXT,
                    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            """)

            # 7. 订单明细表
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS order_items (
                    order_item_id INTEGER PRIMARY KEY AUTOINCREMENT,
                    order_id INTEGER NOT NULL REFERENCES orders(order_id) ON DELETE CASCADE,
                    isbn TEXT REFERENCES books(isbn) ON DELETE SET NULL,
                    quantity INTEGER NOT NULL,
                    price_per_item REAL NOT NULL
                )
            """)

            # 创建索引
            indexes = [
                "CREATE INDEX IF NOT EXISTS idx_books_title ON books(title)",
                "CREATE INDEX IF NOT EXISTS idx_books_stock ON books(stock_quantity)",
                "CREATE INDEX IF NOT EXISTS idx_authors_name ON authors(author_name)",
                "CREATE INDEX IF NOT EXISTS idx_publishers_name ON publishers(publisher_name)",
                "CREATE INDEX IF NOT EXISTS idx_users_type ON users(user_type)",
                "CREATE INDEX IF NOT EXISTS idx_orders_status ON orders(payment_status)",
                "CREATE INDEX IF NOT EXISTS idx_orders_created ON orders(created_at)",
                "CREATE INDEX IF NOT EXISTS idx_order_items_order ON order_items(order_id)"
            ]

            for index_sql in indexes:
                cursor.execute(index_sql)

            logger.info(f"数据库初始化完成: {self.db_path}")

    def execute_query(self, query: str, params: tuple = ()) -> List[Dict]:
        """执行查询并返回结果"""
        with self.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(query, params)
            return [dict(row) for row in cursor.fetchall()]

    def execute_update(self, query: str, params: tuple = ()) -> int:
        """执行更新操作并返回影响的行数"""
        with self.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(query, params)
            return cursor.rowcount

    def execute_insert(self, query: str, params: tuple = ()) -> int:
        """执行插入操作并返回新行ID"""
        with self.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(query, params)
            return cursor.lastrowid
