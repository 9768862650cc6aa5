"""
分类数据访问层
"""
from typing import Dict, List, Optional

from ..models.database import Database
from ..models.models import Category


class CategoryRepository:
    """分类仓库类，接口层以分类名称为键"""

    def __init__(self, db: Database):
        self.db = db

    def list_all(self) -> List[Dict]:
        query = """
            SELECT category_id as id, category_name as name, description
            FROM categories
            ORDER BY category_name
        """
        return self.db.execute_query(query)

    def get_by_name(self, name: str) -> Optional[Dict]:
        query = """
            SELECT category_id as id, category_name as name, description
            FROM categories WHERE category_name = ?
        """
        results = self.db.execute_query(query, (name,))
        return results[0] if results else None

    def create(self, category: Category) -> int:
        """创建分类，重名由唯一约束拒绝"""
        query = "INSERT INTO categories (category_name, description) VALUES (?, ?)"
        return self.db.execute_insert(query, (category.name, category.description))

    def update(self, name: str, description: Optional[str]) -> int:
        query = "UPDATE categories SET description = ? WHERE category_name = ?"
        return self.db.execute_update(query, (description, name))

    def delete(self, name: str) -> int:
        return self.db.execute_update("DELETE FROM categories WHERE category_name = ?", (name,))

    @staticmethod
    def resolve_id(cursor, name: Optional[str]) -> Optional[int]:
        """在已有连接内把分类名称解析为ID，未知分类返回 None"""
        if not name:
            return None
        cursor.execute("SELECT category_id FROM categories WHERE category_name = ?", (name,))
        row = cursor.fetchone()
        return row[0] if row else None
