"""
作者、出版社数据访问层
"""
import logging
from typing import Dict, List, Optional

from ..models.database import Database

logger = logging.getLogger(__name__)


class LookupRepository:
    """按名称展示、按ID关联的字典表仓库"""

    table = ""
    id_column = ""
    name_column = ""

    def __init__(self, db: Database):
        self.db = db

    def list_all(self) -> List[Dict]:
        query = f"""
            SELECT {self.id_column} as id, {self.name_column} as name
            FROM {self.table}
            ORDER BY {self.name_column}, {self.id_column}
        """
        return self.db.execute_query(query)

    def get_by_id(self, item_id: int) -> Optional[Dict]:
        query = f"SELECT {self.id_column} as id, {self.name_column} as name FROM {self.table} WHERE {self.id_column} = ?"
        results = self.db.execute_query(query, (item_id,))
        return results[0] if results else None

    def create(self, name: str) -> int:
        query = f"INSERT INTO {self.table} ({self.name_column}) VALUES (?)"
        return self.db.execute_insert(query, (name,))

    def update(self, item_id: int, name: str) -> int:
        query = f"UPDATE {self.table} SET {self.name_column} = ? WHERE {self.id_column} = ?"
        return self.db.execute_update(query, (name, item_id))

    def delete(self, item_id: int) -> int:
        query = f"DELETE FROM {self.table} WHERE {self.id_column} = ?"
        return self.db.execute_update(query, (item_id,))

    def resolve_id(self, cursor, name: Optional[str]) -> Optional[int]:
        """在已有连接内把名称解析为ID，同名取最小ID，不存在则新建"""
        if not name:
            return None
        cursor.execute(
            f"SELECT MIN({self.id_column}) FROM {self.table} WHERE {self.name_column} = ?",
            (name,)
        )
        row = cursor.fetchone()
        if row and row[0] is not None:
            return row[0]
        cursor.execute(f"INSERT INTO {self.table} ({self.name_column}) VALUES (?)", (name,))
        logger.info(f"新建{self.table}记录: {name}")
        return cursor.lastrowid


class AuthorRepository(LookupRepository):
    """作者数据仓库"""
    table = "authors"
    id_column = "author_id"
    name_column = "author_name"


class PublisherRepository(LookupRepository):
    """出版社数据仓库"""
    table = "publishers"
    id_column = "publisher_id"
    name_column = "publisher_name"
