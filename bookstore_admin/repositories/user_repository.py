"""
用户数据访问层
"""
from typing import Dict, List, Optional, Tuple

from ..models.database import Database
from ..models.models import User
from .query_builder import ListQuery, Pagination, fetch_page

USER_SELECT = """
    SELECT user_id, first_name, last_name, email, phone, address, city,
           postal_code, user_type, created_at
    FROM users
"""


class UserRepository:
    """用户仓库类，后台列表只包含顾客"""

    def __init__(self, db: Database):
        self.db = db

    def list_query(self, user_type: str = "customer") -> ListQuery:
        return ListQuery(base=USER_SELECT, order_by="created_at DESC, user_id DESC").equals(
            "user_type", user_type
        )

    def get_paginated(self, pagination: Pagination) -> Tuple[List[Dict], Dict]:
        return fetch_page(self.db, self.list_query(), pagination)

    def get_by_id(self, user_id: int) -> Optional[Dict]:
        results = self.db.execute_query(USER_SELECT + " WHERE user_id = ?", (user_id,))
        return results[0] if results else None

    def create(self, user: User) -> int:
        query = """
            INSERT INTO users (first_name, last_name, email, phone, address,
                               city, postal_code, user_type)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?)
        """
        params = (user.first_name, user.last_name, user.email, user.phone,
                  user.address, user.city, user.postal_code, user.user_type)
        return self.db.execute_insert(query, params)

    def update(self, user_id: int, user: User) -> int:
        """整行覆盖更新（邮编除外），返回影响行数"""
        query = """
            UPDATE users SET
                first_name = ?, last_name = ?, email = ?, phone = ?,
                address = ?, city = ?, user_type = ?, updated_at = CURRENT_TIMESTAMP
            WHERE user_id = ?
        """
        params = (user.first_name, user.last_name, user.email, user.phone,
                  user.address, user.city, user.user_type, user_id)
        return self.db.execute_update(query, params)

    def delete(self, user_id: int) -> int:
        return self.db.execute_update("DELETE FROM users WHERE user_id = ?", (user_id,))
