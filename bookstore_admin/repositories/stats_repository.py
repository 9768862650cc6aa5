"""
后台统计数据访问层
"""
from typing import Dict

from ..models.database import Database


class StatsRepository:
    """汇总统计仓库"""

    def __init__(self, db: Database):
        self.db = db

    def get_totals(self) -> Dict:
        """单条语句返回各项计数和已完成订单收入"""
        query = """
            SELECT
                (SELECT COUNT(*) FROM users WHERE user_type = 'customer') as total_users,
                (SELECT COUNT(*) FROM books) as total_books,
                (SELECT COUNT(*) FROM orders) as total_orders,
                (SELECT COALESCE(SUM(total_amount), 0) FROM orders WHERE payment_status = 'completed') as total_revenue,
                (SELECT COUNT(*) FROM orders WHERE payment_status = 'pending') as pending_orders,
                (SELECT COUNT(*) FROM orders WHERE payment_status = 'completed') as completed_orders
        """
        return self.db.execute_query(query)[0]
