"""
订单数据访问层
"""
import logging
import uuid
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from ..models.database import Database
from ..models.models import Order
from .query_builder import ListQuery, Pagination, fetch_page

logger = logging.getLogger(__name__)

ORDER_SUMMARY_SELECT = """
    SELECT
        o.order_id, o.order_number, o.total_amount, o.payment_status, o.created_at,
        COUNT(oi.order_item_id) as items_count
    FROM orders o
    LEFT JOIN order_items oi ON o.order_id = oi.order_id
"""


def generate_order_number(now: Optional[datetime] = None) -> str:
    """生成订单号，格式 ORD-YYYYMMDD-XXXXXX"""
    now = now or datetime.now()
    return f"ORD-{now:%Y%m%d}-{uuid.uuid4().hex[:6].upper()}"


class OrderRepository:
    """订单仓库类"""

    def __init__(self, db: Database):
        self.db = db

    def list_query(self, status: Optional[str] = None) -> ListQuery:
        """订单摘要查询，status 精确匹配支付状态"""
        return ListQuery(
            base=ORDER_SUMMARY_SELECT,
            group_by="o.order_id",
            order_by="o.created_at DESC, o.order_id DESC",
        ).equals("o.payment_status", status)

    def get_paginated(self, pagination: Pagination, status: Optional[str] = None) -> Tuple[List[Dict], Dict]:
        return fetch_page(self.db, self.list_query(status), pagination)

    def get_recent(self, limit: int = 10) -> List[Dict]:
        query = ORDER_SUMMARY_SELECT + " GROUP BY o.order_id ORDER BY o.created_at DESC, o.order_id DESC LIMIT ?"
        return self.db.execute_query(query, (limit,))

    def get_with_customer(self, order_id: int) -> Optional[Dict]:
        """获取订单及下单用户信息"""
        query = """
            SELECT o.*, u.first_name, u.last_name, u.email, u.phone
            FROM orders o
            LEFT JOIN users u ON o.user_id = u.user_id
            WHERE o.order_id = ?
        """
        results = self.db.execute_query(query, (order_id,))
        return results[0] if results else None

    def get_items(self, order_id: int) -> List[Dict]:
        """获取订单明细，书籍已删除的明细仍保留"""
        query = """
            SELECT
                oi.order_item_id, oi.isbn, oi.quantity, oi.price_per_item,
                (oi.quantity * oi.price_per_item) as total_price,
                b.title, b.image_url, a.author_name
            FROM order_items oi
            LEFT JOIN books b ON oi.isbn = b.isbn
            LEFT JOIN authors a ON b.author_id = a.author_id
            WHERE oi.order_id = ?
            ORDER BY oi.order_item_id
        """
        return self.db.execute_query(query, (order_id,))

    def create(self, order: Order) -> int:
        """在同一个连接内写入订单和明细"""
        order_number = order.order_number or generate_order_number()
        total_amount = order.total_amount
        if total_amount is None:
            total_amount = sum(item.total_price for item in order.items)

        with self.db.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("""
                INSERT INTO orders (order_number, user_id, total_amount, payment_status,
                                    shipping_address, shipping_city, shipping_postal_code)
                VALUES (?, ?, ?, ?, ?, ?, ?)
            """, (order_number, order.user_id, total_amount, order.payment_status,
                  order.shipping_address, order.shipping_city, order.shipping_postal_code))
            order_id = cursor.lastrowid

            cursor.executemany("""
                INSERT INTO order_items (order_id, isbn, quantity, price_per_item)
                VALUES (?, ?, ?, ?)
            """, [(order_id, item.isbn, item.quantity, item.price_per_item) for item in order.items])

        logger.info(f"成功创建订单: {order_number}, 明细 {len(order.items)} 条")
        return order_id

    def update_status(self, order_id: int, payment_status: Optional[str]) -> int:
        query = """
            UPDATE orders SET payment_status = ?, updated_at = CURRENT_TIMESTAMP
            WHERE order_id = ?
        """
        return self.db.execute_update(query, (payment_status, order_id))

    def delete(self, order_id: int) -> int:
        """删除订单，明细随外键级联删除"""
        return self.db.execute_update("DELETE FROM orders WHERE order_id = ?", (order_id,))
