"""
订单业务服务层
"""
import logging
from typing import Any, Dict, Optional

from ..repositories.order_repository import OrderRepository
from ..repositories.query_builder import Pagination
from ..models.models import Order
from ..exceptions import OrderNotFoundError
from .response_shaper import ORDER_SUMMARY_FIELDS, rename_all, shape_order_detail

logger = logging.getLogger(__name__)


class OrderService:
    """订单服务类"""

    def __init__(self, order_repository: OrderRepository):
        self.order_repository = order_repository

    def list_orders(self, pagination: Pagination, status: Optional[str] = None) -> Dict[str, Any]:
        rows, summary = self.order_repository.get_paginated(pagination, status)
        return {"orders": rename_all(rows, ORDER_SUMMARY_FIELDS), "pagination": summary}

    def recent_orders(self, limit: int = 10):
        return rename_all(self.order_repository.get_recent(limit), ORDER_SUMMARY_FIELDS)

    def get_order_detail(self, order_id: int) -> Dict[str, Any]:
        """订单详情，不存在时抛出 OrderNotFoundError"""
        order = self.order_repository.get_with_customer(order_id)
        if not order:
            raise OrderNotFoundError("Order not found")
        items = self.order_repository.get_items(order_id)
        return shape_order_detail(order, items)

    def create_order(self, order: Order) -> int:
        return self.order_repository.create(order)

    def update_status(self, order_id: int, payment_status: Optional[str]) -> int:
        affected = self.order_repository.update_status(order_id, payment_status)
        if affected == 0:
            logger.info(f"更新订单 {order_id} 未命中任何记录")
        return affected

    def delete_order(self, order_id: int) -> int:
        affected = self.order_repository.delete(order_id)
        if affected == 0:
            logger.info(f"删除订单 {order_id} 未命中任何记录")
        return affected
