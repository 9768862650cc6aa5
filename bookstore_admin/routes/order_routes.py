#!/usr/bin/env python3
"""
订单管理路由
"""
from fastapi import APIRouter, Depends, Query
from typing import List, Optional
from pydantic import BaseModel
import logging

from ..exceptions import AdminError, translate_error
from ..models.models import Order, OrderItem
from ..repositories.query_builder import DEFAULT_PAGE, DEFAULT_PER_PAGE, Pagination
from ..services.order_service import OrderService
from .dependencies import get_order_service

logger = logging.getLogger(__name__)

order_router = APIRouter(prefix="/orders", tags=["orders"])

class OrderItemRequest(BaseModel):
    isbn: Optional[str] = None
    quantity: int
    price_per_item: float

class OrderCreateRequest(BaseModel):
    """创建订单请求，不传 total_amount 时按明细合计"""
    order_number: Optional[str] = None
    user_id: Optional[int] = None
    total_amount: Optional[float] = None
    payment_status: str = "pending"
    shipping_address: Optional[str] = None
    shipping_city: Optional[str] = None
    shipping_postal_code: Optional[str] = None
    items: List[OrderItemRequest] = []

    def to_order(self) -> Order:
        return Order(
            order_number=self.order_number,
            user_id=self.user_id,
            total_amount=self.total_amount,
            payment_status=self.payment_status,
            shipping_address=self.shipping_address,
            shipping_city=self.shipping_city,
            shipping_postal_code=self.shipping_postal_code,
            items=[
                OrderItem(isbn=item.isbn, quantity=item.quantity, price_per_item=item.price_per_item)
                for item in self.items
            ],
        )

class OrderUpdateRequest(BaseModel):
    """更新订单支付状态"""
    payment_status: Optional[str] = None

@order_router.get("")
async def get_orders(
    status: Optional[str] = None,
    page: int = Query(DEFAULT_PAGE),
    per_page: int = Query(DEFAULT_PER_PAGE),
    service: OrderService = Depends(get_order_service)
):
    """获取订单列表（按支付状态筛选）"""
    try:
        result = service.list_orders(Pagination.from_params(page, per_page), status)
        return {"success": True, **result}
    except Exception as e:
        logger.error(f"获取订单列表失败: {e}")
        raise translate_error(e, "Failed to fetch orders")

@order_router.get("/{order_id}")
async def get_order(order_id: int, service: OrderService = Depends(get_order_service)):
    """获取订单详情"""
    try:
        return {"success": True, "order": service.get_order_detail(order_id)}
    except AdminError:
        raise
    except Exception as e:
        logger.error(f"获取订单详情失败: {e}")
        raise translate_error(e, "Failed to fetch order")

@order_router.post("")
async def create_order(request: OrderCreateRequest, service: OrderService = Depends(get_order_service)):
    """创建订单及明细"""
    try:
        order_id = service.create_order(request.to_order())
        return {"success": True, "message": "Order created successfully", "id": order_id}
    except Exception as e:
        logger.error(f"创建订单失败: {e}")
        raise translate_error(e, "Failed to create order")

@order_router.put("/{order_id}")
async def update_order(order_id: int, request: OrderUpdateRequest, service: OrderService = Depends(get_order_service)):
    """更新订单支付状态"""
    try:
        service.update_status(order_id, request.payment_status)
        return {"success": True, "message": "Order updated successfully"}
    except Exception as e:
        logger.error(f"更新订单失败: {e}")
        raise translate_error(e, "Failed to update order")

@order_router.delete("/{order_id}")
async def delete_order(order_id: int, service: OrderService = Depends(get_order_service)):
    """删除订单"""
    try:
        service.delete_order(order_id)
        return {"success": True, "message": "Order deleted successfully"}
    except Exception as e:
        logger.error(f"删除订单失败: {e}")
        raise translate_error(e, "Failed to delete order")
