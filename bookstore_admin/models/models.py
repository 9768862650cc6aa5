#!/usr/bin/env python3
"""
数据模型定义
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, List

@dataclass
class Book:
    """书籍模型"""
    isbn: str  # 唯一业务标识，创建后不可修改
    title: str
    author_name: Optional[str] = None
    publisher_name: Optional[str] = None
    category_name: Optional[str] = None
    price: Optional[float] = None
    stock_quantity: Optional[int] = 0
    pages: Optional[int] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    publication_date: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

@dataclass
class User:
    """用户模型"""
    first_name: str
    email: str
    last_name: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    postal_code: Optional[str] = None
    user_type: str = 'customer'
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def split_name(cls, name: str):
        """把完整姓名拆成名和姓，第一个空格前为名"""
        first_name, _, last_name = (name or "").strip().partition(" ")
        return first_name, last_name.strip()

@dataclass
class OrderItem:
    """订单明细模型"""
    isbn: Optional[str]
    quantity: int
    price_per_item: float
    order_id: Optional[int] = None
    id: Optional[int] = None

    @property
    def total_price(self) -> float:
        return self.quantity * self.price_per_item

@dataclass
class Order:
    """订单模型"""
    total_amount: Optional[float] = None
    order_number: Optional[str] = None
    user_id: Optional[int] = None
    payment_status: str = 'pending'
    shipping_address: Optional[str] = None
    shipping_city: Optional[str] = None
    shipping_postal_code: Optional[str] = None
    items: List[OrderItem] = field(default_factory=list)
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

@dataclass
class Category:
    """分类模型"""
    name: str
    description: Optional[str] = None
    id: Optional[int] = None

