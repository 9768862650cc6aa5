"""
路由依赖注入
数据库句柄和配置挂在 app.state 上，由应用工厂创建
"""
import secrets
from typing import Optional

from fastapi import Depends, Header, Request

from ..config import Settings
from ..exceptions import AuthError
from ..models.database import Database
from ..repositories.book_repository import BookRepository
from ..repositories.order_repository import OrderRepository
from ..services.book_service import BookService
from ..services.order_service import OrderService


def get_database(request: Request) -> Database:
    return request.app.state.db


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_book_service(db: Database = Depends(get_database)) -> BookService:
    return BookService(BookRepository(db))


def get_order_service(db: Database = Depends(get_database)) -> OrderService:
    return OrderService(OrderRepository(db))


async def require_admin(
    settings: Settings = Depends(get_settings),
    x_admin_token: Optional[str] = Header(None),
):
    """管理员校验，未配置 ADMIN_TOKEN 时放行"""
    if not settings.admin_token:
        return
    if not x_admin_token:
        raise AuthError("Authentication required")
    if not secrets.compare_digest(x_admin_token, settings.admin_token):
        raise AuthError("Admin access required", status_code=403, code="FORBIDDEN")
