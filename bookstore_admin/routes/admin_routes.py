#!/usr/bin/env python3
"""
后台管理路由汇总
所有 /admin 下的路由都经过管理员校验
"""
from fastapi import APIRouter, Depends
import logging

from ..config import Settings
from ..exceptions import translate_error
from ..models.database import Database
from ..repositories.book_repository import BookRepository
from ..repositories.order_repository import OrderRepository
from ..repositories.stats_repository import StatsRepository
from ..services.book_service import BookService
from ..services.diagnostics import DiagnosticsProbe, default_cases
from ..services.order_service import OrderService
from ..services.response_shaper import shape_stats
from .book_routes import book_router
from .category_routes import author_router, category_router, publisher_router
from .dependencies import get_database, get_settings, require_admin
from .order_routes import order_router
from .user_routes import user_router

logger = logging.getLogger(__name__)

admin_router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)])

@admin_router.get("/stats")
async def get_stats(db: Database = Depends(get_database), settings: Settings = Depends(get_settings)):
    """后台首页统计：汇总数值、最近订单、低库存书籍"""
    try:
        totals = StatsRepository(db).get_totals()
        recent_orders = OrderService(OrderRepository(db)).recent_orders(settings.dashboard_limit)
        low_stock_books = BookService(BookRepository(db)).get_low_stock_books(
            settings.low_stock_threshold, settings.dashboard_limit
        )
        return {
            "success": True,
            "stats": shape_stats(totals),
            "recentOrders": recent_orders,
            "lowStockBooks": low_stock_books
        }
    except Exception as e:
        logger.error(f"获取统计数据失败: {e}")
        raise translate_error(e, "Failed to fetch stats")

@admin_router.get("/diagnostics")
async def run_diagnostics(settings: Settings = Depends(get_settings)):
    """依次探测依赖服务"""
    results = await DiagnosticsProbe(default_cases(settings)).run()
    return {"success": True, "results": results}

# 注册各资源路由
for router in (book_router, user_router, order_router, category_router, author_router, publisher_router):
    admin_router.include_router(router)
