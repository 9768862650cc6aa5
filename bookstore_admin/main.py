#!/usr/bin/env python3
"""
主应用入口
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

from .config import Settings
from .exceptions import AdminError
from .models.database import Database
from .routes.admin_routes import admin_router

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO"):
    """配置日志"""
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用启动和关闭"""
    logger.info("应用启动中...")
    logger.info(f"数据库连接就绪: {app.state.db.db_path}")
    yield
    logger.info("应用关闭中...")


async def admin_error_handler(request: Request, exc: AdminError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": exc.message, "code": exc.code}
    )


def jsonable_errors(exc: RequestValidationError):
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg"), "type": error.get("type")}
        for error in exc.errors()
    ]


async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"请求参数错误 {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=422,
        content={
            "success": False,
            "error": "Invalid request",
            "code": "VALIDATION_ERROR",
            "detail": jsonable_errors(exc)
        }
    )


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """创建FastAPI应用，数据库句柄挂在 app.state 上供路由注入"""
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="书店后台管理系统",
        description="书籍、用户、订单、分类管理接口",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.db = database or Database(settings.db_path)

    # 配置CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(AdminError, admin_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # 注册路由
    app.include_router(admin_router)

    @app.get("/health")
    async def health_check():
        """健康检查接口"""
        return {"status": "healthy", "database": "connected"}

    return app


def run_server(settings: Optional[Settings] = None):
    """运行服务器，监听地址取自配置"""
    settings = settings or Settings.from_env()
    uvicorn.run(
        "bookstore_admin.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port
    )

if __name__ == "__main__":
    run_server()
