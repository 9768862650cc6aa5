#!/usr/bin/env python3
"""
启动脚本 - 书店后台管理系统
使用方法: python run.py
"""

import logging
import uvicorn

from bookstore_admin.config import Settings

settings = Settings.from_env()

# 配置详细日志
logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s',
    handlers=[
        logging.StreamHandler(),
        logging.FileHandler('debug.log', encoding='utf-8')
    ]
)

# 设置特定模块的日志级别
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
logging.getLogger("uvicorn.error").setLevel(logging.INFO)

if __name__ == "__main__":
    logging.info("=" * 60)
    logging.info("启动书店后台管理系统")
    logging.info(f"数据库: {settings.db_path}")
    logging.info(f"日志级别: {settings.log_level}")
    logging.info("=" * 60)

    uvicorn.run(
        "bookstore_admin.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=True,
        reload_dirs=["bookstore_admin"],
        log_level=settings.log_level.lower()
    )
