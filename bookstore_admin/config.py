"""
应用配置
从环境变量加载
"""
import os
from dataclasses import dataclass


@dataclass
class Settings:
    """后台管理配置"""

    # 数据库
    db_path: str = "data/bookstore.db"

    # 管理员令牌，为空时不校验
    admin_token: str = ""

    # 日志
    log_level: str = "INFO"

    # 统计
    low_stock_threshold: int = 10
    dashboard_limit: int = 10

    # 诊断探测目标
    diagnostics_api_base: str = "http://localhost:5000/api"
    diagnostics_recommendations_base: str = "http://localhost:4000/api"

    # 服务监听
    host: str = "127.0.0.1"
    port: int = 8000

    @classmethod
    def from_env(cls) -> "Settings":
        """从环境变量加载配置"""
        return cls(
            db_path=os.getenv("BOOKSTORE_DB_PATH", cls.db_path),
            admin_token=os.getenv("ADMIN_TOKEN", cls.admin_token),
            log_level=os.getenv("LOG_LEVEL", cls.log_level).upper(),
            low_stock_threshold=int(os.getenv("LOW_STOCK_THRESHOLD", cls.low_stock_threshold)),
            dashboard_limit=int(os.getenv("DASHBOARD_LIMIT", cls.dashboard_limit)),
            diagnostics_api_base=os.getenv("DIAGNOSTICS_API_BASE", cls.diagnostics_api_base),
            diagnostics_recommendations_base=os.getenv(
                "DIAGNOSTICS_RECOMMENDATIONS_BASE", cls.diagnostics_recommendations_base
            ),
            host=os.getenv("HOST", cls.host),
            port=int(os.getenv("PORT", cls.port)),
        )
