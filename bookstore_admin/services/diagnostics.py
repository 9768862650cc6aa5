"""
依赖服务诊断
依次请求各个健康检查地址并记录结果，不重试
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import aiohttp

from ..config import Settings

logger = logging.getLogger(__name__)


@dataclass
class DiagnosticCase:
    """单个诊断项"""
    name: str
    url: str
    description: str


def default_cases(settings: Settings) -> List[DiagnosticCase]:
    api_base = settings.diagnostics_api_base.rstrip("/")
    recommendations_base = settings.diagnostics_recommendations_base.rstrip("/")
    return [
        DiagnosticCase(
            name="E-commerce API Health",
            url=api_base,
            description="Checking if the main backend is running",
        ),
        DiagnosticCase(
            name="Books Endpoint",
            url=f"{api_base}/books",
            description="Checking if books can be fetched",
        ),
        DiagnosticCase(
            name="Categories Endpoint",
            url=f"{api_base}/categories",
            description="Checking if categories can be fetched",
        ),
        DiagnosticCase(
            name="Recommendations API",
            url=recommendations_base,
            description="Checking if recommendation backend is running",
        ),
    ]


class DiagnosticsProbe:
    """诊断探测器"""

    def __init__(self, cases: List[DiagnosticCase]):
        self.cases = cases

    async def check(self, session: aiohttp.ClientSession, case: DiagnosticCase) -> Dict[str, Any]:
        """请求单个地址，请求或JSON解析失败都记为 error"""
        try:
            async with session.get(case.url) as response:
                data = await response.json(content_type=None)
                ok = 200 <= response.status < 300
                return {
                    "status": "success" if ok else "error",
                    "message": "Connected successfully" if ok else f"HTTP {response.status}",
                    "data": data,
                }
        except Exception as e:
            logger.warning(f"诊断项 {case.name} 失败: {e}")
            return {
                "status": "error",
                "message": str(e) or e.__class__.__name__,
                "data": None,
            }

    async def run(self, session: Optional[aiohttp.ClientSession] = None) -> Dict[str, Dict[str, Any]]:
        """按顺序执行所有诊断项，结果以诊断项名称为键"""
        if session is None:
            async with aiohttp.ClientSession() as own_session:
                return await self.run(own_session)

        results = {}
        for case in self.cases:
            result = await self.check(session, case)
            result["url"] = case.url
            result["description"] = case.description
            results[case.name] = result
        logger.info(f"诊断完成: {sum(1 for r in results.values() if r['status'] == 'success')}/{len(results)} 通过")
        return results
