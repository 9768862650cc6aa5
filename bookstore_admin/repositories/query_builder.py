"""
列表查询构造和分页
"""
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 20
# SQLite 整数参数上限
SQLITE_MAX_INT = 2 ** 63 - 1


@dataclass
class Pagination:
    """分页参数，page 和 per_page 最小为 1，不设上限"""
    page: int = DEFAULT_PAGE
    per_page: int = DEFAULT_PER_PAGE

    @classmethod
    def from_params(cls, page: Optional[int] = None, per_page: Optional[int] = None) -> "Pagination":
        page = DEFAULT_PAGE if page is None else int(page)
        per_page = DEFAULT_PER_PAGE if per_page is None else int(per_page)
        return cls(page=max(page, 1), per_page=max(per_page, 1))

    @property
    def limit(self) -> int:
        return min(self.per_page, SQLITE_MAX_INT)

    @property
    def offset(self) -> int:
        # 超出范围的页码落到空结果
        return min((self.page - 1) * self.per_page, SQLITE_MAX_INT)

    def summary(self, total: int) -> Dict[str, int]:
        """生成返回给前端的分页摘要"""
        return {
            "page": self.page,
            "per_page": self.per_page,
            "pages": math.ceil(total / self.per_page),
            "total": total,
        }


@dataclass
class ListQuery:
    """带过滤条件的列表查询

    数据查询和计数查询共用同一组 WHERE 条件和参数，计数查询直接包裹
    过滤后的查询，两者的总行数不会不一致。
    """
    base: str
    group_by: Optional[str] = None
    order_by: Optional[str] = None
    conditions: List[str] = field(default_factory=list)
    params: List[Any] = field(default_factory=list)

    def where(self, clause: str, *params: Any) -> "ListQuery":
        self.conditions.append(clause)
        self.params.extend(params)
        return self

    def search(self, term: Optional[str], *columns: str) -> "ListQuery":
        """多列模糊搜索（SQLite 的 LIKE 对 ASCII 不区分大小写）"""
        if term:
            pattern = f"%{term}%"
            clause = " OR ".join(f"{column} LIKE ?" for column in columns)
            self.where(f"({clause})", *([pattern] * len(columns)))
        return self

    def equals(self, column: str, value: Any) -> "ListQuery":
        """精确匹配，value 为空时不加条件"""
        if value:
            self.where(f"{column} = ?", value)
        return self

    def _filtered(self) -> str:
        sql = self.base.strip()
        if self.conditions:
            sql += " WHERE " + " AND ".join(self.conditions)
        if self.group_by:
            sql += f" GROUP BY {self.group_by}"
        return sql

    def count_sql(self) -> Tuple[str, tuple]:
        return f"SELECT COUNT(*) AS total FROM ({self._filtered()}) AS counted", tuple(self.params)

    def page_sql(self, pagination: Pagination) -> Tuple[str, tuple]:
        sql = self._filtered()
        if self.order_by:
            sql += f" ORDER BY {self.order_by}"
        sql += " LIMIT ? OFFSET ?"
        return sql, tuple(self.params) + (pagination.limit, pagination.offset)


def fetch_page(db, query: ListQuery, pagination: Pagination) -> Tuple[List[Dict], Dict[str, int]]:
    """执行计数和分页查询，返回 (rows, 分页摘要)"""
    count_sql, count_params = query.count_sql()
    result = db.execute_query(count_sql, count_params)
    total = int(result[0]["total"]) if result else 0

    page_sql, page_params = query.page_sql(pagination)
    rows = db.execute_query(page_sql, page_params)
    return rows, pagination.summary(total)
