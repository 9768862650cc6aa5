"""
列表查询构造和分页单元测试
"""
import pytest

from bookstore_admin.repositories.query_builder import SQLITE_MAX_INT, ListQuery, Pagination, fetch_page


@pytest.mark.unit
class TestPagination:
    """分页参数测试类"""

    def test_defaults(self):
        pagination = Pagination.from_params()
        assert pagination.page == 1
        assert pagination.per_page == 20
        assert pagination.offset == 0

    def test_offset_from_page(self):
        pagination = Pagination.from_params(page=3, per_page=15)
        assert pagination.limit == 15
        assert pagination.offset == 30

    @pytest.mark.parametrize("page,per_page,expected", [
        (0, 20, (1, 20)),
        (-4, 20, (1, 20)),
        (2, 0, (2, 1)),
        (2, -10, (2, 1)),
    ])
    def test_clamps_to_minimum(self, page, per_page, expected):
        """page 和 per_page 小于1时按1处理"""
        pagination = Pagination.from_params(page, per_page)
        assert (pagination.page, pagination.per_page) == expected
        assert pagination.offset >= 0

    def test_no_upper_bound(self):
        assert Pagination.from_params(1, 5000).per_page == 5000

    def test_limit_and_offset_fit_sqlite_integers(self):
        pagination = Pagination.from_params(10 ** 18, 2 ** 63)

        assert pagination.page == 10 ** 18
        assert pagination.limit == SQLITE_MAX_INT
        assert pagination.offset == SQLITE_MAX_INT

    @pytest.mark.parametrize("total,per_page,pages", [
        (0, 20, 0),
        (1, 20, 1),
        (20, 20, 1),
        (21, 20, 2),
        (95, 10, 10),
    ])
    def test_summary_pages_is_ceiling(self, total, per_page, pages):
        summary = Pagination.from_params(1, per_page).summary(total)
        assert summary == {"page": 1, "per_page": per_page, "pages": pages, "total": total}


@pytest.mark.unit
class TestListQuery:
    """列表查询测试类"""

    def test_no_filters(self):
        query = ListQuery(base="SELECT * FROM books b", order_by="b.title")
        sql, params = query.page_sql(Pagination.from_params(2, 10))

        assert "WHERE" not in sql
        assert sql.endswith("ORDER BY b.title LIMIT ? OFFSET ?")
        assert params == (10, 10)

    def test_search_binds_one_pattern_per_column(self):
        query = ListQuery(base="SELECT * FROM books b").search("python", "b.title", "b.isbn")
        sql, params = query.count_sql()

        assert "(b.title LIKE ? OR b.isbn LIKE ?)" in sql
        assert params == ("%python%", "%python%")

    def test_empty_search_adds_no_condition(self):
        query = ListQuery(base="SELECT * FROM books b").search("", "b.title")
        assert query.conditions == []
        assert query.params == []

    def test_equals_and_group_by(self):
        query = ListQuery(
            base="SELECT o.order_id FROM orders o",
            group_by="o.order_id",
            order_by="o.created_at DESC"
        ).equals("o.payment_status", "pending")
        sql, params = query.page_sql(Pagination())

        assert "WHERE o.payment_status = ? GROUP BY o.order_id ORDER BY o.created_at DESC" in sql
        assert params == ("pending", 20, 0)

    def test_count_wraps_same_predicate(self):
        """计数查询与数据查询使用相同条件和参数"""
        query = ListQuery(base="SELECT * FROM orders o", order_by="o.created_at").equals(
            "o.payment_status", "completed"
        )
        count_sql, count_params = query.count_sql()
        page_sql, page_params = query.page_sql(Pagination())

        assert count_sql.startswith("SELECT COUNT(*) AS total FROM (")
        assert "o.payment_status = ?" in count_sql
        assert "ORDER BY" not in count_sql
        assert "LIMIT" not in count_sql
        assert page_params[:len(count_params)] == count_params

    def test_fetch_page_runs_count_then_page(self):
        class FakeDb:
            def __init__(self):
                self.calls = []

            def execute_query(self, query, params=()):
                self.calls.append((query, params))
                if "COUNT(*)" in query:
                    return [{"total": 41}]
                return [{"isbn": "1"}, {"isbn": "2"}]

        db = FakeDb()
        rows, summary = fetch_page(db, ListQuery(base="SELECT * FROM books"), Pagination.from_params(3, 20))

        assert len(db.calls) == 2
        assert rows == [{"isbn": "1"}, {"isbn": "2"}]
        assert summary == {"page": 3, "per_page": 20, "pages": 3, "total": 41}
        assert db.calls[1][1] == (20, 40)
