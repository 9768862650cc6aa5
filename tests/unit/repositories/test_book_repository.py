"""
书籍仓库单元测试（使用临时SQLite数据库）
"""
import sqlite3
import pytest

from bookstore_admin.models.models import Book
from bookstore_admin.repositories.book_repository import BookRepository
from bookstore_admin.repositories.query_builder import Pagination
from tests.fixtures.sample_data import seed_database


@pytest.mark.unit
class TestBookRepository:
    """书籍仓库测试类"""

    @pytest.fixture
    def repo(self, test_db):
        seed_database(test_db)
        return BookRepository(test_db)

    def test_get_by_isbn_resolves_names(self, repo):
        book = repo.get_by_isbn("9780201633610")

        assert book["title"] == "Design Patterns"
        assert book["author_name"] == "Erich Gamma"
        assert book["publisher_name"] == "Addison-Wesley"
        assert book["category_name"] == "Programming"

    def test_get_by_isbn_not_found(self, repo):
        assert repo.get_by_isbn("0000000000") is None

    def test_paginated_orders_by_title(self, repo):
        rows, summary = repo.get_paginated(Pagination.from_params(1, 2))

        assert [row["title"] for row in rows] == ["Design Patterns", "Introduction to Algorithms"]
        assert summary == {"page": 1, "per_page": 2, "pages": 2, "total": 3}

    def test_search_is_case_insensitive_across_columns(self, repo):
        by_title, _ = repo.get_paginated(Pagination(), search="pride")
        by_author, _ = repo.get_paginated(Pagination(), search="CORMEN")
        by_isbn, _ = repo.get_paginated(Pagination(), search="0201633")

        assert [row["isbn"] for row in by_title] == ["9780141439518"]
        assert [row["isbn"] for row in by_author] == ["9780262033848"]
        assert [row["isbn"] for row in by_isbn] == ["9780201633610"]

    def test_count_matches_rows_for_filter(self, repo):
        rows, summary = repo.get_paginated(Pagination.from_params(1, 100), search="97802")
        assert summary["total"] == len(rows) == 2

    def test_page_beyond_end_is_empty(self, repo):
        rows, summary = repo.get_paginated(Pagination.from_params(5, 20))
        assert rows == []
        assert summary["total"] == 3

    def test_create_reuses_existing_author_and_creates_new_publisher(self, repo, test_db):
        repo.create(Book(
            isbn="9780201485677",
            title="Refactoring",
            author_name="Erich Gamma",
            publisher_name="Brand New Press",
            category_name="Programming",
            price=47.99,
            stock_quantity=5,
        ))

        book = repo.get_by_isbn("9780201485677")
        assert book["author_name"] == "Erich Gamma"
        assert book["publisher_name"] == "Brand New Press"
        authors = test_db.execute_query("SELECT * FROM authors WHERE author_name = 'Erich Gamma'")
        assert len(authors) == 1

    def test_create_with_unknown_category_leaves_it_empty(self, repo):
        repo.create(Book(isbn="111", title="Loose Leaf", category_name="Nonexistent"))
        assert repo.get_by_isbn("111")["category_name"] is None

    def test_create_duplicate_isbn_raises_integrity_error(self, repo):
        with pytest.raises(sqlite3.IntegrityError):
            repo.create(Book(isbn="9780201633610", title="Duplicate"))

    def test_create_without_title_raises_integrity_error(self, repo):
        with pytest.raises(sqlite3.IntegrityError):
            repo.create(Book(isbn="222", title=None))

    def test_update_overwrites_all_fields_but_not_isbn(self, repo):
        affected = repo.update("9780201633610", Book(
            isbn="ignored",
            title="Design Patterns (2nd)",
            author_name="Gang of Four",
            price=60.0,
            stock_quantity=None,
        ))

        book = repo.get_by_isbn("9780201633610")
        assert affected == 1
        assert book["title"] == "Design Patterns (2nd)"
        assert book["author_name"] == "Gang of Four"
        assert book["publisher_name"] is None
        assert book["stock_quantity"] is None
        assert repo.get_by_isbn("ignored") is None

    def test_update_missing_isbn_affects_nothing(self, repo):
        assert repo.update("missing", Book(isbn="missing", title="x")) == 0

    def test_update_missing_isbn_leaves_lookups_untouched(self, repo, test_db):
        authors_before = test_db.execute_query("SELECT * FROM authors")

        repo.update("missing", Book(isbn="missing", title="x", author_name="Ghost", publisher_name="Nobody"))

        assert test_db.execute_query("SELECT * FROM authors") == authors_before
        assert test_db.execute_query("SELECT * FROM publishers WHERE publisher_name = 'Nobody'") == []

    def test_delete_is_idempotent(self, repo):
        assert repo.delete("9780141439518") == 1
        assert repo.delete("9780141439518") == 0

    def test_low_stock_books_sorted_ascending(self, repo):
        rows = repo.get_low_stock_books(threshold=10, limit=10)
        assert [row["stock_quantity"] for row in rows] == [0, 3]
