"""
书籍数据访问层
"""
import logging
from typing import List, Optional, Dict, Tuple

from ..models.database import Database
from ..models.models import Book
from .category_repository import CategoryRepository
from .lookup_repository import AuthorRepository, PublisherRepository
from .query_builder import ListQuery, Pagination, fetch_page

logger = logging.getLogger(__name__)

BOOK_SELECT = """
    SELECT
        b.isbn, b.title, b.price, b.stock_quantity, b.pages, b.description,
        b.image_url, b.publication_date, b.created_at, b.updated_at,
        a.author_name, p.publisher_name, c.category_name
    FROM books b
    LEFT JOIN authors a ON b.author_id = a.author_id
    LEFT JOIN publishers p ON b.publisher_id = p.publisher_id
    LEFT JOIN categories c ON b.category_id = c.category_id
"""


class BookRepository:
    """书籍仓库类"""

    def __init__(self, db: Database):
        self.db = db
        self.authors = AuthorRepository(db)
        self.publishers = PublisherRepository(db)

    def list_query(self, search: Optional[str] = None) -> ListQuery:
        """书籍列表查询，按标题、ISBN、作者名模糊搜索"""
        return ListQuery(base=BOOK_SELECT, order_by="b.title").search(
            search, "b.title", "b.isbn", "a.author_name"
        )

    def get_paginated(self, pagination: Pagination, search: Optional[str] = None) -> Tuple[List[Dict], Dict]:
        return fetch_page(self.db, self.list_query(search), pagination)

    def get_by_isbn(self, isbn: str) -> Optional[Dict]:
        """根据ISBN获取书籍"""
        results = self.db.execute_query(BOOK_SELECT + " WHERE b.isbn = ?", (isbn,))
        return results[0] if results else None

    def _resolve_references(self, cursor, book: Book) -> Tuple:
        return (
            self.authors.resolve_id(cursor, book.author_name),
            self.publishers.resolve_id(cursor, book.publisher_name),
            CategoryRepository.resolve_id(cursor, book.category_name),
        )

    def create(self, book: Book) -> str:
        """创建书籍，不预先检查ISBN是否存在"""
        query = """
            INSERT INTO books (isbn, title, author_id, publisher_id, category_id,
                               price, stock_quantity, pages, description, image_url, publication_date)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
        """
        with self.db.get_connection() as conn:
            cursor = conn.cursor()
            author_id, publisher_id, category_id = self._resolve_references(cursor, book)
            cursor.execute(query, (
                book.isbn, book.title, author_id, publisher_id, category_id,
                book.price, book.stock_quantity, book.pages, book.description,
                book.image_url, book.publication_date
            ))
        logger.info(f"成功插入书籍: ISBN={book.isbn}, 标题={book.title}")
        return book.isbn

    def update(self, isbn: str, book: Book) -> int:
        """整行覆盖更新，ISBN不可修改，返回影响行数"""
        query = """
            UPDATE books SET
                title = ?, author_id = ?, publisher_id = ?, category_id = ?,
                price = ?, stock_quantity = ?, pages = ?, description = ?,
                image_url = ?, publication_date = ?, updated_at = CURRENT_TIMESTAMP
            WHERE isbn = ?
        """
        with self.db.get_connection() as conn:
            cursor = conn.cursor()
            # 书籍不存在时不解析名称，避免新建作者和出版社
            cursor.execute("SELECT 1 FROM books WHERE isbn = ?", (isbn,))
            if cursor.fetchone() is None:
                return 0
            author_id, publisher_id, category_id = self._resolve_references(cursor, book)
            cursor.execute(query, (
                book.title, author_id, publisher_id, category_id,
                book.price, book.stock_quantity, book.pages, book.description,
                book.image_url, book.publication_date, isbn
            ))
            return cursor.rowcount

    def delete(self, isbn: str) -> int:
        return self.db.execute_update("DELETE FROM books WHERE isbn = ?", (isbn,))

    def get_low_stock_books(self, threshold: int = 10, limit: int = 10) -> List[Dict]:
        """获取低库存书籍，库存升序"""
        query = """
            SELECT b.isbn, b.title, b.stock_quantity, b.image_url, a.author_name
            FROM books b
            LEFT JOIN authors a ON b.author_id = a.author_id
            WHERE b.stock_quantity < ?
            ORDER BY b.stock_quantity ASC
            LIMIT ?
        """
        return self.db.execute_query(query, (threshold, limit))
