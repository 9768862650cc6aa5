"""
书籍业务服务层
"""
import logging
from typing import Any, Dict, Optional

from ..repositories.book_repository import BookRepository
from ..repositories.query_builder import Pagination
from ..models.models import Book
from ..exceptions import BookNotFoundError
from .response_shaper import BOOK_FIELDS, LOW_STOCK_FIELDS, rename, rename_all

logger = logging.getLogger(__name__)


class BookService:
    """书籍服务类"""

    def __init__(self, book_repository: BookRepository):
        self.book_repository = book_repository

    def list_books(self, pagination: Pagination, search: Optional[str] = None) -> Dict[str, Any]:
        rows, summary = self.book_repository.get_paginated(pagination, search)
        return {"books": rename_all(rows, BOOK_FIELDS), "pagination": summary}

    def get_book(self, isbn: str) -> Dict[str, Any]:
        """根据ISBN获取书籍"""
        book = self.book_repository.get_by_isbn(isbn)
        if not book:
            raise BookNotFoundError("Book not found")
        return rename(book, BOOK_FIELDS)

    def create_book(self, book: Book) -> str:
        return self.book_repository.create(book)

    def update_book(self, isbn: str, book: Book) -> int:
        """更新书籍，不存在时同样视为成功"""
        affected = self.book_repository.update(isbn, book)
        if affected == 0:
            logger.info(f"更新书籍 {isbn} 未命中任何记录")
        return affected

    def delete_book(self, isbn: str) -> int:
        """删除书籍，重复删除同样视为成功"""
        affected = self.book_repository.delete(isbn)
        if affected == 0:
            logger.info(f"删除书籍 {isbn} 未命中任何记录")
        return affected

    def get_low_stock_books(self, threshold: int = 10, limit: int = 10):
        rows = self.book_repository.get_low_stock_books(threshold, limit)
        return rename_all(rows, LOW_STOCK_FIELDS)
