#!/usr/bin/env python3
"""
书籍管理路由
"""
from fastapi import APIRouter, Depends, Query
from typing import Optional
from pydantic import BaseModel
import logging

from ..exceptions import AdminError, translate_error
from ..models.models import Book
from ..repositories.query_builder import DEFAULT_PAGE, DEFAULT_PER_PAGE, Pagination
from ..services.book_service import BookService
from .dependencies import get_book_service

logger = logging.getLogger(__name__)

# 创建路由
book_router = APIRouter(prefix="/books", tags=["books"])

class BookUpdateRequest(BaseModel):
    """更新书籍请求（整行覆盖）"""
    title: Optional[str] = None
    author_name: Optional[str] = None
    publisher_name: Optional[str] = None
    category_name: Optional[str] = None
    price: Optional[float] = None
    stock_quantity: Optional[int] = None
    pages: Optional[int] = None
    description: Optional[str] = None
    image: Optional[str] = None
    publication_date: Optional[str] = None

    def to_book(self, isbn: str) -> Book:
        return Book(
            isbn=isbn,
            title=self.title,
            author_name=self.author_name,
            publisher_name=self.publisher_name,
            category_name=self.category_name,
            price=self.price,
            stock_quantity=self.stock_quantity,
            pages=self.pages,
            description=self.description,
            image_url=self.image,
            publication_date=self.publication_date,
        )

class BookCreateRequest(BookUpdateRequest):
    """创建书籍请求"""
    isbn: str

@book_router.get("")
async def get_books(
    search: Optional[str] = None,
    page: int = Query(DEFAULT_PAGE),
    per_page: int = Query(DEFAULT_PER_PAGE),
    service: BookService = Depends(get_book_service)
):
    """获取书籍列表（支持搜索和分页）"""
    try:
        result = service.list_books(Pagination.from_params(page, per_page), search)
        return {"success": True, **result}
    except Exception as e:
        logger.error(f"获取书籍列表失败: {e}")
        raise translate_error(e, "Failed to fetch books")

@book_router.get("/{isbn}")
async def get_book(isbn: str, service: BookService = Depends(get_book_service)):
    """获取单本书籍详情"""
    try:
        return {"success": True, "book": service.get_book(isbn)}
    except AdminError:
        raise
    except Exception as e:
        logger.error(f"获取书籍详情失败: {e}")
        raise translate_error(e, "Failed to fetch book")

@book_router.post("")
async def create_book(request: BookCreateRequest, service: BookService = Depends(get_book_service)):
    """创建书籍"""
    try:
        service.create_book(request.to_book(request.isbn))
        return {"success": True, "message": "Book created successfully"}
    except Exception as e:
        logger.error(f"创建书籍失败: {e}")
        raise translate_error(e, "Failed to create book")

@book_router.put("/{isbn}")
async def update_book(isbn: str, request: BookUpdateRequest, service: BookService = Depends(get_book_service)):
    """更新书籍信息"""
    try:
        service.update_book(isbn, request.to_book(isbn))
        return {"success": True, "message": "Book updated successfully"}
    except Exception as e:
        logger.error(f"更新书籍失败: {e}")
        raise translate_error(e, "Failed to update book")

@book_router.delete("/{isbn}")
async def delete_book(isbn: str, service: BookService = Depends(get_book_service)):
    """删除书籍"""
    try:
        service.delete_book(isbn)
        return {"success": True, "message": "Book deleted successfully"}
    except Exception as e:
        logger.error(f"删除书籍失败: {e}")
        raise translate_error(e, "Failed to delete book")
