#!/usr/bin/env python3
"""
分类、作者、出版社管理路由
"""
from fastapi import APIRouter, Depends
from typing import Optional
from pydantic import BaseModel
import logging

from ..exceptions import AdminError, NotFoundError, translate_error
from ..models.database import Database
from ..models.models import Category
from ..repositories.category_repository import CategoryRepository
from ..repositories.lookup_repository import AuthorRepository, PublisherRepository
from .dependencies import get_database

logger = logging.getLogger(__name__)

category_router = APIRouter(prefix="/categories", tags=["categories"])

class CategoryCreateRequest(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None

class CategoryUpdateRequest(BaseModel):
    description: Optional[str] = None

class NameRequest(BaseModel):
    name: Optional[str] = None

@category_router.get("")
async def get_categories(db: Database = Depends(get_database)):
    """获取全部分类"""
    try:
        return {"success": True, "categories": CategoryRepository(db).list_all()}
    except Exception as e:
        logger.error(f"获取分类列表失败: {e}")
        raise translate_error(e, "Failed to fetch categories")

@category_router.get("/{name}")
async def get_category(name: str, db: Database = Depends(get_database)):
    try:
        category = CategoryRepository(db).get_by_name(name)
        if not category:
            raise NotFoundError("Category not found")
        return {"success": True, "category": category}
    except AdminError:
        raise
    except Exception as e:
        logger.error(f"获取分类失败: {e}")
        raise translate_error(e, "Failed to fetch category")

@category_router.post("")
async def create_category(request: CategoryCreateRequest, db: Database = Depends(get_database)):
    """创建分类，同名分类由唯一约束拒绝"""
    try:
        CategoryRepository(db).create(Category(name=request.name, description=request.description))
        return {"success": True, "message": "Category created successfully"}
    except Exception as e:
        logger.error(f"创建分类失败: {e}")
        raise translate_error(e, "Failed to create category")

@category_router.put("/{name}")
async def update_category(name: str, request: CategoryUpdateRequest, db: Database = Depends(get_database)):
    try:
        if CategoryRepository(db).update(name, request.description) == 0:
            logger.info(f"更新分类 {name} 未命中任何记录")
        return {"success": True, "message": "Category updated successfully"}
    except Exception as e:
        logger.error(f"更新分类失败: {e}")
        raise translate_error(e, "Failed to update category")

@category_router.delete("/{name}")
async def delete_category(name: str, db: Database = Depends(get_database)):
    try:
        if CategoryRepository(db).delete(name) == 0:
            logger.info(f"删除分类 {name} 未命中任何记录")
        return {"success": True, "message": "Category deleted successfully"}
    except Exception as e:
        logger.error(f"删除分类失败: {e}")
        raise translate_error(e, "Failed to delete category")


def build_lookup_router(prefix: str, repository_class, label: str) -> APIRouter:
    """作者、出版社共用的增删改查路由"""
    router = APIRouter(prefix=prefix, tags=[prefix.strip("/")])
    plural = f"{label.lower()}s"

    @router.get("")
    async def list_items(db: Database = Depends(get_database)):
        try:
            return {"success": True, plural: repository_class(db).list_all()}
        except Exception as e:
            logger.error(f"获取{prefix}列表失败: {e}")
            raise translate_error(e, f"Failed to fetch {plural}")

    @router.post("")
    async def create_item(request: NameRequest, db: Database = Depends(get_database)):
        try:
            item_id = repository_class(db).create(request.name)
            return {"success": True, "message": f"{label} created successfully", "id": item_id}
        except Exception as e:
            logger.error(f"创建{prefix}失败: {e}")
            raise translate_error(e, f"Failed to create {label.lower()}")

    @router.put("/{item_id}")
    async def update_item(item_id: int, request: NameRequest, db: Database = Depends(get_database)):
        try:
            repository_class(db).update(item_id, request.name)
            return {"success": True, "message": f"{label} updated successfully"}
        except Exception as e:
            logger.error(f"更新{prefix}失败: {e}")
            raise translate_error(e, f"Failed to update {label.lower()}")

    @router.delete("/{item_id}")
    async def delete_item(item_id: int, db: Database = Depends(get_database)):
        try:
            repository_class(db).delete(item_id)
            return {"success": True, "message": f"{label} deleted successfully"}
        except Exception as e:
            logger.error(f"删除{prefix}失败: {e}")
            raise translate_error(e, f"Failed to delete {label.lower()}")

    return router


author_router = build_lookup_router("/authors", AuthorRepository, "Author")
publisher_router = build_lookup_router("/publishers", PublisherRepository, "Publisher")
