#!/usr/bin/env python3
"""
用户管理路由
"""
from fastapi import APIRouter, Depends, Query
from typing import Optional
from pydantic import BaseModel
import logging

from ..exceptions import AdminError, NotFoundError, translate_error
from ..models.database import Database
from ..models.models import User
from ..repositories.query_builder import DEFAULT_PAGE, DEFAULT_PER_PAGE, Pagination
from ..repositories.user_repository import UserRepository
from ..services.response_shaper import shape_user
from .dependencies import get_database

logger = logging.getLogger(__name__)

user_router = APIRouter(prefix="/users", tags=["users"])

class UserUpdateRequest(BaseModel):
    """更新用户请求，name 按第一个空格拆分为名和姓"""
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    user_type: Optional[str] = None

    def to_user(self) -> User:
        first_name, last_name = User.split_name(self.name)
        return User(
            first_name=first_name,
            last_name=last_name,
            email=self.email,
            phone=self.phone,
            address=self.address,
            city=self.city,
            user_type=self.user_type,
        )

class UserCreateRequest(UserUpdateRequest):
    """创建用户请求"""
    postal_code: Optional[str] = None
    user_type: Optional[str] = "customer"

    def to_user(self) -> User:
        user = super().to_user()
        user.postal_code = self.postal_code
        return user

@user_router.get("")
async def get_users(
    page: int = Query(DEFAULT_PAGE),
    per_page: int = Query(DEFAULT_PER_PAGE),
    db: Database = Depends(get_database)
):
    """获取顾客列表（分页，附头像地址）"""
    try:
        rows, summary = UserRepository(db).get_paginated(Pagination.from_params(page, per_page))
        return {
            "success": True,
            "users": [shape_user(row) for row in rows],
            "pagination": summary
        }
    except Exception as e:
        logger.error(f"获取用户列表失败: {e}")
        raise translate_error(e, "Failed to fetch users")

@user_router.get("/{user_id}")
async def get_user(user_id: int, db: Database = Depends(get_database)):
    """获取用户详情"""
    try:
        user = UserRepository(db).get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        return {"success": True, "user": shape_user(user)}
    except AdminError:
        raise
    except Exception as e:
        logger.error(f"获取用户详情失败: {e}")
        raise translate_error(e, "Failed to fetch user")

@user_router.post("")
async def create_user(request: UserCreateRequest, db: Database = Depends(get_database)):
    """创建用户"""
    try:
        user_id = UserRepository(db).create(request.to_user())
        return {"success": True, "message": "User created successfully", "id": user_id}
    except Exception as e:
        logger.error(f"创建用户失败: {e}")
        raise translate_error(e, "Failed to create user")

@user_router.put("/{user_id}")
async def update_user(user_id: int, request: UserUpdateRequest, db: Database = Depends(get_database)):
    """更新用户信息"""
    try:
        if UserRepository(db).update(user_id, request.to_user()) == 0:
            logger.info(f"更新用户 {user_id} 未命中任何记录")
        return {"success": True, "message": "User updated successfully"}
    except Exception as e:
        logger.error(f"更新用户失败: {e}")
        raise translate_error(e, "Failed to update user")

@user_router.delete("/{user_id}")
async def delete_user(user_id: int, db: Database = Depends(get_database)):
    """删除用户"""
    try:
        if UserRepository(db).delete(user_id) == 0:
            logger.info(f"删除用户 {user_id} 未命中任何记录")
        return {"success": True, "message": "User deleted successfully"}
    except Exception as e:
        logger.error(f"删除用户失败: {e}")
        raise translate_error(e, "Failed to delete user")
