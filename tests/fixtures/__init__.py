"""
测试fixtures包
"""
from .sample_data import (
    SAMPLE_BOOKS,
    SAMPLE_USERS,
    SAMPLE_ORDERS,
    seed_database
)

__all__ = [
    "SAMPLE_BOOKS",
    "SAMPLE_USERS",
    "SAMPLE_ORDERS",
    "seed_database"
]
