"""
pytest配置文件，定义全局fixtures和测试配置
"""
import tempfile
from pathlib import Path
from typing import Generator
import pytest
from fastapi.testclient import TestClient

from bookstore_admin.config import Settings
from bookstore_admin.main import create_app
from bookstore_admin.models.database import Database


@pytest.fixture
def temp_db_path() -> Generator[str, None, None]:
    """创建临时数据库文件路径"""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield str(Path(temp_dir) / "bookstore_test.db")


@pytest.fixture
def test_db(temp_db_path: str) -> Database:
    """创建测试数据库实例"""
    return Database(temp_db_path)


@pytest.fixture
def settings(temp_db_path: str) -> Settings:
    """测试配置，默认不校验管理员令牌"""
    return Settings(db_path=temp_db_path, log_level="WARNING")


@pytest.fixture
def client(settings: Settings, test_db: Database) -> Generator[TestClient, None, None]:
    """创建FastAPI测试客户端"""
    app = create_app(settings=settings, database=test_db)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_book_data():
    """示例书籍数据"""
    return {
        "isbn": "9780132350884",
        "title": "Clean Code",
        "author_name": "Robert C. Martin",
        "publisher_name": "Prentice Hall",
        "category_name": None,
        "price": 37.99,
        "stock_quantity": 25,
        "pages": 464,
        "description": "A handbook of agile software craftsmanship",
        "image": "https://example.com/clean-code.jpg",
        "publication_date": "2008-08-01"
    }


@pytest.fixture
def sample_user_data():
    """示例用户数据"""
    return {
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "phone": "555-0100",
        "address": "12 St James's Square",
        "city": "London",
        "postal_code": "SW1Y 4JH"
    }


def pytest_configure(config):
    """配置pytest标记"""
    config.addinivalue_line(
        "markers", "unit: 单元测试"
    )
    config.addinivalue_line(
        "markers", "integration: 集成测试"
    )
    config.addinivalue_line(
        "markers", "e2e: 端到端测试"
    )
