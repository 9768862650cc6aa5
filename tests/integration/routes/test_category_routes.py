"""
分类、作者、出版社路由集成测试
"""
import pytest


@pytest.mark.integration
class TestCategoryRoutes:
    """分类路由集成测试类"""

    def test_create_then_list(self, client):
        response = client.post("/admin/categories", json={"name": "Fiction", "description": "Fiction books"})

        assert response.status_code == 200
        assert response.json()["message"] == "Category created successfully"
        categories = client.get("/admin/categories").json()["categories"]
        assert any(
            c["name"] == "Fiction" and c["description"] == "Fiction books" for c in categories
        )

    def test_duplicate_category_is_conflict(self, client):
        client.post("/admin/categories", json={"name": "Fiction"})
        response = client.post("/admin/categories", json={"name": "Fiction"})

        assert response.status_code == 409
        assert response.json()["error"] == "Failed to create category"

    def test_create_without_name_is_rejected(self, client):
        response = client.post("/admin/categories", json={"description": "nameless"})
        assert response.status_code == 400

    def test_update_and_get_by_name(self, client):
        client.post("/admin/categories", json={"name": "Science Fiction", "description": "old"})
        response = client.put("/admin/categories/Science Fiction", json={"description": "new"})

        assert response.status_code == 200
        category = client.get("/admin/categories/Science Fiction").json()["category"]
        assert category["description"] == "new"

    def test_get_missing_category_is_404(self, client):
        assert client.get("/admin/categories/Nope").status_code == 404

    def test_delete_twice(self, client):
        client.post("/admin/categories", json={"name": "Poetry"})
        assert client.delete("/admin/categories/Poetry").status_code == 200
        assert client.delete("/admin/categories/Poetry").status_code == 200
        assert client.get("/admin/categories").json()["categories"] == []


@pytest.mark.integration
class TestLookupRoutes:
    """作者、出版社路由集成测试类"""

    @pytest.mark.parametrize("resource", ["authors", "publishers"])
    def test_crud(self, client, resource):
        label = resource[:-1].capitalize()
        created = client.post(f"/admin/{resource}", json={"name": "Someone"}).json()
        assert created["message"] == f"{label} created successfully"

        item_id = created["id"]
        client.put(f"/admin/{resource}/{item_id}", json={"name": "Someone Else"})
        assert client.get(f"/admin/{resource}").json()[resource] == [{"id": item_id, "name": "Someone Else"}]

        assert client.delete(f"/admin/{resource}/{item_id}").status_code == 200
        assert client.get(f"/admin/{resource}").json()[resource] == []

    def test_same_author_name_twice_is_allowed(self, client):
        client.post("/admin/authors", json={"name": "John Smith"})
        response = client.post("/admin/authors", json={"name": "John Smith"})

        assert response.status_code == 200
        assert len(client.get("/admin/authors").json()["authors"]) == 2
