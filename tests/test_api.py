"""
Unit Tests for the Blog Data Read API.

Uses Flask's test client to exercise every endpoint without starting a
server. The app is built with the minimal fixture payload so results
don't depend on the bundled content, except where noted.

Fixtures:
    - client: test client serving the minimal payload
    - bundled_client: test client serving the bundled BLOG_DATA
"""
import pytest

from api import create_app
from config import get_default_config
from content import BLOG_DATA, BlogDataValidationError


@pytest.fixture
def client(minimal_blog_data):
    """Create a Flask test client serving the minimal payload."""
    app = create_app(minimal_blog_data, config=get_default_config())
    app.config["TESTING"] = True

    with app.test_client() as client:
        yield client


@pytest.fixture
def bundled_client():
    app = create_app(config=get_default_config())
    app.config["TESTING"] = True

    with app.test_client() as client:
        yield client


def test_health_check(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.get_json() == {"status": "healthy"}


def test_get_full_blog_data(client, minimal_payload):
    response = client.get("/api/blog-data")

    assert response.status_code == 200
    assert response.get_json() == minimal_payload


def test_bundled_blog_data(bundled_client):
    """Without explicit data the app publishes the bundled payload."""
    data = bundled_client.get("/api/blog-data").get_json()

    assert len(data["blogs"]) == 2
    assert len(data["categories"]) == 4
    assert data["blogs"][0]["id"] == "database-over-indexing"
    assert data["blogs"][0]["content"][1] == {
        "type": "heading",
        "level": 2,
        "text": "The Hidden Costs of Indexes",
    }
    assert data == BLOG_DATA.to_dict()


def test_list_blogs_returns_summaries(client):
    response = client.get("/api/blogs")
    data = response.get_json()

    assert response.status_code == 200
    assert data["count"] == 2
    assert [post["slug"] for post in data["blogs"]] == ["caching-basics-for-apis", "ci-pipelines-that-scale"]
    assert all("content" not in post for post in data["blogs"])


def test_list_blogs_filtered_by_category(client):
    data = client.get("/api/blogs?category=devops").get_json()

    assert data["count"] == 1
    assert data["blogs"][0]["id"] == "ci-pipelines"


def test_list_blogs_filtered_by_tags(client):
    data = client.get("/api/blogs?tag=redis&tag=ci").get_json()

    assert [post["id"] for post in data["blogs"]] == ["caching-basics", "ci-pipelines"]


def test_list_blogs_exclude_tag(client):
    data = client.get("/api/blogs?exclude_tag=Caching").get_json()

    assert [post["id"] for post in data["blogs"]] == ["ci-pipelines"]


def test_list_blogs_no_match(client):
    data = client.get("/api/blogs?tag=kubernetes").get_json()

    assert data == {"blogs": [], "count": 0}


def test_get_blog_by_slug(client, minimal_payload):
    response = client.get("/api/blogs/caching-basics-for-apis")

    assert response.status_code == 200
    assert response.get_json() == minimal_payload["blogs"][0]


def test_get_blog_unknown_slug(client):
    response = client.get("/api/blogs/does-not-exist")

    assert response.status_code == 404
    assert response.get_json() == {"status": "error", "message": "Blog post not found"}


def test_list_categories(client, minimal_payload):
    data = client.get("/api/categories").get_json()

    assert data["count"] == 3
    assert data["categories"] == minimal_payload["categories"]


def test_list_category_blogs(client):
    response = client.get("/api/categories/backend-strategy/blogs")
    data = response.get_json()

    assert response.status_code == 200
    assert data["category"]["name"] == "Backend Strategy"
    assert [post["id"] for post in data["blogs"]] == ["caching-basics"]


def test_list_category_blogs_empty(client):
    data = client.get("/api/categories/frontend/blogs").get_json()

    assert data["count"] == 0


def test_list_category_blogs_unknown_category(client):
    response = client.get("/api/categories/unknown/blogs")

    assert response.status_code == 404
    assert response.get_json()["message"] == "Category not found"


def test_unknown_route_returns_json_404(client):
    response = client.get("/api/nothing-here")

    assert response.status_code == 404
    assert response.get_json()["status"] == "error"


def test_write_methods_not_allowed(client):
    assert client.post("/api/blogs", json={}).status_code == 405
    assert client.delete("/api/blogs/caching-basics-for-apis").status_code == 405


def test_create_app_loads_configured_path(write_payload, minimal_payload):
    config = get_default_config()
    config["content"]["path"] = str(write_payload(minimal_payload))

    app = create_app(config=config)

    assert app.config["BLOG_DATA"].blogs[0].id == "caching-basics"


def test_create_app_strict_categories_rejects_unknown_category(write_payload, minimal_payload):
    minimal_payload["blogs"][1]["category"] = "Infrastructure"
    config = get_default_config()
    config["content"]["path"] = str(write_payload(minimal_payload))
    config["content"]["strict_categories"] = True

    with pytest.raises(BlogDataValidationError):
        create_app(config=config)


def test_cors_headers_when_enabled(minimal_blog_data):
    config = get_default_config()
    config["cors"] = {"enabled": True, "origins": ["https://blog.example.com"]}
    app = create_app(minimal_blog_data, config=config)

    with app.test_client() as client:
        response = client.get("/api/blogs", headers={"Origin": "https://blog.example.com"})

    assert response.headers.get("Access-Control-Allow-Origin") == "https://blog.example.com"
