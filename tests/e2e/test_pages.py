"""
test_pages.py - 페이지 라우트 E2E 테스트

엔드포인트:
- GET / (HTML page)
- GET /articles, /articles/{slug} (HTML page)
- GET /calc (HTML page)
- 그 외 → 404 page
"""


class TestIndexPage:
    """홈 화면."""

    def test_index_loads(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "Content Site" in response.text

    def test_index_lists_articles_and_categories(self, client):
        response = client.get("/")

        assert "Hello 2024" in response.text
        assert 'href="/articles/post1"' in response.text
        assert "/articles?category=2024" in response.text


class TestArticlesPage:
    """게시글 목록/상세 화면."""

    def test_list_page(self, client):
        response = client.get("/articles")

        assert response.status_code == 200
        assert "Hello 2024" in response.text
        assert 'href="/articles/2024/hello"' in response.text

    def test_list_page_by_category(self, client):
        response = client.get("/articles", params={"category": "2024"})

        assert "Hello 2024" in response.text
        assert 'href="/articles/post1"' not in response.text

    def test_article_page(self, client):
        response = client.get("/articles/post1")

        assert response.status_code == 200
        assert "<p>hello</p>" in response.text

    def test_missing_article_is_404_page(self, client):
        response = client.get("/articles/missing")

        assert response.status_code == 404
        assert "text/html" in response.headers["content-type"]
        assert "404 Not Found" in response.text

    def test_unreadable_article_is_error_page(self, client, store):
        (store.root / "posts" / "bad.md").write_bytes(b"\xff\xfe\xfa")

        response = client.get("/articles/bad")

        assert response.status_code == 500
        assert "Something went wrong" in response.text


class TestCalcPage:
    """계산기 화면."""

    def test_form(self, client):
        response = client.get("/calc")

        assert response.status_code == 200
        assert "<form" in response.text
        assert "Result" not in response.text

    def test_result(self, client):
        response = client.get("/calc", params={"a": 2, "b": 3, "op": "mul"})

        assert response.status_code == 200
        assert "<strong>6.0</strong>" in response.text

    def test_division_by_zero(self, client):
        response = client.get("/calc", params={"a": 1, "b": 0, "op": "div"})

        assert response.status_code == 400
        assert "Division by zero" in response.text

    def test_unknown_operation(self, client):
        response = client.get("/calc", params={"a": 1, "b": 2, "op": "pow"})

        assert response.status_code == 400
        assert "Unknown operation" in response.text


class TestNotFoundPage:
    """미등록 URI."""

    def test_unknown_uri(self, client):
        response = client.get("/no/such/page")

        assert response.status_code == 404
        assert "404 Not Found" in response.text
        assert "/no/such/page" in response.text

    def test_unknown_api_uri_is_json(self, client):
        response = client.get("/api/unknown")

        assert response.status_code == 404
        assert response.json() == {"detail": "Not Found"}
