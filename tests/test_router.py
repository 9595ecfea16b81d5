"""HTTP tests for the catalogue router."""

SCENARIO = [
    {"id": "4", "name": "Name1", "author": "Lex3"},
    {"id": "3", "name": "Name3", "author": "Lex2"},
    {"id": "2", "name": "Name2", "author": "Lex2"},
    {"id": "1", "name": "Name1", "author": "Lex1"},
]


def _seed(client):
    for book in SCENARIO:
        assert client.post("/api/catalog/books", json=book).status_code == 201


def test_health_check(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_add_and_get_book(client):
    resp = client.post("/api/catalog/books", json={"id": "1", "name": "Dune", "author": "Herbert"})
    assert resp.status_code == 201
    assert resp.json() == {"id": "1", "name": "Dune", "author": "Herbert"}

    resp = client.get("/api/catalog/books/1")
    assert resp.status_code == 200
    assert resp.json()["name"] == "Dune"


def test_add_duplicate_returns_409(client):
    client.post("/api/catalog/books", json={"id": "1", "name": "Dune", "author": "Herbert"})
    resp = client.post("/api/catalog/books", json={"id": "1", "name": "Other", "author": "X"})
    assert resp.status_code == 409
    assert client.get("/api/catalog/books/1").json()["name"] == "Dune"


def test_add_missing_field_returns_422(client):
    resp = client.post("/api/catalog/books", json={"id": "1", "name": "Dune"})
    assert resp.status_code == 422


def test_get_missing_book_returns_404(client):
    assert client.get("/api/catalog/books/nope").status_code == 404


def test_delete_book(client):
    client.post("/api/catalog/books", json={"id": "1", "name": "Dune", "author": "Herbert"})
    resp = client.delete("/api/catalog/books/1")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}
    assert client.delete("/api/catalog/books/1").status_code == 404


def test_list_by_name(client):
    _seed(client)
    resp = client.get("/api/catalog/books/by-name", params={"q": "Name"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["query"] == "Name"
    assert set(body["items"]) == {"Lex3 - Name1", "Name2", "Name3", "Lex1 - Name1"}


def test_list_by_author(client):
    _seed(client)
    body = client.get("/api/catalog/books/by-author", params={"q": "Lex"}).json()
    items = body["items"]
    assert items[0] == "Name1"
    assert set(items[1:3]) == {"Name2", "Name3"}
    assert items[3] == "Name1"


def test_list_without_query_matches_all(client):
    _seed(client)
    assert len(client.get("/api/catalog/books/by-author").json()["items"]) == 4
    assert len(client.get("/api/catalog/books/by-name").json()["items"]) == 4


def test_list_no_match_is_empty(client):
    _seed(client)
    body = client.get("/api/catalog/books/by-name", params={"q": "zzz"}).json()
    assert body["items"] == []
