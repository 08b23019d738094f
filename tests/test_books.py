from fastapi.testclient import TestClient

from school_library.main import create_app
from conftest import ADMIN_USERNAME, ADMIN_PASSWORD


def add_book(client, auth_headers, **fields):
    response = client.post("/api/books", json=fields, headers=auth_headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_create_book_with_only_title_defaults_available(client, auth_headers):
    book = add_book(client, auth_headers, titulo="Dune")
    assert book["titulo"] == "Dune"
    assert book["disponible"] is True
    assert book["_id"]
    assert book["createdAt"]


def test_create_book_with_null_availability_defaults_true(client, auth_headers):
    book = add_book(client, auth_headers, titulo="Dune", disponible=None)
    assert book["disponible"] is True


def test_create_book_keeps_explicit_unavailable(client, auth_headers):
    book = add_book(client, auth_headers, titulo="Dune", disponible=False, semestre=3)
    assert book["disponible"] is False
    assert book["semestre"] == "3"


def test_create_book_without_title_fails(client, auth_headers):
    response = client.post("/api/books", json={"autor": "Frank Herbert"}, headers=auth_headers)
    assert response.status_code == 500
    assert "titulo" in response.json()["error"]
    assert client.get("/api/books").json() == []


def test_create_book_ignores_unknown_fields(client, auth_headers):
    book = add_book(client, auth_headers, titulo="Dune", isbn="123")
    assert "isbn" not in book


def test_login_then_create_book_end_to_end(context):
    with TestClient(create_app(context)) as client:
        login = client.post("/api/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD})
        token = login.json()["token"]

        created = client.post("/api/books", json={"titulo": "Dune"}, headers={"Authorization": f"Bearer {token}"})
        assert created.status_code == 201
        assert created.json()["disponible"] is True

        anonymous = client.post("/api/books", json={"titulo": "Dune"})
        assert anonymous.status_code == 401


def test_list_books_shape_and_order(client, auth_headers):
    first = add_book(client, auth_headers, titulo="Primero", autor="A", carrera="Derecho",
                     semestre="1", genero="Ensayo", descripcion="d", fileName="f.pdf", fileData="data:x")
    second = add_book(client, auth_headers, titulo="Segundo")

    books = client.get("/api/books").json()
    assert [b["id"] for b in books] == [second["_id"], first["_id"]]
    assert books[1] == {
        "id": first["_id"],
        "title": "Primero",
        "author": "A",
        "program": "Derecho",
        "semester": "1",
        "genre": "Ensayo",
        "desc": "d",
        "available": True,
        "fileName": "f.pdf",
        "fileData": "data:x",
        "createdAt": books[1]["createdAt"],
    }


def test_search_matches_title_author_genre_program(client, auth_headers):
    add_book(client, auth_headers, titulo="Historia de Mexico")
    add_book(client, auth_headers, titulo="Cuentos", autor="Ana HISTORIADORA")
    add_book(client, auth_headers, titulo="Relatos", genero="Prehistoria")
    add_book(client, auth_headers, titulo="Manual", carrera="Historia del Arte")
    add_book(client, auth_headers, titulo="Algebra", autor="Baldor", genero="Matematicas")

    titles = {b["title"] for b in client.get("/api/books", params={"q": "hist"}).json()}
    assert titles == {"Historia de Mexico", "Cuentos", "Relatos", "Manual"}


def test_search_treats_query_literally(client, auth_headers):
    add_book(client, auth_headers, titulo="100% Python")
    add_book(client, auth_headers, titulo="Python")

    titles = [b["title"] for b in client.get("/api/books", params={"q": "100%"}).json()]
    assert titles == ["100% Python"]
    assert client.get("/api/books", params={"q": "_"}).json() == []


def test_empty_query_lists_everything(client, auth_headers):
    add_book(client, auth_headers, titulo="Uno")
    add_book(client, auth_headers, titulo="Dos")
    assert len(client.get("/api/books", params={"q": ""}).json()) == 2


def test_update_book(client, auth_headers):
    book = add_book(client, auth_headers, titulo="Dune", autor="Frank")

    response = client.put(f"/api/books/{book['_id']}", json={"disponible": False, "autor": "Frank Herbert"},
                          headers=auth_headers)
    assert response.status_code == 200
    updated = response.json()
    assert updated["disponible"] is False
    assert updated["autor"] == "Frank Herbert"
    assert updated["titulo"] == "Dune"


def test_update_missing_book_is_404(client, auth_headers):
    response = client.put("/api/books/doesnotexist", json={"titulo": "X"}, headers=auth_headers)
    assert response.status_code == 404
    assert response.json() == {"error": "Libro no encontrado"}


def test_update_cannot_clear_title(client, auth_headers):
    book = add_book(client, auth_headers, titulo="Dune")
    response = client.put(f"/api/books/{book['_id']}", json={"titulo": None}, headers=auth_headers)
    assert response.status_code == 500
    assert client.get("/api/books").json()[0]["title"] == "Dune"


def test_delete_book(client, auth_headers):
    book = add_book(client, auth_headers, titulo="Dune")
    response = client.delete(f"/api/books/{book['_id']}", headers=auth_headers)
    assert response.json() == {"deleted": True}
    assert client.get("/api/books").json() == []


def test_delete_missing_book_still_succeeds(client, auth_headers):
    response = client.delete("/api/books/doesnotexist", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {"deleted": True}


def test_search_folds_accented_letters(client, auth_headers):
    add_book(client, auth_headers, titulo="Óptica básica")
    add_book(client, auth_headers, titulo="La educación", autor="ÉMILE Durkheim")
    add_book(client, auth_headers, titulo="Física", genero="CIENCIA")

    assert [b["title"] for b in client.get("/api/books", params={"q": "óptica"}).json()] == ["Óptica básica"]
    assert [b["author"] for b in client.get("/api/books", params={"q": "émile"}).json()] == ["ÉMILE Durkheim"]
    assert [b["title"] for b in client.get("/api/books", params={"q": "FÍSICA"}).json()] == ["Física"]


def test_uncastable_payload_is_error_body(client, auth_headers):
    response = client.post("/api/books", json={"titulo": "Dune", "disponible": "tal vez"}, headers=auth_headers)
    assert response.status_code == 500
    assert "disponible" in response.json()["error"]
    assert client.get("/api/books").json() == []


def test_timestamps_carry_utc_marker(client, auth_headers):
    book = add_book(client, auth_headers, titulo="Dune")
    assert book["createdAt"].endswith("Z")
    assert client.get("/api/books").json()[0]["createdAt"] == book["createdAt"]
