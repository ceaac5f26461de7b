import pytest

from mindease.services.columns import ColumnsService
from mindease.services.slug import to_slug


@pytest.fixture
def board(client, user):
    return client.post("/boards", json={"name": "Main"}, headers=user["headers"]).json()


def _column(client, user, board_id, name):
    return client.post("/columns", json={"boardId": board_id, "name": name}, headers=user["headers"])


def test_slugs_are_unique_per_user(client, user, other_user, board):
    first = _column(client, user, board["id"], "Em Progresso")
    second = _column(client, user, board["id"], "Em Progresso")
    assert first.status_code == 201
    assert first.json()["slug"] == "em-progresso"
    assert second.json()["slug"] == "em-progresso-2"
    assert _column(client, user, board["id"], "em progresso!").json()["slug"] == "em-progresso-3"

    # another user's namespace is separate
    theirs = client.post("/boards", json={"name": "B"}, headers=other_user["headers"]).json()
    assert _column(client, other_user, theirs["id"], "Em Progresso").json()["slug"] == "em-progresso"


def test_fallback_slug(client, user, board):
    assert _column(client, user, board["id"], "!!!").json()["slug"] == "column"
    assert _column(client, user, board["id"], "???").json()["slug"] == "column-2"


def test_column_output_includes_board_and_count(client, user, board):
    column = _column(client, user, board["id"], "Todo").json()
    client.post("/tasks", json={"columnId": column["id"], "title": "t"}, headers=user["headers"])

    body = client.get(f"/columns/{column['id']}", headers=user["headers"]).json()
    assert body["boardId"] == board["id"]
    assert body["tasksCount"] == 1
    assert body["board"] == {"id": board["id"], "name": "Main", "color": board["color"]}


def test_get_by_slug(client, user, other_user, board):
    column = _column(client, user, board["id"], "Ação Rápida").json()
    assert column["slug"] == "acao-rapida"

    r = client.get("/columns/slug/acao-rapida", headers=user["headers"])
    assert r.status_code == 200
    assert r.json()["id"] == column["id"]

    r = client.get("/columns/slug/acao-rapida", headers=other_user["headers"])
    assert r.status_code == 404
    assert r.json() == {"error": "Column not found"}


def test_create_requires_owned_board(client, user, other_user):
    theirs = client.post("/boards", json={"name": "B"}, headers=other_user["headers"]).json()
    r = _column(client, user, theirs["id"], "Todo")
    assert r.status_code == 404
    assert r.json() == {"error": "Board not found"}

    r = _column(client, user, "missing", "Todo")
    assert r.status_code == 404


def test_rename_regenerates_slug_ignoring_itself(client, user, board):
    column = _column(client, user, board["id"], "Todo").json()
    _column(client, user, board["id"], "Done")

    r = client.put(f"/columns/{column['id']}", json={"name": "TODO"}, headers=user["headers"])
    assert r.status_code == 200
    assert r.json()["slug"] == "todo"

    r = client.put(f"/columns/{column['id']}", json={"name": "Done"}, headers=user["headers"])
    assert r.json()["slug"] == "done-2"
    assert r.json()["name"] == "Done"


def test_move_column_to_another_board(client, user, other_user, board):
    column = _column(client, user, board["id"], "Todo").json()
    second = client.post("/boards", json={"name": "Second"}, headers=user["headers"]).json()

    r = client.put(f"/columns/{column['id']}", json={"boardId": second["id"]}, headers=user["headers"])
    assert r.status_code == 200
    assert r.json()["boardId"] == second["id"]
    assert r.json()["slug"] == "todo"

    theirs = client.post("/boards", json={"name": "B"}, headers=other_user["headers"]).json()
    r = client.put(f"/columns/{column['id']}", json={"boardId": theirs["id"]}, headers=user["headers"])
    assert r.status_code == 404
    assert r.json() == {"error": "Board not found"}


def test_update_and_delete_scoped(client, user, other_user, board):
    column = _column(client, user, board["id"], "Todo").json()

    assert client.put(f"/columns/{column['id']}", json={}, headers=user["headers"]).status_code == 400
    assert client.put(
        f"/columns/{column['id']}", json={"name": "X"}, headers=other_user["headers"]
    ).status_code == 404
    assert client.delete(f"/columns/{column['id']}", headers=other_user["headers"]).status_code == 404

    assert client.delete(f"/columns/{column['id']}", headers=user["headers"]).status_code == 204
    assert client.get("/columns", headers=user["headers"]).json() == []


def test_generate_unique_slug_service(db, client, user, board):
    _column(client, user, board["id"], "Backlog")
    service = ColumnsService(db)
    assert service.generate_unique_slug(user["user"]["id"], "Backlog") == "backlog-2"
    assert service.generate_unique_slug("someone-else", "Backlog") == "backlog"


@pytest.mark.parametrize(
    "name,expected",
    [
        ("Em Progresso", "em-progresso"),
        ("  Já  Feito  ", "ja-feito"),
        ("A--B__C", "a-b-c"),
        ("Café & Crème", "cafe-creme"),
        ("---", ""),
        ("Sprint 42", "sprint-42"),
    ],
)
def test_to_slug(name, expected):
    assert to_slug(name) == expected
