import pytest


@pytest.fixture
def column(client, user):
    board = client.post("/boards", json={"name": "Main", "color": "#ff0000"}, headers=user["headers"]).json()
    return client.post("/columns", json={"boardId": board["id"], "name": "Todo"}, headers=user["headers"]).json()


def _task(client, user, column_id, **payload):
    return client.post("/tasks", json={"columnId": column_id, "title": "Write report", **payload}, headers=user["headers"])


def test_create_task_defaults(client, user, column):
    r = _task(client, user, column["id"])
    assert r.status_code == 201
    task = r.json()
    assert task["status"] == "TODO"
    assert task["hours"] == 0
    assert task["description"] is None
    assert task["dueDate"] is None
    assert task["column"]["id"] == column["id"]
    assert task["column"]["slug"] == "todo"
    assert task["column"]["board"]["color"] == "#ff0000"


def test_create_task_validation(client, user, column):
    assert _task(client, user, column["id"], title="").status_code == 400
    assert _task(client, user, column["id"], hours=-1).status_code == 400
    assert _task(client, user, column["id"], status="LATER").status_code == 400
    r = client.post("/tasks", json={"title": "no column"}, headers=user["headers"])
    assert r.status_code == 400


def test_create_requires_owned_column(client, user, other_user, column):
    r = _task(client, other_user, column["id"])
    assert r.status_code == 404
    assert r.json() == {"error": "Column not found"}


def test_list_and_list_by_column(client, user, other_user, column):
    board_id = column["boardId"]
    other_column = client.post("/columns", json={"boardId": board_id, "name": "Done"}, headers=user["headers"]).json()
    a = _task(client, user, column["id"]).json()
    b = _task(client, user, other_column["id"], title="Ship it").json()

    assert {t["id"] for t in client.get("/tasks", headers=user["headers"]).json()} == {a["id"], b["id"]}
    by_column = client.get(f"/tasks/column/{other_column['id']}", headers=user["headers"]).json()
    assert [t["id"] for t in by_column] == [b["id"]]

    assert client.get("/tasks", headers=other_user["headers"]).json() == []
    r = client.get(f"/tasks/column/{column['id']}", headers=other_user["headers"])
    assert r.status_code == 404


def test_partial_update(client, user, column):
    task = _task(
        client, user, column["id"], description="draft", dueDate="2030-01-01T10:00:00Z", hours=2
    ).json()
    url = f"/tasks/{task['id']}"

    r = client.put(url, json={"status": "IN_PROGRESS"}, headers=user["headers"])
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "IN_PROGRESS"
    assert body["description"] == "draft"
    assert body["dueDate"].startswith("2030-01-01T10:00:00")
    assert body["hours"] == 2

    r = client.put(url, json={"description": None, "dueDate": None}, headers=user["headers"])
    assert r.status_code == 200
    assert r.json()["description"] is None
    assert r.json()["dueDate"] is None
    assert r.json()["title"] == "Write report"

    assert client.put(url, json={}, headers=user["headers"]).status_code == 400
    assert client.put(url, json={"title": None}, headers=user["headers"]).status_code == 400
    assert client.put(url, json={"hours": -2}, headers=user["headers"]).status_code == 400


def test_move_task_between_columns(client, user, other_user, column):
    task = _task(client, user, column["id"]).json()
    done = client.post("/columns", json={"boardId": column["boardId"], "name": "Done"}, headers=user["headers"]).json()

    r = client.put(f"/tasks/{task['id']}", json={"columnId": done["id"], "status": "DONE"}, headers=user["headers"])
    assert r.status_code == 200
    assert r.json()["columnId"] == done["id"]
    assert r.json()["column"]["slug"] == "done"

    board = client.post("/boards", json={"name": "B"}, headers=other_user["headers"]).json()
    theirs = client.post("/columns", json={"boardId": board["id"], "name": "X"}, headers=other_user["headers"]).json()
    r = client.put(f"/tasks/{task['id']}", json={"columnId": theirs["id"]}, headers=user["headers"])
    assert r.status_code == 404
    assert r.json() == {"error": "Column not found"}


def test_ownership_and_delete(client, user, other_user, column):
    task = _task(client, user, column["id"]).json()
    url = f"/tasks/{task['id']}"

    assert client.get(url, headers=other_user["headers"]).status_code == 404
    assert client.put(url, json={"title": "mine"}, headers=other_user["headers"]).status_code == 404
    assert client.delete(url, headers=other_user["headers"]).status_code == 404

    assert client.delete(url, headers=user["headers"]).status_code == 204
    r = client.get(url, headers=user["headers"])
    assert r.status_code == 404
    assert r.json() == {"error": "Task not found"}


def test_deleting_task_detaches_sessions(client, user, column):
    task = _task(client, user, column["id"]).json()
    session = client.post(
        "/pomodoro/sessions/start", json={"type": "FOCUS", "taskId": task["id"]}, headers=user["headers"]
    ).json()

    assert client.delete(f"/tasks/{task['id']}", headers=user["headers"]).status_code == 204
    active = client.get("/pomodoro/sessions/active", headers=user["headers"]).json()
    assert active["id"] == session["id"]
    assert active["taskId"] is None
