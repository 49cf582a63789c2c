"""
HTTP tests for the /todos endpoints
"""
from todo_api.todo.schemas import Todo
from todo_api.todo.store import todo_store

SEED = [
    {"id": "1", "todo": "Todo list item 1"},
    {"id": "2", "todo": "Todo list item 2"},
]


class TestListTodos:
    """GET /todos"""

    def test_returns_seed(self, client):
        response = client.get("/todos")
        assert response.status_code == 200
        assert response.json() == SEED

    def test_empty_store_still_200(self, client):
        todo_store.reset(())
        response = client.get("/todos")
        assert response.status_code == 200
        assert response.json() == []


class TestLookupTodo:
    """GET /todos/{id} and GET /todos?id=..."""

    def test_single_id_returns_object(self, client):
        response = client.get("/todos/2")
        assert response.status_code == 200
        assert response.json() == {"id": "2", "todo": "Todo list item 2"}

    def test_unknown_id_is_404(self, client):
        response = client.get("/todos/3")
        assert response.status_code == 404
        assert response.text == "Not Found"
        assert response.headers["content-type"].startswith("text/plain")

    def test_query_multiple_ids_in_store_order(self, client):
        response = client.get("/todos", params={"id": "2,1"})
        assert response.status_code == 200
        assert response.json() == SEED

    def test_query_ids_are_trimmed(self, client):
        response = client.get("/todos?id= 1 , 2 ")
        assert response.status_code == 200
        assert [t["id"] for t in response.json()] == ["1", "2"]

    def test_query_single_match_returns_object(self, client):
        response = client.get("/todos", params={"id": "1,99"})
        assert response.status_code == 200
        assert response.json() == SEED[0]

    def test_query_repeated_params(self, client):
        response = client.get("/todos?id=1&id=2")
        assert response.status_code == 200
        assert len(response.json()) == 2

    def test_path_accepts_comma_list(self, client):
        response = client.get("/todos/1,2")
        assert response.status_code == 200
        assert response.json() == SEED

    def test_query_no_match_is_404(self, client):
        response = client.get("/todos", params={"id": "7,8"})
        assert response.status_code == 404
        assert response.text == "Not Found"

    def test_empty_id_param_is_400(self, client):
        response = client.get("/todos?id=")
        assert response.status_code == 400
        assert response.text == "Bad Request"

    def test_only_commas_is_400(self, client):
        response = client.get("/todos", params={"id": " , ,"})
        assert response.status_code == 400

    def test_invalid_stored_record_is_404(self, client):
        todo_store.append(Todo.model_construct(id="9", todo=None))
        response = client.get("/todos/9")
        assert response.status_code == 404
        assert response.text == "Not Found"

    def test_invalid_record_in_multi_lookup_is_404(self, client):
        todo_store.append(Todo.model_construct(id="9", todo=None))
        response = client.get("/todos", params={"id": "1,9"})
        assert response.status_code == 404


class TestCreateTodo:
    """POST /todos"""

    def test_create_echoes_and_appends(self, client):
        payload = {"id": "3", "todo": "New todo item"}
        response = client.post("/todos", json=payload)
        assert response.status_code == 200
        assert response.json() == payload

        listed = client.get("/todos").json()
        assert len(listed) == 3
        assert listed[-1] == payload

    def test_created_todo_can_be_looked_up(self, client):
        payload = {"id": "abc", "todo": "Buy milk"}
        client.post("/todos", json=payload)
        response = client.get("/todos/abc")
        assert response.status_code == 200
        assert response.json() == payload

    def test_misspelled_field_is_400(self, client):
        response = client.post("/todos", json={"id": "3", "todod": "x"})
        assert response.status_code == 400
        assert response.text == "Bad Request"
        assert len(client.get("/todos").json()) == 2

    def test_wrong_type_is_400(self, client):
        response = client.post("/todos", json={"id": 3, "todo": "x"})
        assert response.status_code == 400
        assert len(todo_store) == 2

    def test_extra_field_is_400(self, client):
        response = client.post("/todos", json={"id": "3", "todo": "x", "done": True})
        assert response.status_code == 400

    def test_invalid_json_is_400(self, client):
        response = client.post(
            "/todos",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.text == "Bad Request"

    def test_empty_body_is_400(self, client):
        response = client.post("/todos")
        assert response.status_code == 400

    def test_duplicate_id_is_409(self, client):
        response = client.post("/todos", json={"id": "1", "todo": "dup"})
        assert response.status_code == 409
        assert response.text == "Conflict"
        assert len(todo_store) == 2

    def test_space_padded_duplicate_id_is_409(self, client):
        response = client.post("/todos", json={"id": " 1", "todo": "shadow"})
        assert response.status_code == 409
        assert len(todo_store) == 2

        lookup = client.get("/todos/1")
        assert lookup.status_code == 200
        assert lookup.json() == SEED[0]

    def test_blank_id_is_400(self, client):
        for blank in ("", "   "):
            response = client.post("/todos", json={"id": blank, "todo": "x"})
            assert response.status_code == 400
            assert response.text == "Bad Request"
        assert len(todo_store) == 2

    def test_request_body_documented_in_openapi(self, client):
        schema = client.get("/openapi.json").json()
        body = schema["paths"]["/todos"]["post"]["requestBody"]
        body_schema = body["content"]["application/json"]["schema"]
        assert body_schema["$ref"] == "#/components/schemas/Todo"
        assert "Todo" in schema["components"]["schemas"]

    def test_duplicate_id_allowed_when_permissive(self, client):
        todo_store.unique_ids = False
        response = client.post("/todos", json={"id": "1", "todo": "dup"})
        assert response.status_code == 200
        assert len(todo_store) == 3

        lookup = client.get("/todos/1")
        assert lookup.status_code == 200
        assert [t["todo"] for t in lookup.json()] == ["Todo list item 1", "dup"]


class TestDeleteTodo:
    """DELETE /todos/{id}"""

    def test_delete_existing(self, client):
        response = client.delete("/todos/1")
        assert response.status_code == 204
        assert response.content == b""

        assert client.get("/todos/1").status_code == 404
        assert client.get("/todos").json() == [SEED[1]]

    def test_delete_unknown_leaves_store(self, client):
        response = client.delete("/todos/42")
        assert response.status_code == 404
        assert response.text == "Not Found"
        assert client.get("/todos").json() == SEED

    def test_delete_does_not_split_or_trim(self, client):
        assert client.delete("/todos/1,2").status_code == 404
        assert client.delete("/todos/%201").status_code == 404
        assert len(todo_store) == 2

    def test_delete_invalid_record_is_404(self, client):
        todo_store.append(Todo.model_construct(id="9", todo=None))
        response = client.delete("/todos/9")
        assert response.status_code == 404
        assert len(todo_store) == 3


def test_seed_scenario(client):
    """End-to-end walk through the seeded store"""
    assert client.get("/todos/2").json() == {"id": "2", "todo": "Todo list item 2"}
    assert client.get("/todos/3").status_code == 404

    created = client.post("/todos", json={"id": "3", "todo": "New todo item"})
    assert created.status_code == 200
    assert created.json() == {"id": "3", "todo": "New todo item"}
    assert len(client.get("/todos").json()) == 3

    assert client.delete("/todos/3").status_code == 204
    assert client.get("/todos/3").status_code == 404
    assert len(client.get("/todos").json()) == 2
