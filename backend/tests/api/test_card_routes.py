"""Card Routes: create, list and fetch cards over HTTP."""

from datetime import datetime, timezone
from uuid import uuid4


async def test_add_card_envelope(client):
    before = datetime.now(timezone.utc)
    res = await client.post(
        "/cards/add", json={"title": "Fix bug", "description": "desc", "section": "todo"},
    )
    assert res.status_code == 200
    card = res.json()["card"]
    assert set(card) == {"id", "title", "description", "section", "createdAt"}
    assert (card["title"], card["description"], card["section"]) == ("Fix bug", "desc", "todo")
    assert datetime.fromisoformat(card["createdAt"]) >= before


async def test_client_supplied_created_at_ignored(client):
    res = await client.post(
        "/cards/add",
        json={"title": "t", "section": "todo", "createdAt": "1999-01-01T00:00:00Z"},
    )
    assert not res.json()["card"]["createdAt"].startswith("1999")


async def test_description_and_section_default_to_empty(client):
    res = await client.post("/cards/add", json={"title": "bare"})
    card = res.json()["card"]
    assert card["description"] == ""
    assert card["section"] == ""


async def test_get_card_by_id(client):
    created = (await client.post("/cards/add", json={"title": "t"})).json()["card"]
    res = await client.post("/cards/get-by-id", json={"id": created["id"]})
    assert res.status_code == 200
    assert res.json()["card"]["id"] == created["id"]
    assert res.json()["card"]["title"] == "t"


async def test_get_all_cards(client):
    await client.post("/cards/add", json={"title": "a"})
    await client.post("/cards/add", json={"title": "b"})
    res = await client.get("/cards/get-all")
    assert [c["title"] for c in res.json()["cards"]] == ["a", "b"]


async def test_unknown_card_is_404(client):
    res = await client.post("/cards/get-by-id", json={"id": str(uuid4())})
    assert res.status_code == 404
    assert "error" in res.json()


async def test_malformed_card_id_is_400(client):
    res = await client.post("/cards/get-by-id", json={"id": "xyz"})
    assert res.status_code == 400
    assert res.json()["code"] == "INVALID_IDENTIFIER"


async def test_missing_title_is_validation_error(client):
    res = await client.post("/cards/add", json={"description": "no title"})
    assert res.status_code == 400
    assert res.json()["details"][0]["field"] == "body.title"


async def test_json_array_body_is_invalid_json(client):
    res = await client.post("/cards/add", json=[1, 2])
    assert res.status_code == 400
    assert res.text == "Invalid JSON"
