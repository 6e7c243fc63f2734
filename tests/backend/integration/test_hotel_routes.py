import uuid

import pytest


pytestmark = pytest.mark.asyncio


HOTEL = {
    "name": "Hotel Test",
    "type": "Resort",
    "city": "City Test",
    "address": "123 Main St",
    "distance": "Close to attractions",
    "photos": ["https://example.com/photo1.jpg", "https://example.com/photo2.jpg"],
    "title": "Hotel Test Title",
    "desc": "Description of Hotel Test",
    "rating": 4,
    "cheapestPrice": 100,
    "featured": True,
}


async def _create_hotel(client, headers, **overrides):
    resp = await client.post("/api/hotels", headers=headers, json={**HOTEL, **overrides})
    assert resp.status_code == 201, resp.text
    return resp.json()


async def test_create_then_get_round_trip(client, admin_headers):
    created = await _create_hotel(client, admin_headers)
    assert "id" in created

    resp = await client.get(f"/api/hotels/find/{created['id']}")
    assert resp.status_code == 200
    body = resp.json()
    for key, value in HOTEL.items():
        assert body[key] == value
    assert body["rooms"] == []


async def test_update_hotel(client, admin_headers):
    created = await _create_hotel(client, admin_headers)

    resp = await client.put(
        f"/api/hotels/{created['id']}",
        headers=admin_headers,
        json={"name": "Updated Hotel Test", "rating": 5},
    )
    assert resp.status_code == 200
    assert resp.json()["name"] == "Updated Hotel Test"
    assert resp.json()["rating"] == 5
    assert resp.json()["city"] == HOTEL["city"]


async def test_delete_hotel(client, admin_headers):
    created = await _create_hotel(client, admin_headers)

    resp = await client.delete(f"/api/hotels/{created['id']}", headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json() == {"message": "Hotel has been deleted."}
    assert (await client.get(f"/api/hotels/find/{created['id']}")).status_code == 404


async def test_missing_hotel_is_not_found_everywhere(client, admin_headers):
    for hotel_id in (str(uuid.uuid4()), "not-an-id"):
        get_resp = await client.get(f"/api/hotels/find/{hotel_id}")
        put_resp = await client.put(f"/api/hotels/{hotel_id}", headers=admin_headers, json={"name": "x"})
        del_resp = await client.delete(f"/api/hotels/{hotel_id}", headers=admin_headers)
        rooms_resp = await client.get(f"/api/hotels/room/{hotel_id}")
        for resp in (get_resp, put_resp, del_resp, rooms_resp):
            assert resp.status_code == 404
            assert resp.json()["message"] == "Hotel not found"


async def test_non_admin_writes_are_rejected_without_side_effects(client, admin_headers, user_headers):
    created = await _create_hotel(client, admin_headers)

    create_resp = await client.post("/api/hotels", headers=user_headers, json=HOTEL)
    update_resp = await client.put(f"/api/hotels/{created['id']}", headers=user_headers, json={"name": "Nope"})
    delete_resp = await client.delete(f"/api/hotels/{created['id']}", headers=user_headers)
    for resp in (create_resp, update_resp, delete_resp):
        assert resp.status_code == 403
        assert resp.json()["message"] == "Admin authentication required"

    listing = (await client.get("/api/hotels")).json()
    assert len(listing) == 1
    assert listing[0]["name"] == HOTEL["name"]


async def test_anonymous_write_is_unauthenticated(client):
    resp = await client.post("/api/hotels", json=HOTEL)
    assert resp.status_code == 401
    assert resp.json()["message"] == "You are not authenticated"


async def test_create_hotel_missing_required_fields(client, admin_headers):
    resp = await client.post("/api/hotels", headers=admin_headers, json={"name": "Only a name"})
    assert resp.status_code == 400
    fields = {v["field"] for v in resp.json()["violations"]}
    assert {"type", "city", "address", "title", "desc", "cheapestPrice"} <= fields


async def test_list_hotels_with_filters(client, admin_headers):
    await _create_hotel(client, admin_headers, name="Hotel 1", city="City A", cheapestPrice=50, featured=False)
    await _create_hotel(client, admin_headers, name="Hotel 2", city="City B", cheapestPrice=150)

    all_resp = await client.get("/api/hotels")
    assert all_resp.status_code == 200
    assert {h["name"] for h in all_resp.json()} == {"Hotel 1", "Hotel 2"}

    featured = await client.get("/api/hotels", params={"featured": "true"})
    assert [h["name"] for h in featured.json()] == ["Hotel 2"]

    cheap = await client.get("/api/hotels", params={"min": 10, "max": 100})
    assert [h["name"] for h in cheap.json()] == ["Hotel 1"]


async def test_count_by_city(client, admin_headers):
    await _create_hotel(client, admin_headers, city="City A")
    await _create_hotel(client, admin_headers, city="City A")

    resp = await client.get("/api/hotels/countByCity", params={"cities": "City B,City A"})
    assert resp.status_code == 200
    assert resp.json() == [0, 2]


async def test_count_by_type(client, admin_headers):
    await _create_hotel(client, admin_headers, type="resort")
    await _create_hotel(client, admin_headers, type="hotel")

    resp = await client.get("/api/hotels/countByType")
    assert resp.status_code == 200
    body = resp.json()
    assert len(body) == 5
    assert {"type": "resort", "count": 1} in body
    assert {"type": "hotel", "count": 1} in body
    assert {"type": "cabin", "count": 0} in body


async def test_count_by_city_blank_entry_is_rejected(client, admin_headers):
    await _create_hotel(client, admin_headers, city="City A")

    resp = await client.get("/api/hotels/countByCity", params={"cities": "City A,,City B"})
    assert resp.status_code == 400
    assert resp.json()["violations"][0]["field"] == "cities"

    empty = await client.get("/api/hotels/countByCity")
    assert empty.status_code == 200
    assert empty.json() == []
