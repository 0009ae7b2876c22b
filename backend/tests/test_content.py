import pytest
from sqlalchemy.exc import OperationalError

from screenlist.models import Content, ContentType
from screenlist.services import catalog


@pytest.fixture()
async def catalog_of_250(db_session):
    db_session.add_all(
        [Content(title=f"Title {i}", type=ContentType.movie, release_year=1950 + i % 70) for i in range(250)]
    )
    await db_session.commit()


async def test_pagination_totals(client, catalog_of_250):
    resp = await client.get("/api/content", params={"page": 1, "limit": 100})
    assert resp.status_code == 200
    body = resp.json()
    assert body["total"] == 250
    assert body["totalPages"] == 3
    assert body["page"] == 1
    assert len(body["items"]) == 100
    assert body["searchTerm"] == ""


async def test_last_page_holds_the_remainder(client, catalog_of_250):
    resp = await client.get("/api/content", params={"page": 3, "limit": 100})
    body = resp.json()
    assert len(body["items"]) == 50
    ids = [item["id"] for item in body["items"]]
    assert ids == sorted(ids)


async def test_non_numeric_paging_falls_back_to_defaults(client, catalog_of_250):
    resp = await client.get("/api/content", params={"page": "abc", "limit": "lots"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["page"] == 1
    assert len(body["items"]) == 20
    assert body["totalPages"] == 13


async def test_limit_is_capped(client, catalog_of_250):
    resp = await client.get("/api/content", params={"limit": 1000})
    body = resp.json()
    assert len(body["items"]) == 100
    assert body["limit"] == 100
    assert body["totalPages"] == 3


async def test_requested_limit_is_echoed(client, catalog_of_250):
    body = (await client.get("/api/content", params={"limit": 30})).json()
    assert body["limit"] == 30
    assert body["totalPages"] == 9


async def test_page_far_beyond_the_end_is_empty(client, catalog_of_250):
    resp = await client.get("/api/content", params={"page": str(2**64)})
    assert resp.status_code == 200
    body = resp.json()
    assert body["items"] == []
    assert body["total"] == 250


async def test_unfiltered_listing_orders_by_id(client, make_content):
    old = await make_content("Old", release_year=1990)
    new = await make_content("New", release_year=2020)
    resp = await client.get("/api/content")
    assert [item["id"] for item in resp.json()["items"]] == [old.id, new.id]


async def test_search_is_case_insensitive_substring(client, make_content):
    batman = await make_content("Batman", release_year=1989)
    await make_content("Superman", release_year=1978)

    resp = await client.get("/api/content", params={"search": "bat"})
    body = resp.json()
    assert [item["id"] for item in body["items"]] == [batman.id]
    assert body["total"] == 1
    assert body["searchTerm"] == "bat"


async def test_search_orders_by_release_year_desc_then_id(client, make_content):
    a = await make_content("Batman", release_year=1989)
    b = await make_content("The Batman", release_year=2022)
    c = await make_content("Batman Begins", release_year=2005)
    d = await make_content("Batman Returns", release_year=2005)

    resp = await client.get("/api/content", params={"search": "BATMAN"})
    assert [item["id"] for item in resp.json()["items"]] == [b.id, c.id, d.id, a.id]


async def test_search_treats_wildcards_literally(db_session, make_content):
    await make_content("100% Wolf")
    await make_content("1000 Ways")

    page = await catalog.list_content(db_session, 1, 20, "100%")
    assert [c.title for c in page.items] == ["100% Wolf"]


async def test_empty_catalog(client):
    body = (await client.get("/api/content")).json()
    assert body["items"] == []
    assert body["total"] == 0
    assert body["totalPages"] == 0


async def test_content_carries_metadata(client, make_content):
    await make_content(
        "Dark",
        type=ContentType.tv_show,
        poster_url="https://image.tmdb.org/t/p/w500/dark.jpg",
        release_year=2017,
        genre="18,9648",
        tmdb_id=70523,
        imdb_id="tt5753856",
    )
    item = (await client.get("/api/content")).json()["items"][0]
    assert item["type"] == "tv_show"
    assert item["tmdb_id"] == 70523
    assert item["imdb_id"] == "tt5753856"
    assert item["genre"] == "18,9648"


async def test_store_failure_is_500_without_details(client, monkeypatch):
    async def unavailable(*args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("connection to db-host refused"))

    monkeypatch.setattr(catalog, "list_content", unavailable)
    resp = await client.get("/api/content")
    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal server error", "code": "store_unavailable"}


async def test_unexpected_error_is_json_500(server_error_client, monkeypatch):
    async def broken(*args, **kwargs):
        raise RuntimeError("listing failed")

    monkeypatch.setattr(catalog, "list_content", broken)
    resp = await server_error_client.get("/api/content")
    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal server error", "code": "internal_error"}
