import pytest

from models.village_model import Village


@pytest.fixture
def many_villages(db):
    rows = []
    for district in ("Sabu Barat", "Raijua", "Hawu Mehara"):
        for i in range(50):
            rows.append(Village(name=f"Desa {district} {i:02d}", district=district, order=i, is_active=True))
    rows.append(Village(name="Desa Tutup", district="Raijua", order=99, is_active=False))
    db.add_all(rows)
    db.commit()


def test_browse_is_capped_at_100(client, many_villages):
    r = client.get("/api/villages")
    assert r.status_code == 200
    assert len(r.json()["villages"]) == 100


def test_search_is_capped_at_20(client, many_villages):
    r = client.get("/api/villages", params={"search": "desa"})
    assert len(r.json()["villages"]) == 20


def test_search_is_case_insensitive_and_active_only(client, many_villages):
    r = client.get("/api/villages", params={"search": "TUTUP"})
    assert r.json()["villages"] == []

    r = client.get("/api/villages", params={"search": "raijua 0"})
    names = [v["name"] for v in r.json()["villages"]]
    assert names and all("Raijua 0" in n for n in names)


def test_grouping_preserves_district_order(client, db):
    db.add_all([
        Village(name="Menia", district="Sabu Barat", order=2),
        Village(name="Ledeke", district="Raijua", order=1),
        Village(name="Delo", district="Sabu Barat", order=1),
        Village(name="Lobohede", district="Hawu Mehara", order=1),
    ])
    db.commit()

    data = client.get("/api/villages").json()
    assert list(data["grouped"].keys()) == ["Hawu Mehara", "Raijua", "Sabu Barat"]
    assert [v["name"] for v in data["grouped"]["Sabu Barat"]] == ["Delo", "Menia"]
    assert [v["name"] for v in data["villages"]] == ["Lobohede", "Ledeke", "Delo", "Menia"]


def test_district_filter(client, many_villages):
    r = client.get("/api/villages", params={"district": "Raijua"})
    assert {v["district"] for v in r.json()["villages"]} == {"Raijua"}


def test_admin_crud(client, db, admin, auth):
    h = auth(admin)
    r = client.post("/api/admin/villages", json={"name": "Bolou", "district": "Sabu Timur", "population": 1200},
                    headers=h)
    assert r.status_code == 201
    vid = r.json()["id"]

    r = client.put(f"/api/admin/villages/{vid}", json={"isActive": False}, headers=h)
    assert r.status_code == 200
    assert r.json()["isActive"] is False
    assert r.json()["name"] == "Bolou"

    r = client.get("/api/admin/villages", params={"active": "false"}, headers=h)
    assert [v["id"] for v in r.json()["villages"]] == [vid]
    assert r.json()["districts"] == ["Sabu Timur"]

    assert client.delete(f"/api/admin/villages/{vid}", headers=h).status_code == 200
    db.expire_all()
    assert db.get(Village, vid) is None
