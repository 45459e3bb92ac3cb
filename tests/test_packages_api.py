from conftest import CUSTOMER, HOST


def ids(items):
    return [item["package"]["id"] for item in items]


def test_root(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_list_packages_filters(client):
    assert len(client.get("/packages/").json()) == 5
    assert len(client.get("/packages/", params={"post": "post-1"}).json()) == 4

    enabled = client.get("/packages/", params={"post": "post-1", "is_enabled": "true"}).json()
    assert [p["id"] for p in enabled] == ["pkg-standard", "pkg-weekly", "pkg-hosted"]


def test_create_package_requires_host(client, current_user):
    body = {"post": "post-1", "name": "Family", "slug": "family", "multiplier": 1.2}
    assert client.post("/packages/", json=body).status_code == 403

    current_user["user"] = HOST
    r = client.post("/packages/", json=body)
    assert r.status_code == 200
    created = r.json()
    assert created["id"]
    assert created["multiplier"] == 1.2
    assert created["is_enabled"] is True


def test_create_package_validates_fields(client, current_user):
    current_user["user"] = HOST
    bad_window = {"post": "post-1", "name": "X", "slug": "x", "min_nights": 5, "max_nights": 2}
    assert client.post("/packages/", json=bad_window).status_code == 422

    bad_multiplier = {"post": "post-1", "name": "X", "slug": "x", "multiplier": 5}
    assert client.post("/packages/", json=bad_multiplier).status_code == 422


def test_update_package(client, current_user, package_store):
    current_user["user"] = HOST
    r = client.patch("/packages/pkg-standard", json={"multiplier": 1.2, "is_enabled": False})
    assert r.status_code == 200
    assert r.json()["multiplier"] == 1.2
    assert package_store.get_package("pkg-standard").is_enabled is False


def test_update_package_errors(client, current_user):
    current_user["user"] = HOST
    assert client.patch("/packages/missing", json={"multiplier": 1.1}).status_code == 404
    assert client.patch("/packages/pkg-standard", json={"min_nights": 10}).status_code == 422

    current_user["user"] = CUSTOMER
    assert client.patch("/packages/pkg-standard", json={"multiplier": 1.1}).status_code == 403


def test_recommend_from_default_catalog(client):
    r = client.get("/packages/recommend", params={"nights": 3})
    assert r.status_code == 200
    data = r.json()
    assert data["nights"] == 3
    assert data["entitlement"] == "none"
    assert ids(data["packages"]) == ["short_stay", "special_celebration"]
    assert data["primary"]["package"]["id"] == "short_stay"
    assert data["primary"]["total"] == 450.0
    assert data["primary"]["multiplier_label"] == "Base rate"
    assert data["packages"][1]["total"] == 810.0
    assert data["packages"][1]["multiplier_label"] == "+80%"


def test_recommend_uses_listing_base_rate(client):
    data = client.get("/packages/recommend", params={"nights": 3, "base_rate": 100}).json()
    assert data["primary"]["total"] == 300.0


def test_recommend_pro_prefers_hosted(client):
    params = {"nights": 3, "entitlement": "pro", "include_addons": "true", "prefer_hosted": "true"}
    data = client.get("/packages/recommend", params=params).json()
    assert "wine" in ids(data["packages"])
    assert data["primary"]["package"]["id"] == "hosted_short_stay"


def test_recommend_nothing_eligible(client):
    data = client.get("/packages/recommend", params={"nights": 40}).json()
    assert data["packages"] == []
    assert data["primary"] is None


def test_recommend_rejects_unknown_entitlement(client):
    assert client.get("/packages/recommend", params={"entitlement": "gold"}).status_code == 422


def test_post_packages_merges_billing_products(client):
    data = client.get("/packages/post/post-1", params={"nights": 3}).json()
    assert data["total"] == 8
    sources = [item["package"]["source"] for item in data["packages"]]
    assert sources == ["database"] * 3 + ["billing"] * 5

    hosted = next(i for i in data["packages"] if i["package"]["id"] == "pkg-hosted")
    assert hosted["total"] == 900.0


def test_post_recommend(client):
    data = client.get("/packages/post/post-1/recommend", params={"nights": 3}).json()
    assert ids(data["packages"]) == ["pkg-standard", "pkg-hosted"]
    assert data["primary"]["package"]["id"] == "pkg-standard"

    data = client.get(
        "/packages/post/post-1/recommend", params={"nights": 3, "prefer_hosted": "true"}
    ).json()
    assert data["primary"]["package"]["id"] == "pkg-hosted"


def test_post_recommend_includes_billing_products_for_their_window(client):
    data = client.get("/packages/post/post-1/recommend", params={"nights": 14}).json()
    assert ids(data["packages"]) == ["pkg-weekly", "week_x2_customer"]
    assert data["primary"]["package"]["id"] == "week_x2_customer"


def test_update_post_settings(client, current_user):
    current_user["user"] = HOST
    body = {"package_settings": [
        {"package": "pkg-weekly", "enabled": False},
        {"package": "pkg-hosted", "enabled": True, "custom_name": "Hosted Escape"},
    ]}
    r = client.put("/packages/post/post-1/settings", json=body)
    assert r.status_code == 200
    updated = {p["id"]: p for p in r.json()}
    assert updated["pkg-weekly"]["is_enabled"] is False
    assert updated["pkg-hosted"]["custom_name"] == "Hosted Escape"

    data = client.get("/packages/post/post-1").json()
    names = [i["package"]["name"] for i in data["packages"] if i["package"]["source"] == "database"]
    assert names == ["Standard", "Hosted Escape"]


def test_update_post_settings_rejects_foreign_packages(client, current_user, package_store):
    current_user["user"] = HOST
    body = {"package_settings": [
        {"package": "pkg-standard", "enabled": False},
        {"package": "pkg-other", "enabled": False},
    ]}
    r = client.put("/packages/post/post-1/settings", json=body)
    assert r.status_code == 404
    assert "pkg-other" in r.json()["detail"]
    assert package_store.get_package("pkg-standard").is_enabled is True


def test_update_package_rejects_nulls_for_required_fields(client, current_user, package_store):
    current_user["user"] = HOST
    for body in ({"name": None, "multiplier": None}, {"min_nights": None}, {"is_enabled": None}):
        assert client.patch("/packages/pkg-standard", json=body).status_code == 422

    stored = package_store.get_package("pkg-standard")
    assert stored.name == "Standard"
    assert stored.multiplier == 1.0
    assert stored.min_nights == 1

    # the listing still prices and recommends
    assert client.get("/packages/post/post-1").status_code == 200
    assert client.get("/packages/post/post-1/recommend", params={"nights": 3}).status_code == 200


def test_update_package_allows_clearing_optional_fields(client, current_user, package_store):
    current_user["user"] = HOST
    r = client.patch("/packages/pkg-hosted", json={"base_rate": None, "custom_name": None})
    assert r.status_code == 200
    assert package_store.get_package("pkg-hosted").base_rate is None
