from types import SimpleNamespace
from uuid import uuid4

import pytest
from pydantic import ValidationError

from shared.core.config import Settings
from shared.core.schemas import CommonQueryParams, Lookup


def test_success_code_follows_the_method(client, headers):
    resp = client.post("/api/buildings/", json={"name": "Résidence Atlas"}, headers=headers)
    assert (resp.json()["status_code"], resp.json()["message"]) == ("101", "Created successfully")
    building_id = resp.json()["data"]["id"]

    resp = client.put("/api/buildings/", json={"id": building_id, "name": "Atlas II"},
                      headers=headers)
    assert resp.json()["status_code"] == "102"

    resp = client.get(f"/api/buildings/{building_id}", headers=headers)
    assert resp.json()["status_code"] == "100"

    resp = client.delete(f"/api/buildings/{building_id}", headers=headers)
    assert resp.json()["status_code"] == "103"
    assert resp.json()["status"] == "Success"


def test_bad_token_is_an_authentication_failure(client):
    resp = client.get("/api/receipts/all", headers={"Authorization": "Bearer not-a-jwt"})
    assert resp.status_code == 401
    assert resp.json()["status_code"] == "300"
    assert resp.json()["status"] == "Failure"
    assert resp.headers["www-authenticate"] == "Bearer"


@pytest.mark.parametrize("params", [{"skip": -1}, {"limit": 0}, {"limit": -5}])
def test_out_of_range_paging_is_rejected(client, headers, params):
    resp = client.get("/api/receipts/all", params=params, headers=headers)
    assert resp.status_code == 422
    assert resp.json()["status_code"] == "201"


def test_paging_bounds_on_the_query_model():
    with pytest.raises(ValidationError):
        CommonQueryParams(skip=-1)
    with pytest.raises(ValidationError):
        CommonQueryParams(limit=0)
    params = CommonQueryParams(skip=0, limit=1)
    assert (params.skip, params.limit) == (0, 1)


def test_lookup_reads_attributes():
    row_id = uuid4()
    lookup = Lookup.model_validate(SimpleNamespace(id=row_id, name="Karim Alami"))
    assert lookup.id == row_id
    assert lookup.name == "Karim Alami"


def test_settings_ignore_unknown_keys():
    assert Settings.model_config["extra"] == "ignore"
    assert Settings.model_config["env_file"] == ".env"
    assert not hasattr(Settings(UNRELATED_SETTING="x"), "UNRELATED_SETTING")
