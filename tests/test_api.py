"""Tests for the HTTP API."""

from fastapi.testclient import TestClient

from recipe_scaler.api.app import create_app
from recipe_scaler.containers import AppContainer


def _client_with_recipe(container: AppContainer) -> TestClient:
    client = TestClient(create_app(container))
    client.post("/ingredients", json={"name": "Flour", "quantity": 2, "unit": "cups"})
    client.post("/ingredients", json={"name": "Sugar", "quantity": 1, "unit": "cup"})
    return client


def test_health(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_units_lists_configured_units(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/units")

    assert response.json() == {"units": ["g", "cup", "cups", "tsp", "pcs"]}


def test_empty_ingredient_list(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    data = client.get("/ingredients").json()

    assert data["ingredients"] == []
    assert data["lines"] == ["No ingredients yet — add one above."]


def test_add_ingredient(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/ingredients", json={"name": " Flour ", "quantity": "2", "unit": "cups"}
    )

    assert response.status_code == 201
    data = response.json()
    assert data["ingredient"] == {
        "index": 0,
        "name": "Flour",
        "quantity": 2.0,
        "unit": "cups",
        "label": "2 cups Flour",
    }
    assert data["lines"] == ["2 cups Flour"]
    assert container.session.ledger.count() == 1


def test_add_ingredient_rejects_empty_name(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/ingredients", json={"name": "", "quantity": 5, "unit": "g"}
    )

    assert response.status_code == 422
    assert response.json() == {
        "error": "EmptyName",
        "detail": "Please enter an ingredient name.",
    }


def test_add_ingredient_rejects_bad_quantity(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    for quantity in (0, -2, "abc"):
        response = client.post(
            "/ingredients", json={"name": "Flour", "quantity": quantity, "unit": "g"}
        )
        assert response.status_code == 422
        assert response.json()["error"] == "NonPositiveQuantity"

    assert container.session.ledger.count() == 0


def test_add_ingredient_rejects_unknown_unit(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/ingredients", json={"name": "Flour", "quantity": 1, "unit": "bushel"}
    )

    assert response.status_code == 422
    assert response.json()["error"] == "UnknownUnit"


def test_removal_requires_confirmation(container: AppContainer) -> None:
    client = _client_with_recipe(container)

    preview = client.get("/ingredients/1").json()
    declined = client.delete("/ingredients/1").json()

    assert preview["prompt"] == "Remove 'Sugar' from the list?"
    assert preview["ingredient"]["name"] == "Sugar"
    assert declined["removed"] is None
    assert len(declined["ingredients"]) == 2


def test_confirmed_removal(container: AppContainer) -> None:
    client = _client_with_recipe(container)

    response = client.delete("/ingredients/0", params={"confirmed": "true"})

    assert response.status_code == 200
    data = response.json()
    assert data["removed"]["name"] == "Flour"
    assert [item["name"] for item in data["ingredients"]] == ["Sugar"]
    assert data["ingredients"][0]["index"] == 0


def test_removal_out_of_range(container: AppContainer) -> None:
    client = _client_with_recipe(container)

    preview = client.get("/ingredients/5")
    delete = client.delete("/ingredients/-1", params={"confirmed": "true"})

    assert preview.status_code == 404
    assert preview.json()["error"] == "IndexOutOfRange"
    assert delete.status_code == 404
    assert container.session.ledger.count() == 2


def test_output_before_calculation(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    data = client.get("/output").json()

    assert data["mode"] == "scaled"
    assert data["scaled"] is None
    assert data["lines"] == [
        "Please enter a valid original and target serving size "
        "(original must be > 0)."
    ]


def test_calculate_scales_recipe(container: AppContainer) -> None:
    client = _client_with_recipe(container)

    response = client.post("/calculate", json={"original": 4, "target": 8})

    assert response.status_code == 200
    data = response.json()
    assert data["mode"] == "scaled"
    assert data["scaled"]["factor"] == 2.0
    assert [
        (
            entry["name"],
            entry["unit"],
            entry["original_quantity"],
            entry["scaled_quantity"],
        )
        for entry in data["scaled"]["entries"]
    ] == [("Flour", "cups", 2, 4), ("Sugar", "cup", 1, 2)]
    assert data["lines"] == [
        "Scale factor: 2 (target 8 / original 4)",
        "4 cups Flour (was 2 cups)",
        "2 cup Sugar (was 1 cup)",
    ]


def test_calculate_rejects_invalid_servings(container: AppContainer) -> None:
    client = _client_with_recipe(container)

    original = client.post("/calculate", json={"original": "x", "target": 4})
    target = client.post("/calculate", json={"original": 4, "target": -1})

    assert original.status_code == 422
    assert original.json()["error"] == "InvalidOriginal"
    assert target.status_code == 422
    assert target.json()["error"] == "InvalidTarget"
    assert container.session.servings is None


def test_mode_switch_round_trip(container: AppContainer) -> None:
    client = _client_with_recipe(container)
    scaled = client.post("/calculate", json={"original": 3, "target": 1}).json()

    summary = client.put("/mode", json={"mode": "summary"}).json()
    back = client.put("/mode", json={"mode": "scaled"}).json()

    assert summary["mode"] == "summary"
    assert summary["summary"]["entry_count"] == 2
    assert summary["lines"] == [
        "Original servings: 3",
        "Target servings: 1",
        "Scale factor: 0.33",
        "Ingredients: 2",
    ]
    assert back == scaled
    assert client.get("/output").json() == scaled


def test_mode_rejects_unknown_value(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.put("/mode", json={"mode": "chart"})

    assert response.status_code == 422


def test_ui_page(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/ui")

    assert response.status_code == 200
    assert "Recipe Serving Adjuster" in response.text


def test_add_ingredient_rejects_boolean_quantity(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/ingredients", json={"name": "Flour", "quantity": True, "unit": "g"}
    )

    assert response.status_code == 422
    assert response.json()["error"] == "NonPositiveQuantity"
    assert container.session.ledger.count() == 0


def test_calculate_rejects_boolean_servings(container: AppContainer) -> None:
    client = _client_with_recipe(container)

    original = client.post("/calculate", json={"original": True, "target": 4})
    target = client.post("/calculate", json={"original": 4, "target": False})

    assert original.status_code == 422
    assert original.json()["error"] == "InvalidOriginal"
    assert target.status_code == 422
    assert target.json()["error"] == "InvalidTarget"


def test_add_ingredient_null_name_uses_error_body(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/ingredients", json={"name": None, "quantity": 1, "unit": "g"}
    )

    assert response.status_code == 422
    assert response.json() == {
        "error": "EmptyName",
        "detail": "Please enter an ingredient name.",
    }


def test_add_ingredient_missing_unit(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post("/ingredients", json={"name": "Flour", "quantity": 1})

    assert response.status_code == 422
    assert response.json() == {
        "error": "UnknownUnit",
        "detail": "Please choose a unit.",
    }


def test_malformed_requests_use_error_body(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    bad_name = client.post(
        "/ingredients", json={"name": ["Flour"], "quantity": 1, "unit": "g"}
    )
    bad_mode = client.put("/mode", json={"mode": "chart"})
    bad_index = client.get("/ingredients/first")

    for response in (bad_name, bad_mode, bad_index):
        assert response.status_code == 422
        data = response.json()
        assert data["error"] == "InvalidRequest"
        assert isinstance(data["detail"], str)
    assert bad_name.json()["detail"].startswith("name:")
    assert bad_index.json()["detail"].startswith("index:")
