from fastapi import status

TABLE_ELEMENT = {
    "id": "items",
    "type": "table",
    "x": 20,
    "y": 150,
    "width": 550,
    "height": 300,
    "tableConfig": {
        "dataSource": "items",
        "columns": [
            {"header": "Description", "binding": "description", "width": "60%"},
            {"header": "Price", "binding": "price", "format": "currency"},
        ],
    },
}


def _payload(**overrides):
    payload = {
        "name": "Monthly",
        "description": "Monthly retainer",
        "layout": {"pageSize": "A4", "orientation": "portrait", "elements": []},
        "sampleData": {"client": {"name": "Acme"}},
    }
    payload.update(overrides)
    return payload


def _create(client, **overrides):
    response = client.post("/api/templates", json=_payload(**overrides))
    assert response.status_code == status.HTTP_201_CREATED, response.text
    return response.json()


def test_create_template_returns_camel_case_body(client):
    body = _create(client)

    assert body["id"] > 0
    assert body["name"] == "Monthly"
    assert body["sampleData"] == {"client": {"name": "Acme"}}
    assert body["layout"] == {"pageSize": "A4", "orientation": "portrait", "elements": []}
    assert body["createdAt"] == body["updatedAt"]


def test_create_without_name_is_rejected(client):
    payload = _payload()
    del payload["name"]

    response = client.post("/api/templates", json=payload)

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["field"] == "name"


def test_create_with_blank_name_is_rejected(client):
    response = client.post("/api/templates", json=_payload(name="   "))

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"message": "Template name cannot be empty", "field": "name"}


def test_create_without_sample_data_is_rejected(client):
    response = client.post("/api/templates", json=_payload(sampleData=None))

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["field"] == "sampleData"


def test_list_and_get_templates(client):
    first = _create(client, name="First")
    second = _create(client, name="Second")

    listed = client.get("/api/templates")
    fetched = client.get(f"/api/templates/{second['id']}")

    assert listed.status_code == status.HTTP_200_OK
    assert [item["id"] for item in listed.json()] == [first["id"], second["id"]]
    assert fetched.json() == second


def test_get_missing_template_returns_404(client):
    response = client.get("/api/templates/999")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"message": "Template not found"}


def test_partial_update_keeps_other_fields(client):
    created = _create(client)

    response = client.put(f"/api/templates/{created['id']}", json={"name": "Renamed"})

    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert body["name"] == "Renamed"
    assert body["description"] == "Monthly retainer"
    assert body["sampleData"] == created["sampleData"]


def test_update_can_clear_description(client):
    created = _create(client)

    response = client.put(f"/api/templates/{created['id']}", json={"description": None})

    assert response.json()["description"] is None


def test_update_rejects_null_name(client):
    created = _create(client)

    response = client.put(f"/api/templates/{created['id']}", json={"name": None})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["field"] == "name"


def test_update_missing_template_returns_404(client):
    response = client.put("/api/templates/999", json={"name": "Ghost"})

    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_update_rejects_unknown_fields(client):
    created = _create(client)

    response = client.put(f"/api/templates/{created['id']}", json={"foo": "bar"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["field"] == "foo"


def test_update_rejects_unknown_element_type(client):
    created = _create(client)
    layout = {
        "elements": [{"id": "a", "type": "hologram", "x": 0, "y": 0, "width": 10, "height": 10}]
    }

    response = client.put(f"/api/templates/{created['id']}", json={"layout": layout})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["field"] == "layout.elements.0.type"


def test_table_without_config_is_rejected(client):
    element = {key: value for key, value in TABLE_ELEMENT.items() if key != "tableConfig"}

    response = client.post("/api/templates", json=_payload(layout={"elements": [element]}))

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {
        "message": "Table elements require a tableConfig",
        "field": "layout.elements.0.tableConfig",
    }


def test_table_config_on_other_elements_is_rejected(client):
    element = dict(TABLE_ELEMENT, type="box")

    response = client.post("/api/templates", json=_payload(layout={"elements": [element]}))

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["field"] == "layout.elements.0.tableConfig"


def test_unknown_style_key_is_rejected(client):
    element = {
        "id": "a",
        "type": "text",
        "x": 0,
        "y": 0,
        "width": 10,
        "height": 10,
        "style": {"shadow": "2px"},
    }

    response = client.post("/api/templates", json=_payload(layout={"elements": [element]}))

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["field"] == "layout.elements.0.style.shadow"


def test_pixel_strings_are_stored_as_numbers(client):
    element = {
        "id": "a",
        "type": "text",
        "x": 0,
        "y": 0,
        "width": 10,
        "height": 10,
        "style": {"fontSize": "24px", "fontWeight": 700},
    }

    body = _create(client, layout={"elements": [element]})

    assert body["layout"]["elements"][0]["style"] == {"fontSize": 24, "fontWeight": "700"}


def test_delete_is_idempotent(client):
    created = _create(client)

    first = client.delete(f"/api/templates/{created['id']}")
    second = client.delete(f"/api/templates/{created['id']}")

    assert first.status_code == status.HTTP_204_NO_CONTENT
    assert second.status_code == status.HTTP_204_NO_CONTENT
    assert client.get(f"/api/templates/{created['id']}").status_code == status.HTTP_404_NOT_FOUND


def test_render_saved_template_in_preview(client):
    created = _create(
        client,
        layout={"elements": [TABLE_ELEMENT]},
        sampleData={"items": [{"description": "X", "price": 10}]},
    )

    response = client.get(f"/api/templates/{created['id']}/render", params={"mode": "preview"})

    assert response.status_code == status.HTTP_200_OK
    page = response.json()
    assert (page["width"], page["height"]) == (794, 1123)
    assert page["elements"][0]["rows"] == [["X", "$10.00"]]


def test_render_saved_template_in_edit_mode(client):
    created = _create(client, layout={"elements": [TABLE_ELEMENT]})

    response = client.get(f"/api/templates/{created['id']}/render", params={"mode": "edit"})

    assert response.json()["elements"][0]["rows"] == [["{description}", "{price}"]] * 3


def test_render_rejects_unknown_mode(client):
    created = _create(client)

    response = client.get(f"/api/templates/{created['id']}/render", params={"mode": "print"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["field"] == "mode"
