def test_contact_flow(client, admin_headers):
    res = client.post(
        "/api/v1/contact",
        json={"name": "Ann", "email": "Ann@Example.com", "message": "Do you shoot in Portland?"},
    )
    assert res.status_code == 201
    message = res.json()
    assert message["status"] == "unread"
    assert message["email"] == "ann@example.com"

    assert client.get("/api/v1/admin/contacts").status_code == 403
    listed = client.get("/api/v1/admin/contacts", headers=admin_headers).json()
    assert [m["id"] for m in listed] == [message["id"]]

    res = client.patch(
        f"/api/v1/admin/contacts/{message['id']}",
        json={"status": "responded"},
        headers=admin_headers,
    )
    assert res.json()["status"] == "responded"
    assert client.get("/api/v1/admin/contacts", params={"status": "unread"}, headers=admin_headers).json() == []


def test_contact_requires_valid_email(client):
    res = client.post("/api/v1/contact", json={"name": "Ann", "email": "not-an-email", "message": "hi"})
    assert res.status_code == 422
    assert "email" in res.json()["detail"]["field_errors"]


def test_unknown_contact_message(client, admin_headers):
    res = client.patch("/api/v1/admin/contacts/5", json={"status": "read"}, headers=admin_headers)
    assert res.status_code == 404
