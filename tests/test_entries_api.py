from datetime import date


def add(client, headers, **body):
    payload = {"type": "expense", "category": "Food", "amount": 12.5}
    payload.update(body)
    return client.post("/api/entries/add", headers=headers, json=payload)


def test_create_single_entry(client, auth_headers):
    res = add(client, auth_headers, date="2025-03-04", description="lunch")

    assert res.status_code == 201
    body = res.get_json()
    assert body["message"] == "Entry saved successfully"
    assert len(body["entries"]) == 1
    assert body["entry"]["date"] == "2025-03-04"
    assert body["entry"]["note"] == "lunch"
    assert body["entry"]["recurrence"] is None


def test_date_defaults_to_today(client, auth_headers):
    res = add(client, auth_headers)

    assert res.get_json()["entry"]["date"] == date.today().isoformat()


def test_monthly_recurrence_is_expanded_at_creation(client, auth_headers):
    res = add(client, auth_headers, category="Rent", amount=900, date="2025-03-31",
              recurrence={"period": "monthly"})

    entries = res.get_json()["entries"]
    assert [e["date"] for e in entries] == [
        "2025-03-31", "2025-05-31", "2025-07-31", "2025-08-31", "2025-10-31", "2025-12-31",
    ]
    assert all(e["recurrence"] == {"period": "monthly"} for e in entries)
    assert len(client.get("/api/entries", headers=auth_headers).get_json()) == 6


def test_yearly_recurrence(client, auth_headers):
    res = add(client, auth_headers, type="income", category="Bonus", amount=1000, date="2025-06-10",
              recurrence={"period": "yearly"})

    assert [e["date"] for e in res.get_json()["entries"]] == ["2025-06-10", "2026-06-10"]


def test_invalid_bodies_are_rejected_without_writes(client, auth_headers):
    bad_bodies = [
        {"type": "expense", "amount": 5},
        {"type": "expense", "category": "Food", "amount": -1},
        {"type": "gift", "category": "Food", "amount": 1},
        {"type": "expense", "category": "Food", "amount": 1, "colour": "red"},
        {"type": "expense", "category": "Food", "amount": 1, "recurrence": {"period": "weekly"}},
    ]
    for body in bad_bodies:
        res = client.post("/api/entries/add", headers=auth_headers, json=body)
        assert res.status_code == 400, body
        assert res.get_json()["error"] == "Validation failed"

    res = client.post("/api/entries/add", headers=auth_headers, data="not json")
    assert res.status_code == 400

    for raw in ('{"type":"expense","category":"Food","amount": Infinity}',
                '{"type":"expense","category":"Food","amount": NaN}'):
        res = client.post("/api/entries/add", headers=auth_headers, data=raw, content_type="application/json")
        assert res.status_code == 400, raw

    assert client.get("/api/entries", headers=auth_headers).get_json() == []


def test_list_is_newest_first_and_owner_only(client, auth_headers, other_headers):
    add(client, auth_headers, date="2025-01-01")
    add(client, auth_headers, date="2025-02-01")
    add(client, other_headers, date="2025-03-01")

    dates = [e["date"] for e in client.get("/api/entries", headers=auth_headers).get_json()]
    assert dates == ["2025-02-01", "2025-01-01"]


def test_update_entry(client, auth_headers):
    entry_id = add(client, auth_headers, date="2025-01-01").get_json()["entry"]["id"]

    res = client.put(f"/api/entries/{entry_id}", headers=auth_headers,
                     json={"amount": 40, "type": "income", "date": "2025-01-05"})

    assert res.status_code == 200
    body = res.get_json()
    assert (body["amount"], body["type"], body["date"], body["category"]) == (40, "income", "2025-01-05", "Food")


def test_update_rejects_unknown_fields(client, auth_headers):
    entry_id = add(client, auth_headers).get_json()["entry"]["id"]

    res = client.put(f"/api/entries/{entry_id}", headers=auth_headers, json={"owner": 2})
    assert res.status_code == 400


def test_other_users_entries_are_not_found(client, auth_headers, other_headers):
    entry_id = add(client, auth_headers).get_json()["entry"]["id"]

    res = client.put(f"/api/entries/{entry_id}", headers=other_headers, json={"amount": 1})
    assert res.status_code == 404
    assert res.get_json() == {"error": "Entry not found"}
    assert client.delete(f"/api/entries/{entry_id}", headers=other_headers).status_code == 404


def test_delete_entry(client, auth_headers):
    entry_id = add(client, auth_headers).get_json()["entry"]["id"]

    res = client.delete(f"/api/entries/{entry_id}", headers=auth_headers)
    assert res.get_json() == {"message": "Entry deleted successfully"}
    assert client.delete(f"/api/entries/{entry_id}", headers=auth_headers).status_code == 404


def test_blank_date_means_today(client, auth_headers):
    res = add(client, auth_headers, amount="12", note="", date="")

    assert res.status_code == 201
    assert res.get_json()["entry"]["date"] == date.today().isoformat()


def test_update_rejects_infinite_amount(client, auth_headers):
    entry_id = add(client, auth_headers).get_json()["entry"]["id"]

    res = client.put(f"/api/entries/{entry_id}", headers=auth_headers,
                     data='{"amount": Infinity}', content_type="application/json")

    assert res.status_code == 400
    assert client.get("/api/entries", headers=auth_headers).get_json()[0]["amount"] == 12.5
