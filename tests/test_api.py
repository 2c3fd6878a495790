# tests/test_api.py
from decimal import Decimal


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["collections"]["clients"] == 4


def test_list_and_get_clients(client):
    response = client.get("/api/clients")
    assert response.status_code == 200
    assert [c["id"] for c in response.json()] == [1, 2, 3, 4]

    response = client.get("/api/clients/2")
    assert response.json()["company_name"] == "Clínica Dental Sonrisas"


def test_missing_client_is_404_with_message(client):
    response = client.get("/api/clients/999")
    assert response.status_code == 404
    assert response.json() == {"detail": "Client not found"}


def test_create_client(client):
    payload = {
        "company_name": "Acme",
        "contact_name": "X",
        "email": "a@a.com",
        "phone": "1",
        "address": "Y",
    }
    response = client.post("/api/clients", json=payload)
    assert response.status_code == 201
    body = response.json()
    assert body["id"] == 5
    assert body["status"] == "active"
    assert body["created_at"]


def test_create_client_duplicate_email_is_409(client):
    response = client.post(
        "/api/clients", json={"company_name": "Copy", "email": "MARIA@elsazonmexicano.com"}
    )
    assert response.status_code == 409
    assert response.json()["detail"] == "A client with this email already exists"
    assert len(client.get("/api/clients").json()) == 4


def test_create_client_without_required_fields_is_400(client):
    response = client.post("/api/clients", json={"contact_name": "Nobody"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Company name and email are required"


def test_update_client_keeps_id(client):
    response = client.put("/api/clients/3", json={"id": 50, "status": "active"})
    assert response.status_code == 200
    assert response.json()["id"] == 3
    assert response.json()["status"] == "active"


def test_delete_client(client):
    response = client.delete("/api/clients/4")
    assert response.status_code == 200
    assert response.json()["id"] == 4
    assert client.get("/api/clients/4").status_code == 404


def test_client_search_and_detail(client):
    assert [c["id"] for c in client.get("/api/clients/search", params={"q": "pixel"}).json()] == [4]

    detail = client.get("/api/clients/1/detail").json()
    assert [s["service_name"] for s in detail["services"]] == [
        "Hosting Web Básico",
        "Mantenimiento WordPress Premium",
    ]


def test_catalog_endpoints(client):
    assert len(client.get("/api/services").json()) == 6
    assert [s["id"] for s in client.get("/api/services", params={"category": "webHosting"}).json()] == [1, 2]
    assert [s["id"] for s in client.get("/api/services/category/webHosting").json()] == [1, 2]

    response = client.post(
        "/api/services",
        json={"name": "Backup Plus", "category": "webHosting", "price": "149.50", "billing_cycle": "monthly"},
    )
    assert response.status_code == 201
    assert response.json()["is_active"] is True
    assert Decimal(response.json()["price"]) == Decimal("149.50")

    response = client.post("/api/services", json={"name": "Bad", "category": "webHosting", "price": -1})
    assert response.status_code == 422


def test_expiring_assignments(client):
    response = client.get("/api/assignments/expiring", params={"days": 30})
    assert sorted(a["id"] for a in response.json()) == [1, 4, 6]


def test_expiring_window_is_bounded(client):
    assert client.get("/api/assignments/expiring", params={"days": 3650}).status_code == 200
    assert client.get("/api/assignments/expiring", params={"days": 10_000_000}).status_code == 422


def test_assignment_crud(client):
    response = client.post(
        "/api/assignments",
        json={"client_id": 2, "service_id": 5, "start_date": "2025-01-01", "end_date": "2025-12-31"},
    )
    assert response.status_code == 201
    new_id = response.json()["id"]

    response = client.put(f"/api/assignments/{new_id}", json={"status": "expired"})
    assert response.json()["status"] == "expired"

    assert client.delete(f"/api/assignments/{new_id}").status_code == 200
    assert client.get(f"/api/assignments/{new_id}").status_code == 404


def test_ticket_list_and_status_change(client):
    rows = client.get("/api/tickets", params={"status": "open"}).json()
    assert [t["id"] for t in rows] == [5, 1]
    assert rows[0]["client_name"] == "Clínica Dental Sonrisas"

    response = client.put("/api/tickets/1", json={"status": "inProgress"})
    assert response.status_code == 200
    assert response.json()["status"] == "inProgress"

    response = client.put("/api/tickets/1", json={"status": "archived"})
    assert response.status_code == 422


def test_ticket_thread(client):
    response = client.post("/api/tickets/2/messages", json={"message": "Anything else?"})
    assert response.status_code == 201
    assert response.json()["ticket_id"] == 2

    messages = client.get("/api/tickets/2/messages").json()
    assert messages[-1]["message"] == "Anything else?"

    detail = client.get("/api/tickets/2/detail").json()
    assert detail["client"]["id"] == 1
    assert len(detail["messages"]) == 3


def test_reply_to_missing_ticket_is_404(client):
    response = client.post("/api/tickets/99/messages", json={"message": "hello"})
    assert response.status_code == 404


def test_empty_reply_is_400(client):
    response = client.post("/api/tickets/1/messages", json={"message": "   "})
    assert response.status_code == 400


def test_dashboard(client):
    body = client.get("/api/dashboard").json()
    assert body["active_clients"] == 3
    assert body["open_tickets"] == 3
    assert body["expiring_services"] == 3
    assert Decimal(body["monthly_revenue"]) == Decimal("1797")
    assert len(body["recent_activity"]) == 5


def test_portal(client):
    body = client.get("/api/portal/1").json()
    assert body["active_services"] == 2
    assert [s["days_until_expiry"] for s in body["services"]] == [15, 45]

    thread = client.get("/api/portal/1/tickets/1").json()
    assert [m["id"] for m in thread["messages"]] == [1, 2]

    assert client.get("/api/portal/1/tickets/3").status_code == 404
    assert client.get("/api/portal/99").status_code == 404
