import pytest
from fastapi.testclient import TestClient

from expense_manager.core.config import Settings
from expense_manager.main import create_app


@pytest.fixture
def client():
    app = create_app(Settings(WELCOME_DELAY_SECONDS=0))
    with TestClient(app) as c:
        yield c


def add(client, kind, amount, category, date, description="entry"):
    response = client.post("/api/transactions", json={
        "kind": kind,
        "amount": amount,
        "category": category,
        "description": description,
        "date": date,
    })
    assert response.status_code == 201, response.text
    return response.json()


def test_root_and_health(client):
    assert client.get("/").json()["message"] == "Welcome to ExpenseManager API"
    body = client.get("/api/health").json()
    assert body["status"] == "healthy"
    assert body["transactions"] == 0


def test_reference_data(client):
    currencies = client.get("/api/reference/currencies").json()
    assert currencies[0] == {"code": "USD", "symbol": "$", "name": "US Dollar"}
    categories = client.get("/api/reference/categories").json()
    assert "Salary" in categories["income"]
    assert "Housing" in categories["expense"]


def test_session_flow(client):
    assert client.get("/api/session").json()["phase"] == "name_prompt"

    assert client.put("/api/session/name", json={"name": "   "}).status_code == 422
    assert client.put("/api/session/name", json={"name": "Ada"}).json()["phase"] == "ready"

    assert client.put("/api/session/currency", json={"code": "XXX"}).status_code == 404
    assert client.put("/api/session/currency", json={"code": "EUR"}).json()["currency"]["code"] == "EUR"

    assert client.put("/api/session/month", json={"month": "2025-13"}).status_code == 400
    body = client.put("/api/session/month", json={"month": "2025-01"}).json()
    assert body["selected_month"] == "2025-01"
    assert body["period"] == "January 2025"


def test_create_rejects_invalid_input(client):
    base = {"kind": "expense", "amount": 10, "category": "Food", "description": "lunch"}
    for override in (
        {"amount": -1},
        {"category": "Salary"},
        {"description": ""},
        {"kind": "transfer"},
    ):
        assert client.post("/api/transactions", json={**base, **override}).status_code == 422
    assert client.get("/api/transactions").json() == []


def test_create_defaults_to_selected_month(client):
    client.put("/api/session/month", json={"month": "2024-06"})
    created = client.post("/api/transactions", json={
        "kind": "expense", "amount": 12.5, "category": "Food", "description": "lunch",
    }).json()
    assert created["date"].startswith("2024-06-01")


def test_list_newest_first_and_delete(client):
    first = add(client, "income", 1000, "Salary", "2025-01-01T00:00:00")
    second = add(client, "expense", 300, "Food", "2025-01-05T00:00:00")
    ids = [t["id"] for t in client.get("/api/transactions").json()]
    assert ids == [second["id"], first["id"]]

    assert client.delete(f"/api/transactions/{second['id']}").status_code == 204
    assert client.delete("/api/transactions/missing").status_code == 204
    ids = [t["id"] for t in client.get("/api/transactions").json()]
    assert ids == [first["id"]]


def test_monthly_analysis(client):
    add(client, "income", 1000, "Salary", "2025-01-01T00:00:00")
    add(client, "expense", 300, "Food", "2025-01-10T00:00:00")
    add(client, "expense", 200, "Housing", "2025-01-20T00:00:00")
    add(client, "expense", 50, "Food", "2025-02-02T00:00:00")

    body = client.get("/api/analysis", params={"month": "2025-01"}).json()
    assert body["period"] == "January 2025"
    assert (body["total_income"], body["total_expense"], body["savings"]) == (1000, 500, 500)
    assert body["top_expenses"] == [
        {"category": "Food", "amount": 300, "percentage": 60},
        {"category": "Housing", "amount": 200, "percentage": 40},
    ]
    assert body["other_expenses"] == []
    assert [s["category"] for s in body["suggestions"]] == ["Food", "Housing"]

    assert client.get("/api/analysis", params={"month": "bad"}).status_code == 400


def test_analysis_defaults_to_selected_month(client):
    client.put("/api/session/month", json={"month": "2025-02"})
    add(client, "expense", 50, "Food", "2025-02-02T00:00:00")
    body = client.get("/api/analysis").json()
    assert body["month"] == "2025-02"
    assert body["total_expense"] == 50


def test_report_downloads(client):
    client.put("/api/session/name", json={"name": "Ada"})
    add(client, "expense", 300, "Food", "2025-01-10T00:00:00", "groceries")

    pdf = client.get("/api/reports/monthly/2025-01")
    assert pdf.status_code == 200
    assert pdf.headers["content-type"] == "application/pdf"
    assert 'filename="expense-report-Jan-2025.pdf"' in pdf.headers["content-disposition"]
    assert pdf.content.startswith(b"%PDF")

    empty = client.get("/api/reports/monthly/2025-03")
    assert empty.status_code == 200

    csv = client.get("/api/reports/monthly/2025-01/csv")
    assert 'filename="expense-report-Jan-2025.csv"' in csv.headers["content-disposition"]
    assert "groceries" in csv.text

    assert client.get("/api/reports/monthly/nope").status_code == 400


@pytest.mark.parametrize("path", ["/api/session", "/api/transactions", "/api/analysis"])
def test_collection_paths_answer_without_redirect(client, path):
    assert client.get(path, follow_redirects=False).status_code == 200
