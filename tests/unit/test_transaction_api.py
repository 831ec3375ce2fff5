"""HTTP-level tests for the transaction router: status codes, JSON shapes,
error bodies. Service runs over a mock repository and in-memory cache."""

from collections.abc import AsyncGenerator
from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import AsyncClient

from src.ft_common.database import get_db_session
from src.ft_common.enums import TransactionType
from src.ft_common.errors import StoreError
from src.ft_transaction.api.router import get_transaction_service
from src.ft_transaction.application.service import TransactionApplicationService
from src.main import app


@pytest.fixture
def mock_repo():
    return MagicMock()


@pytest.fixture
def api(mock_repo, fake_cache, db):
    svc = TransactionApplicationService(
        repo=mock_repo, cache=fake_cache, key_prefix="ft", recent_limit=5,
        today=lambda: date(2024, 3, 14),
    )

    async def _session() -> AsyncGenerator[AsyncMock, None]:
        yield db

    app.dependency_overrides[get_transaction_service] = lambda: svc
    app.dependency_overrides[get_db_session] = _session
    yield svc
    app.dependency_overrides.clear()


_VALID = {
    "userId": "u1",
    "amount": "50.5",
    "description": " Lunch ",
    "category": "Food",
    "type": "expense",
    "date": "2024-03-01",
}


class TestCreateEndpoint:
    async def test_created(self, client: AsyncClient, api, mock_repo, make_txn) -> None:
        mock_repo.create_transaction = AsyncMock(return_value=make_txn())

        resp = await client.post("/api/transactions", json=_VALID)

        assert resp.status_code == 200
        body = resp.json()
        assert body["amount"] == 50.5
        assert body["description"] == "Lunch"
        assert body["type"] == "expense"
        assert body["id"]
        assert body["createdAt"]

    async def test_missing_field_400(self, client: AsyncClient, api) -> None:
        payload = {k: v for k, v in _VALID.items() if k != "category"}
        resp = await client.post("/api/transactions", json=payload)
        assert resp.status_code == 400
        assert resp.json() == {"error": "Missing required field: category"}

    async def test_invalid_amount_400(self, client: AsyncClient, api, mock_repo) -> None:
        mock_repo.create_transaction = AsyncMock()
        resp = await client.post("/api/transactions", json={**_VALID, "amount": -10})
        assert resp.status_code == 400
        assert resp.json() == {"error": "Invalid amount value"}
        mock_repo.create_transaction.assert_not_awaited()

    async def test_numeric_type_400(self, client: AsyncClient, api, mock_repo) -> None:
        mock_repo.create_transaction = AsyncMock()
        resp = await client.post("/api/transactions", json={**_VALID, "type": 5})
        assert resp.status_code == 400
        assert resp.json() == {"error": "Invalid transaction type: 5"}
        mock_repo.create_transaction.assert_not_awaited()

    async def test_non_object_body_400(self, client: AsyncClient, api) -> None:
        resp = await client.post("/api/transactions", json=["not", "an", "object"])
        assert resp.status_code == 400
        assert "error" in resp.json()

    async def test_store_failure_500(self, client: AsyncClient, api, mock_repo) -> None:
        mock_repo.create_transaction = AsyncMock(side_effect=StoreError())
        resp = await client.post("/api/transactions", json=_VALID)
        assert resp.status_code == 500
        assert resp.json() == {"error": "Transaction store error"}


class TestRecentEndpoint:
    async def test_lists_newest_first(self, client: AsyncClient, api, mock_repo, make_txn) -> None:
        mock_repo.list_recent = AsyncMock(
            return_value=[make_txn(id="new"), make_txn(id="old")]
        )

        resp = await client.get("/api/transactions", params={"userId": "u1"})

        assert resp.status_code == 200
        assert [t["id"] for t in resp.json()] == ["new", "old"]
        assert resp.json()[0]["userId"] == "u1"

    async def test_empty(self, client: AsyncClient, api, mock_repo) -> None:
        mock_repo.list_recent = AsyncMock(return_value=[])
        resp = await client.get("/api/transactions", params={"userId": "u1"})
        assert resp.status_code == 200
        assert resp.json() == []

    async def test_missing_user_id_400(self, client: AsyncClient, api) -> None:
        resp = await client.get("/api/transactions")
        assert resp.status_code == 400
        assert resp.json() == {"error": "Missing required field: userId"}

    async def test_cache_outage_still_200(
        self, client: AsyncClient, api, mock_repo, fake_cache, make_txn
    ) -> None:
        fake_cache.fail_get = True
        fake_cache.fail_set = True
        mock_repo.list_recent = AsyncMock(return_value=[make_txn()])

        resp = await client.get("/api/transactions", params={"userId": "u1"})

        assert resp.status_code == 200
        assert len(resp.json()) == 1

    async def test_request_id_header(self, client: AsyncClient, api, mock_repo) -> None:
        mock_repo.list_recent = AsyncMock(return_value=[])
        resp = await client.get("/api/transactions", params={"userId": "u1"})
        assert resp.headers["X-Request-ID"].startswith("req_")


class TestMonthlyEndpoint:
    async def test_buckets(self, client: AsyncClient, api, mock_repo, make_txn) -> None:
        mock_repo.list_since = AsyncMock(return_value=[
            make_txn(amount=Decimal("1000"), type=TransactionType.INCOME, date=date(2024, 3, 1)),
            make_txn(amount=Decimal("200"), date=date(2024, 3, 5)),
        ])

        resp = await client.get("/api/transactions/monthly", params={"userId": "u1"})

        assert resp.status_code == 200
        assert resp.json() == [{"month": "Mar 2024", "income": 1000.0, "expense": 200.0}]

    async def test_this_month_filter(self, client: AsyncClient, api, mock_repo) -> None:
        mock_repo.list_since = AsyncMock(return_value=[])
        resp = await client.get(
            "/api/transactions/monthly", params={"userId": "u1", "filter": "this-month"}
        )
        assert resp.status_code == 200
        assert mock_repo.list_since.call_args.args[2] == date(2024, 3, 1)

    async def test_invalid_filter_400(self, client: AsyncClient, api) -> None:
        resp = await client.get(
            "/api/transactions/monthly", params={"userId": "u1", "filter": "forever"}
        )
        assert resp.status_code == 400
        assert resp.json() == {"error": "Invalid filter: forever"}


class TestMiscEndpoints:
    async def test_categories(self, client: AsyncClient, api) -> None:
        resp = await client.get("/api/transactions/categories")
        assert resp.status_code == 200
        assert "Salary" in resp.json()["income"]

    async def test_health(self, client: AsyncClient) -> None:
        resp = await client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "ok"
