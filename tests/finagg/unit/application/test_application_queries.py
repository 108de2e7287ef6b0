"""Tests for the read-side application queries."""

from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from finagg.application.queries import (
    AccountSummaryQuery,
    GetAccountQuery,
    GetTransactionQuery,
    HealthCheckQuery,
    ListTransactionsQuery,
)
from finagg.application.services import RefreshOrchestrator
from finagg.domain.banking.account_store import AccountStore
from finagg.domain.banking.value_objects import (
    HealthStatus,
    PaginationMeta,
    TransactionFilter,
    TransactionKind,
    TransactionPage,
)
from finagg.domain.integration.ports import FinanceApiPort
from finagg.domain.shared.exceptions import ErrorCode, ValidationError
from finagg.domain.shared.result import Err, Ok
from tests.shared.fixtures.factories import TestAccountFactory, TestTransactionFactory


@pytest.fixture
def api() -> AsyncMock:
    return AsyncMock(spec=FinanceApiPort)


class TestAccountSummaryQuery:
    def test_empty_store(self):
        summary = AccountSummaryQuery(AccountStore()).execute()

        assert summary.total_accounts == 0
        assert summary.total_balance == Decimal("0")
        assert summary.refreshing == frozenset()

    def test_aggregates(self):
        store = AccountStore(
            [
                TestAccountFactory.create("acc-1", "100"),
                TestAccountFactory.create("acc-2", "-50"),
                TestAccountFactory.create("acc-3", "0"),
            ]
        )

        summary = AccountSummaryQuery(store).execute()

        assert summary.to_dict() == {
            "total_accounts": 3,
            "total_balance": "50",
            "positive_count": 1,
            "negative_count": 1,
            "refreshing": [],
        }

    def test_reports_in_flight_refreshes(self, api):
        store = AccountStore([TestAccountFactory.create("acc-1")])
        orchestrator = RefreshOrchestrator(api, store)
        orchestrator.state.begin("acc-1")

        summary = AccountSummaryQuery(store, orchestrator).execute()

        assert summary.refreshing == frozenset({"acc-1"})

    def test_reflects_later_changes(self):
        store = AccountStore([TestAccountFactory.create("acc-1", "100")])
        query = AccountSummaryQuery(store)
        assert query.execute().total_balance == Decimal("100")

        store.reload([TestAccountFactory.create("acc-1", "-10")])

        summary = query.execute()
        assert summary.total_balance == Decimal("-10")
        assert summary.negative_count == 1


class TestListTransactionsQuery:
    @pytest.mark.asyncio
    async def test_builds_filter(self, api):
        page = TransactionPage(
            transactions=[TestTransactionFactory.create()],
            meta=PaginationMeta(total=1, limit=10, offset=0, pages=1),
        )
        api.list_transactions.return_value = Ok(page)

        result = await ListTransactionsQuery(api).execute(
            account_id="acc-1",
            kind=TransactionKind.CREDIT,
            start_date=date(2024, 1, 1),
            end_date=date(2024, 1, 31),
            limit=10,
        )

        assert result == Ok(page)
        api.list_transactions.assert_awaited_once_with(
            TransactionFilter(
                account_id="acc-1",
                kind=TransactionKind.CREDIT,
                start_date=date(2024, 1, 1),
                end_date=date(2024, 1, 31),
                limit=10,
            )
        )

    @pytest.mark.asyncio
    async def test_start_after_end_is_rejected(self, api):
        result = await ListTransactionsQuery(api).execute(
            start_date=date(2024, 2, 1),
            end_date=date(2024, 1, 1),
        )

        assert isinstance(result, Err)
        assert isinstance(result.error, ValidationError)
        assert result.error.code == ErrorCode.VALIDATION_ERROR
        api.list_transactions.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_same_start_and_end_is_allowed(self, api):
        api.list_transactions.return_value = Ok(
            TransactionPage(transactions=[], meta=PaginationMeta.empty())
        )

        result = await ListTransactionsQuery(api).execute(
            start_date=date(2024, 1, 1),
            end_date=date(2024, 1, 1),
        )

        assert isinstance(result, Ok)

    @pytest.mark.asyncio
    async def test_for_account(self, api):
        api.get_account_transactions.return_value = Ok([])

        await ListTransactionsQuery(api).for_account("acc-1", limit=20)

        api.get_account_transactions.assert_awaited_once_with("acc-1", limit=20)


class TestPassThroughQueries:
    @pytest.mark.asyncio
    async def test_get_account(self, api):
        account = TestAccountFactory.checking()
        api.get_account.return_value = Ok(account)

        assert await GetAccountQuery(api).execute("acc-1") == Ok(account)
        api.get_account.assert_awaited_once_with("acc-1")

    @pytest.mark.asyncio
    async def test_get_transaction(self, api):
        txn = TestTransactionFactory.create("txn-9")
        api.get_transaction.return_value = Ok(txn)

        assert await GetTransactionQuery(api).execute("txn-9") == Ok(txn)

    @pytest.mark.asyncio
    async def test_health_check(self, api):
        api.check_health.return_value = Ok(HealthStatus(status="healthy"))

        result = await HealthCheckQuery(api).execute()

        assert result.unwrap().is_healthy
