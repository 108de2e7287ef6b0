"""Tests for LoadAccountsCommand."""

from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from finagg.application.commands import LoadAccountsCommand
from finagg.domain.banking.account_store import AccountStore
from finagg.domain.banking.exceptions import DuplicateAccountError
from finagg.domain.integration.exceptions import TransportError, TransportErrorKind
from finagg.domain.integration.ports import FinanceApiPort
from finagg.domain.shared.result import Err, Ok
from tests.shared.fixtures.factories import TestAccountFactory


@pytest.fixture
def api() -> AsyncMock:
    return AsyncMock(spec=FinanceApiPort)


@pytest.mark.asyncio
async def test_initial_load_fills_store(api):
    store = AccountStore()
    api.get_accounts.return_value = Ok(
        [
            TestAccountFactory.create("acc-1", "100"),
            TestAccountFactory.create("acc-2", "-50"),
            TestAccountFactory.create("acc-3", "0"),
        ]
    )

    result = await LoadAccountsCommand(api, store).execute()

    assert [a.id for a in result.unwrap()] == ["acc-1", "acc-2", "acc-3"]
    assert store.total_balance == Decimal("50")
    assert store.positive_count == 1
    assert store.negative_count == 1


@pytest.mark.asyncio
async def test_reload_replaces_previous_accounts(api):
    store = AccountStore([TestAccountFactory.create("old")])
    api.get_accounts.return_value = Ok([TestAccountFactory.create("new")])

    await LoadAccountsCommand(api, store).execute()

    assert [a.id for a in store] == ["new"]


@pytest.mark.asyncio
async def test_empty_server_list_empties_store(api):
    store = AccountStore([TestAccountFactory.create("old")])
    api.get_accounts.return_value = Ok([])

    result = await LoadAccountsCommand(api, store).execute()

    assert result == Ok([])
    assert len(store) == 0


@pytest.mark.asyncio
async def test_failure_keeps_previous_accounts(api):
    store = AccountStore([TestAccountFactory.create("acc-1")])
    error = TransportError(TransportErrorKind.UNREACHABLE)
    api.get_accounts.return_value = Err(error)

    result = await LoadAccountsCommand(api, store).execute()

    assert result == Err(error)
    assert [a.id for a in store] == ["acc-1"]


@pytest.mark.asyncio
async def test_duplicate_ids_become_err(api):
    store = AccountStore([TestAccountFactory.create("acc-1")])
    api.get_accounts.return_value = Ok(
        [TestAccountFactory.create("dup"), TestAccountFactory.create("dup")]
    )

    result = await LoadAccountsCommand(api, store).execute()

    assert isinstance(result, Err)
    assert isinstance(result.error, DuplicateAccountError)
    assert [a.id for a in store] == ["acc-1"]
