"""Tests for the Ok/Err result type."""

import pytest

from finagg.domain.shared.exceptions import EntityNotFoundError
from finagg.domain.shared.result import Err, Ok


def test_ok_unwrap_returns_value():
    assert Ok(3).unwrap() == 3
    assert Ok(3).is_ok


def test_err_unwrap_raises_error():
    error = EntityNotFoundError("gone")

    with pytest.raises(EntityNotFoundError, match="gone"):
        Err(error).unwrap()
    assert not Err(error).is_ok


def test_map_only_applies_to_ok():
    error = EntityNotFoundError("gone")

    assert Ok(2).map(lambda v: v * 10) == Ok(20)
    assert Err(error).map(lambda v: v * 10) == Err(error)
