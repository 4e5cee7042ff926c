"""Tests for the with_retry decorator."""

from pytest import raises

from bloglist.decorators import with_retry
from bloglist.errors import PasswordHashingError


async def test_retries_until_success() -> None:
    calls = 0

    @with_retry(max_retries=3, base_delay=0.01, max_delay=0.02)
    async def flaky() -> str:
        nonlocal calls
        calls += 1
        if calls < 3:
            raise ConnectionError("not yet")
        return "ok"

    assert await flaky() == "ok"
    assert calls == 3


async def test_last_error_is_reraised() -> None:
    calls = 0

    @with_retry(max_retries=2, base_delay=0.01, max_delay=0.02, exec_retry=PasswordHashingError)
    async def always_fails() -> None:
        nonlocal calls
        calls += 1
        raise PasswordHashingError

    with raises(PasswordHashingError):
        await always_fails()
    assert calls == 2


async def test_other_errors_are_not_retried() -> None:
    calls = 0

    @with_retry(max_retries=3, base_delay=0.01)
    async def broken() -> None:
        nonlocal calls
        calls += 1
        raise ValueError("bad input")

    with raises(ValueError, match="bad input"):
        await broken()
    assert calls == 1
