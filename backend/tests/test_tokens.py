from datetime import datetime, timedelta, timezone

import pytest

from movievault.domain.clock import FixedClock
from movievault.infrastructure.auth.jwt import TokenService

from conftest import SECRET


def _flip_signature_char(token: str) -> str:
    header, payload, signature = token.split(".")
    # Middle character: all six bits are significant
    index = len(signature) // 2
    replacement = "A" if signature[index] != "A" else "B"
    return ".".join([header, payload, signature[:index] + replacement + signature[index + 1:]])


def test_issue_then_validate_round_trips_user_id(tokens: TokenService) -> None:
    first = tokens.issue(42)
    second = tokens.issue(42)

    assert first.token != second.token
    assert tokens.validate(first.token) == 42
    assert tokens.validate(second.token) == 42


def test_tampered_signature_is_rejected(tokens: TokenService) -> None:
    issued = tokens.issue(42)
    assert tokens.validate(_flip_signature_char(issued.token)) is None


def test_other_secret_is_rejected(tokens: TokenService) -> None:
    foreign = TokenService("some-other-secret").issue(42)
    assert tokens.validate(foreign.token) is None


def test_expired_token_is_rejected() -> None:
    past = FixedClock(datetime.now(timezone.utc) - timedelta(hours=2))
    expired = TokenService(SECRET, expire_minutes=60, clock=past).issue(42)

    assert TokenService(SECRET).validate(expired.token) is None


@pytest.mark.parametrize("garbage", ["", "not-a-token", "a.b.c", "Bearer xyz"])
def test_malformed_tokens_are_rejected(tokens: TokenService, garbage: str) -> None:
    assert tokens.validate(garbage) is None


def test_user_id_zero_is_distinct_from_invalid(tokens: TokenService) -> None:
    assert tokens.validate(tokens.issue(0).token) == 0


def test_secret_is_required() -> None:
    with pytest.raises(ValueError):
        TokenService("")


def test_expiry_is_judged_by_the_injected_clock() -> None:
    issued_at = datetime(2001, 1, 1, tzinfo=timezone.utc)
    token = TokenService(SECRET, expire_minutes=60, clock=FixedClock(issued_at)).issue(7).token

    within = TokenService(SECRET, clock=FixedClock(issued_at + timedelta(minutes=59)))
    after = TokenService(SECRET, clock=FixedClock(issued_at + timedelta(minutes=61)))

    assert within.validate(token) == 7
    assert after.validate(token) is None
    assert TokenService(SECRET).validate(token) is None
