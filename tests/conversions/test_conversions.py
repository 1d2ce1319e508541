from returns.maybe import Nothing, Some
from returns.result import Failure as Err
from returns.result import Success as Ok

from outcome import Failure, Outcome, Success


def test_wrap_in_option() -> None:
    assert Success.or_none("test") == Some("test")
    assert Failure.or_none("test") == Nothing


def test_or_none_wraps_none_as_present() -> None:
    assert Success.or_none(None) == Some(None)
    assert Success.or_none(None) != Nothing


def test_or_none_keeps_value_identity() -> None:
    payload = {"hello": 1}
    assert Success.or_none(payload).unwrap() is payload


def test_or_err_success() -> None:
    res = Success.or_err("good", "bad")
    assert isinstance(res, Ok)
    assert res.unwrap() == "good"


def test_or_err_failure() -> None:
    res = Failure.or_err("good", "bad")
    assert isinstance(res, Err)
    assert res.failure() == "bad"


def test_from_result_discards_payload() -> None:
    assert Outcome.from_result(Ok(1)) is Success
    assert Outcome.from_result(Err("boom")) is Failure


def test_from_maybe_discards_payload() -> None:
    assert Outcome.from_maybe(Some(0)) is Success
    assert Outcome.from_maybe(Nothing) is Failure


def test_conversions_preserve_tag() -> None:
    for result in Outcome:
        assert Outcome.from_result(result.or_err(1, 2)) is result
        assert Outcome.from_maybe(result.or_none(1)) is result
