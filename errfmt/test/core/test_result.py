"""Tests for errfmt.core.result module."""

import pytest

from errfmt.core.result import Err, Ok, Result


class TestResult:
    """Tests for Ok and Err values."""

    def test_ok_holds_value(self) -> None:
        assert Ok(42).value == 42

    def test_err_holds_error(self) -> None:
        assert Err("bad").error == "bad"

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            Ok(1).value = 2  # type: ignore[misc]

    def test_match(self) -> None:
        results: list[Result[int, str]] = [Ok(1), Err("x")]
        seen: list[str] = []
        for result in results:
            match result:
                case Ok(value):
                    seen.append(f"ok {value}")
                case Err(error):
                    seen.append(f"err {error}")
        assert seen == ["ok 1", "err x"]
