"""Tests for sc_common.errors and sc_common.datetime_utils."""
from datetime import UTC, datetime, timedelta, timezone

from src.sc_common.datetime_utils import from_epoch_ms, parse_iso, to_epoch_ms, to_iso_z
from src.sc_common.errors import (
    AppError,
    CredentialNotConfiguredError,
    FeedFetchError,
    InternalError,
    SnapshotParseError,
    UpstreamPostsError,
    UpstreamUserLookupError,
)


class TestAppError:
    def test_base_error(self) -> None:
        err = AppError(code=9002, message="Internal error")
        assert err.code == 9002
        assert err.message == "Internal error"
        assert err.http_status == 500

    def test_is_exception(self) -> None:
        assert isinstance(AppError(code=1001, message="test"), Exception)


class TestSpecificErrors:
    def test_missing_credential_uses_default_status(self) -> None:
        err = CredentialNotConfiguredError()
        assert err.code == 1001
        assert err.http_status == 200
        assert "TWITTER_BEARER_TOKEN" in err.message

    def test_user_lookup_passes_status_through(self) -> None:
        err = UpstreamUserLookupError(429, {"title": "Too Many Requests"})
        assert err.code == 2001
        assert err.http_status == 429
        assert err.rate_limited is True
        assert err.details == {"title": "Too Many Requests"}

    def test_posts_error_not_rate_limited_on_other_status(self) -> None:
        err = UpstreamPostsError(503)
        assert err.code == 2002
        assert err.rate_limited is False
        assert err.details is None

    def test_parse_error_truncates_body(self) -> None:
        err = SnapshotParseError("x" * 500)
        assert err.code == 3001
        assert err.message == "Server returned non-JSON response: " + "x" * 100

    def test_fetch_error_default_message(self) -> None:
        assert FeedFetchError(None, 500).message == "Failed to fetch tweets"
        assert FeedFetchError("boom", 502).http_status == 502

    def test_internal(self) -> None:
        err = InternalError()
        assert err.http_status == 500
        assert err.message == "An unexpected error occurred"


class TestDatetimeUtils:
    def test_iso_z_millis(self) -> None:
        dt = datetime(2026, 10, 19, 8, 30, 5, 987654, tzinfo=UTC)
        assert to_iso_z(dt) == "2026-10-19T08:30:05.987Z"

    def test_iso_z_converts_to_utc(self) -> None:
        dt = datetime(2026, 10, 19, 10, 0, tzinfo=timezone(timedelta(hours=2)))
        assert to_iso_z(dt) == "2026-10-19T08:00:00.000Z"

    def test_parse_iso_z_suffix(self) -> None:
        assert parse_iso("2026-10-19T08:00:00.000Z") == datetime(2026, 10, 19, 8, tzinfo=UTC)

    def test_parse_iso_naive_is_utc(self) -> None:
        assert parse_iso("2026-10-19T08:00:00") == datetime(2026, 10, 19, 8, tzinfo=UTC)

    def test_epoch_ms(self) -> None:
        dt = datetime(2026, 10, 19, 8, 0, tzinfo=UTC)
        assert from_epoch_ms(to_epoch_ms(dt)) == dt

    def test_epoch_ms_keeps_every_millisecond(self) -> None:
        base = datetime(2026, 10, 19, 8, 0, 1, tzinfo=UTC)
        for ms in range(1000):
            dt = base + timedelta(milliseconds=ms)
            assert to_epoch_ms(dt) == to_epoch_ms(base) + ms
            assert from_epoch_ms(to_epoch_ms(dt)) == dt

    def test_epoch_ms_drops_sub_millisecond(self) -> None:
        dt = datetime(2026, 10, 19, 8, 0, 0, 123999, tzinfo=UTC)
        assert from_epoch_ms(to_epoch_ms(dt)) == dt.replace(microsecond=123000)
