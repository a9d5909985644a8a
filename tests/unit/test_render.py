"""Unit tests for the HTML renderer."""
from unittest.mock import MagicMock

from src.sc_display.application.render import format_date, render_page
from src.sc_display.application.view import FeedView, ViewState
from src.sc_feed.application.schemas import SnapshotPayload


def _view(body: dict) -> FeedView:
    view = FeedView(MagicMock())
    view.apply(SnapshotPayload.model_validate(body))
    return view


def _render(view: FeedView) -> str:
    return render_page(view, title="Rainbow Six Siege Cup Tracker", handle="Rainbow6Game")


def _body(tweets: list[dict], media: list[dict], **extra) -> dict:
    return {"tweets": tweets, "media": media,
            "lastFetch": "2026-10-19T08:30:00.000Z", "nextFetch": "2026-10-20T08:30:00.000Z",
            "rateLimited": False, **extra}


class TestFormatDate:
    def test_long_en_us(self) -> None:
        assert format_date("2026-10-19T08:30:00.000Z", "Never") == "October 19, 2026 at 08:30 AM UTC"

    def test_offset_input_shown_in_utc(self) -> None:
        assert format_date("2026-10-19T10:30:00+02:00", "Never") == "October 19, 2026 at 08:30 AM UTC"

    def test_fallbacks(self) -> None:
        assert format_date(None, "Never") == "Never"
        assert format_date("garbage", "Never") == "garbage"


class TestMedia:
    def test_video_renders_preview_with_play_overlay(self) -> None:
        view = _view(_body(
            [{"id": "1", "text": "Siege Cup highlights", "attachments": {"media_keys": ["m1"]}}],
            [{"media_key": "m1", "type": "video", "preview_image_url": "https://p/m1.jpg"}],
        ))

        html = _render(view)

        assert '<img src="https://p/m1.jpg" alt="Video preview"' in html
        assert 'class="play-overlay"' in html
        assert "<video" not in html

    def test_photo_renders_image(self) -> None:
        view = _view(_body(
            [{"id": "1", "text": "Siege Cup", "attachments": {"media_keys": ["m2"]}}],
            [{"media_key": "m2", "type": "photo", "url": "https://p/m2.jpg"}],
        ))

        html = _render(view)

        assert '<img src="https://p/m2.jpg" alt="Tweet image"' in html
        assert "play-overlay" not in html

    def test_media_of_other_posts_not_attached(self) -> None:
        view = _view(_body(
            [{"id": "1", "text": "Siege Cup", "attachments": {"media_keys": ["m1"]}}],
            [{"media_key": "m1", "type": "photo", "url": "https://p/m1.jpg"},
             {"media_key": "m9", "type": "photo", "url": "https://p/m9.jpg"}],
        ))

        html = _render(view)

        assert "https://p/m1.jpg" in html
        assert "https://p/m9.jpg" not in html


class TestStates:
    def test_loading(self) -> None:
        view = FeedView(MagicMock())

        assert "Loading tweets..." in _render(view)

    def test_hard_error_offers_retry(self) -> None:
        view = FeedView(MagicMock())
        view.state = ViewState.HARD_ERROR
        view.error = "Twitter Bearer Token not configured."

        html = _render(view)

        assert "Twitter Bearer Token not configured." in html
        assert "Try Again" in html
        assert "Last updated" not in html

    def test_rate_limited_banner_and_disabled_refresh(self) -> None:
        view = _view({"tweets": [], "media": [], "rateLimited": True,
                      "error": "Failed to fetch Twitter user"})

        html = _render(view)

        assert "Rate Limited" in html
        assert "⚠️ Failed to fetch Twitter user" in html
        assert 'class="refresh" disabled' in html
        assert "Last updated: Never" in html
        assert "Next update: Unknown" in html

    def test_empty_list_message(self) -> None:
        view = _view(_body([{"id": "2", "text": "patch notes"}], []))

        html = _render(view)

        assert "No Siege Cup tweets found from @Rainbow6Game" in html
        assert "patch notes" not in html

    def test_post_text_escaped(self) -> None:
        view = _view(_body([{"id": "1", "text": "Siege Cup <script>alert(1)</script>"}], []))

        html = _render(view)

        assert "<script>" not in html
        assert "&lt;script&gt;" in html

    def test_success_header(self) -> None:
        view = _view(_body([{"id": "1", "text": "Siege Cup"}], []))

        html = _render(view)

        assert "Last updated: October 19, 2026 at 08:30 AM UTC" in html
        assert "Next update: October 20, 2026 at 08:30 AM UTC" in html
        assert 'class="refresh">' in html
        assert "@Rainbow6Game" in html
