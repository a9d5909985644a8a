"""Server-side HTML rendering of a FeedView.

Photos render as <img>. Videos render as their preview image with a play
icon overlay; there is no <video> element and no playback.
"""

from html import escape

from src.sc_common.datetime_utils import parse_iso
from src.sc_display.application.view import FeedView, ViewState
from src.sc_feed.application.schemas import MediaOut, PostOut

PLAY_ICON = (
    '<svg class="play-icon" fill="currentColor" viewBox="0 0 24 24">'
    '<path d="M8 5v14l11-7z" /></svg>'
)

_STYLE = """
body { font-family: system-ui, sans-serif; background: #0b0b0f; color: #f4f4f5; }
.container { max-width: 56rem; margin: 0 auto; padding: 2rem 1rem; }
.card { border: 1px solid #27272a; border-radius: .75rem; padding: 1rem; margin-bottom: 1rem; }
.muted { color: #a1a1aa; }
.badge { border: 1px solid #52525b; border-radius: 9999px; padding: 0 .5rem; font-size: .75rem; }
.badge.rate-limited { border-color: #ef4444; color: #f87171; }
.advisory { background: rgba(113, 63, 18, .2); color: #fde68a; padding: .5rem; border-radius: .25rem; }
.error { color: #f87171; }
.media img { max-width: 100%; border-radius: .5rem; }
.video-preview { position: relative; display: inline-block; }
.play-overlay { position: absolute; inset: 0; display: flex; align-items: center;
  justify-content: center; background: rgba(0, 0, 0, .2); border-radius: .5rem; }
.play-icon { width: 1.5rem; height: 1.5rem; background: rgba(255, 255, 255, .9);
  color: #000; border-radius: 9999px; padding: .75rem; }
.text { white-space: pre-wrap; line-height: 1.6; }
"""


def format_date(value: str | None, fallback: str) -> str:
    """en-US long form in UTC, e.g. 'October 19, 2026 at 08:30 AM UTC'."""
    if not value:
        return fallback
    try:
        dt = parse_iso(value)
    except ValueError:
        return value
    return f"{dt:%B} {dt.day}, {dt:%Y} at {dt:%I:%M %p} UTC"


def render_media(item: MediaOut) -> str:
    if item.type == "photo" and item.url:
        return (
            f'<img src="{escape(item.url)}" alt="Tweet image" crossorigin="anonymous" />'
        )
    if item.type == "video" and item.preview_image_url:
        return (
            '<div class="video-preview">'
            f'<img src="{escape(item.preview_image_url)}" alt="Video preview" '
            'crossorigin="anonymous" />'
            f'<div class="play-overlay">{PLAY_ICON}</div>'
            "</div>"
        )
    return ""


def render_post(view: FeedView, post: PostOut, handle: str) -> str:
    media_html = "".join(
        f'<div class="media" data-media-key="{escape(m.media_key)}">{render_media(m)}</div>'
        for m in view.media_for_post(post)
    )
    return (
        f'<article class="card post" data-post-id="{escape(post.id)}">'
        '<header>'
        f'<span class="badge">@{escape(handle)}</span> '
        f'<span class="muted">{escape(format_date(post.created_at, ""))}</span>'
        "</header>"
        f'<p class="text">{escape(post.text)}</p>'
        f"{media_html}"
        "</article>"
    )


def render_status_bar(view: FeedView) -> str:
    badge = '<span class="badge rate-limited">Rate Limited</span>' if view.rate_limited else ""
    disabled = "" if view.can_refresh else " disabled"
    advisory = (
        f'<div class="advisory">⚠️ {escape(view.error)}</div>'
        if view.rate_limited and view.error
        else ""
    )
    return (
        '<section class="card status">'
        f'<span class="muted">Last updated: {escape(format_date(view.last_fetch, "Never"))}</span> '
        f"{badge} "
        f'<span class="muted">Next update: {escape(format_date(view.next_fetch, "Unknown"))}</span> '
        '<form method="get" action="/" style="display:inline">'
        '<input type="hidden" name="refresh" value="1" />'
        f'<button type="submit" class="refresh"{disabled}>Refresh</button>'
        "</form>"
        f"{advisory}"
        "</section>"
    )


def render_body(view: FeedView, handle: str) -> str:
    if view.state is ViewState.LOADING:
        return '<div class="loading muted">Loading tweets...</div>'

    if view.state is ViewState.HARD_ERROR:
        return (
            '<section class="card hard-error">'
            f'<p class="error">{escape(view.error or "An error occurred")}</p>'
            '<form method="get" action="/">'
            '<input type="hidden" name="refresh" value="1" />'
            '<button type="submit">Try Again</button>'
            "</form>"
            "</section>"
        )

    posts = view.visible_posts()
    if not posts:
        listing = (
            '<section class="card empty muted">'
            f"<p>No Siege Cup tweets found from @{escape(handle)}</p>"
            "<p>Check back later for updates!</p>"
            "</section>"
        )
    else:
        listing = "".join(render_post(view, p, handle) for p in posts)
    return render_status_bar(view) + listing


def render_page(view: FeedView, title: str, handle: str) -> str:
    return (
        "<!DOCTYPE html>"
        '<html lang="en" class="dark">'
        "<head>"
        '<meta charset="utf-8" />'
        f"<title>{escape(title)}</title>"
        f"<style>{_STYLE}</style>"
        "</head>"
        "<body>"
        '<main class="container">'
        f"<h1>{escape(title)}</h1>"
        f'<p class="muted">Latest tweets from @{escape(handle)} about Siege Cup</p>'
        f"{render_body(view, handle)}"
        "</main>"
        "</body>"
        "</html>"
    )
