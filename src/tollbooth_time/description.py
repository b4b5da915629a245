"""Invoice description for time-based access purchases."""

from __future__ import annotations

from tollbooth_time.request import RequestContext

_UNKNOWN_DATA = "[unknown data]"
_UNKNOWN_DURATION = "[unknown]"


def describe_purchase(context: RequestContext) -> str:
    """Describe what is being paid for and for how long.

    Falls back to the request line when neither a title nor an app name
    is given; otherwise fills the missing one with a placeholder. When no
    explicit ``time`` was requested the amount is shown, since without a
    rate one unit buys one second.
    """
    title = context.title
    app_name = context.app_name

    if not app_name and not title:
        info = f"{context.method} {context.original_url}"
    else:
        if not app_name:
            app_name = f"[unknown application @ {context.ip or 'unknown address'}]"
        if not title:
            title = _UNKNOWN_DATA
        info = f"{title} in {app_name}"

    duration = context.time or context.amount
    if duration is None:
        duration = _UNKNOWN_DURATION

    return f"Payment to access {info} for {duration} seconds"
