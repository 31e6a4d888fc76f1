"""Text rendering of fetch results."""

from latest_news.models import FetchResult


def render_items(name: str, items: list[str]) -> str:
    lines = [name] + [f"\t{item}" for item in items]
    return "\n".join(lines) + "\n"


def render_error(url: str, error: str) -> str:
    return f"Error reaching {url}\n\t{error}\n"


def render_result(result: FetchResult) -> str:
    """Render one source's result as a block ready to print."""
    if result.error is not None:
        return render_error(result.url, result.error)
    return render_items(result.name, result.items)
