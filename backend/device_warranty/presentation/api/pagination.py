"""Query-string paging defaults shared by list endpoints."""

from device_warranty.config import get_settings


def resolve_page_size(size: int | None) -> int:
    """Apply the configured default page size and cap oversized requests."""
    settings = get_settings()
    if size is None:
        return settings.default_page_size
    return min(size, settings.max_page_size)
