"""Page/offset arithmetic shared by paginated listings."""
from dataclasses import dataclass


def compute_offset(page: int, page_size: int) -> int:
    """Return the row offset of the first item on ``page`` (1-based)."""
    return (page - 1) * page_size


def compute_total_pages(total_items: int, page_size: int) -> int:
    """Return how many pages of ``page_size`` are needed for ``total_items``."""
    return (total_items + page_size - 1) // page_size


@dataclass
class PageInfo:
    page: int
    page_size: int
    total_items: int

    @property
    def offset(self) -> int:
        return compute_offset(self.page, self.page_size)

    @property
    def total_pages(self) -> int:
        return compute_total_pages(self.total_items, self.page_size)

    @property
    def has_next_page(self) -> bool:
        return self.page < self.total_pages
