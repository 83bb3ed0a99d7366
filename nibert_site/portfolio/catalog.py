"""Read-only portfolio catalog seeded at startup."""
from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..errors import NotFoundError


@dataclass(frozen=True, slots=True)
class PortfolioItem:
    """A single showcased project."""

    id: int
    title: str
    description: str
    technologies: Tuple[str, ...] = field(default_factory=tuple)
    status: str = "Completed"
    year: str = ""

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["technologies"] = list(self.technologies)
        return data


SEED_ITEMS: Tuple[PortfolioItem, ...] = (
    PortfolioItem(
        id=1,
        title="E-commerce Platform",
        description="Modern Vue.js e-commerce application with payment integration",
        technologies=("Vue.js", "Node.js", "PostgreSQL", "Stripe"),
        status="Completed",
        year="2024",
    ),
    PortfolioItem(
        id=2,
        title="Task Management System",
        description="Full-stack productivity application with real-time collaboration",
        technologies=("React", "Express", "MongoDB", "Socket.io"),
        status="In Progress",
        year="2024",
    ),
    PortfolioItem(
        id=3,
        title="AI Content Generator",
        description="Machine learning powered content creation tool",
        technologies=("Python", "FastAPI", "TensorFlow", "Vue.js"),
        status="Completed",
        year="2023",
    ),
)


class PortfolioCatalog:
    """Holds the portfolio entries for the lifetime of the process."""

    def __init__(self, items: Optional[Iterable[PortfolioItem]] = None) -> None:
        self._items: Tuple[PortfolioItem, ...] = tuple(
            SEED_ITEMS if items is None else items
        )

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def get_all(self) -> List[PortfolioItem]:
        return list(self._items)

    def get_by_id(self, item_id: int) -> PortfolioItem:
        """Return the item with ``item_id``.

        Raises:
            NotFoundError: if no item carries that id.
        """
        for item in self._items:
            if item.id == item_id:
                return item
        raise NotFoundError()
