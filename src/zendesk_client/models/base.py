from typing import Any, Dict, Generic, Iterator, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T", bound=BaseModel)


class PagerParameters(BaseModel):
    """Page number (1-based) and page size for a paginated fetch.

    No bounds are enforced here; the server rejects out-of-range values.
    """

    page: Optional[int] = None
    page_size: Optional[int] = None

    def to_params(self) -> Dict[str, int]:
        params = {"page": self.page, "per_page": self.page_size}
        return {k: v for k, v in params.items() if v is not None}


class Page(BaseModel, Generic[T]):
    """One page of a collection, in server order."""

    items: List[T] = Field(default_factory=list)
    count: Optional[int] = Field(None, description="Total number of records across all pages")
    next_page: Optional[str] = None
    previous_page: Optional[str] = None

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[T]:  # type: ignore[override]
        return iter(self.items)

    def __getitem__(self, index: int) -> T:
        return self.items[index]

    @property
    def has_more(self) -> bool:
        return self.next_page is not None


class JobStatus(BaseModel):
    """Status record of a bulk operation queued by the server."""

    id: Optional[str] = None
    url: Optional[str] = None
    total: Optional[int] = None
    progress: Optional[int] = None
    status: Optional[str] = None
    message: Optional[str] = None
    results: Optional[List[Dict[str, Any]]] = None

    model_config = ConfigDict(extra="allow")
