from pydantic import BaseModel, Field
from typing import Dict, Literal, Optional

from app.services.table_data import PaginationConfig, SortConfig

Dir = Literal["asc", "desc"]

class SortClause(BaseModel):
    key: str
    direction: Dir = "asc"

class PageClause(BaseModel):
    current_page: int = Field(1, ge=1)
    page_size: int = Field(10, ge=1, le=500)

class TableQuery(BaseModel):
    search: str = ""
    filters: Dict[str, str] = Field(default_factory=dict)
    sort: Optional[SortClause] = None
    page: PageClause = Field(default_factory=PageClause)

    def sort_config(self) -> SortConfig | None:
        if self.sort is None:
            return None
        return SortConfig(key=self.sort.key, direction=self.sort.direction)

    def pagination(self) -> PaginationConfig:
        return PaginationConfig(current_page=self.page.current_page, page_size=self.page.page_size)
