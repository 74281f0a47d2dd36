"""Pydantic schemas for API request/response models."""

from pydantic import BaseModel, Field
from typing import List, Optional


# ========== Response Schemas ==========


class FacetCount(BaseModel):
    """Facet entry shown as a section filter."""

    name: str = Field(..., description="Facet name ('all' first)")
    count: int = Field(..., ge=0, description="Number of matching documents")


class SearchResultItem(BaseModel):
    """Single rendered search hit."""

    id: str = Field(..., description="Document identifier")
    href: str = Field(..., description="Link to the page section")
    title_html: str = Field(..., description="Highlighted section title")
    breadcrumbs: List[str] = Field(default_factory=list, description="Breadcrumb trail")
    breadcrumb_text: str = Field(..., description="Breadcrumbs joined with the page title")
    page_title: str = Field(..., description="Page title")


class SearchViewResponse(BaseModel):
    """Response model for the full search view."""

    term: str = Field(..., description="Search term")
    section: str = Field(..., description="Selected section facet")
    state: str = Field(..., description="Display state")
    count: int = Field(..., ge=0, description="Total number of matches")
    facets: List[FacetCount] = Field(default_factory=list, description="Section facets")
    results: List[SearchResultItem] = Field(default_factory=list, description="Ranked hits")
    see_all_url: Optional[str] = Field(None, description="Link to all results")


# ========== Error Schemas ==========


class ErrorResponse(BaseModel):
    """Error response model."""

    error: str = Field(..., description="Error message")
    detail: Optional[str] = Field(None, description="Detailed error information")
