"""Full search view endpoint."""

from fastapi import APIRouter, Depends, HTTPException, Query

from sitesearch.api.dependencies import get_presenter, get_search_client
from sitesearch.api.schemas import FacetCount, SearchResultItem, SearchViewResponse
from sitesearch.errors import SearchError
from sitesearch.query.facets import ALL_FACET, aggregate_facets
from sitesearch.query.planner import RESULT_LIMIT, build_section_request
from sitesearch.query.presenter import ResultPresenter
from sitesearch.search.base import SearchClient

router = APIRouter(prefix="/search", tags=["search"])


@router.get("", response_model=SearchViewResponse)
def search(
    q: str = Query("", description="Search term"),
    section: str = Query(ALL_FACET, description="Section facet ('all' for no filter)"),
    limit: int = Query(RESULT_LIMIT, ge=1, le=100, description="Maximum hits"),
    client: SearchClient = Depends(get_search_client),
    presenter: ResultPresenter = Depends(get_presenter),
) -> SearchViewResponse:
    """Faceted full-text search over the site's section documents.

    Args:
        q: Search term
        section: Section facet name
        limit: Maximum number of hits
        client: Search client dependency
        presenter: Result presenter dependency

    Returns:
        Display state, facets and rendered hits

    Raises:
        HTTPException: 502 if the search service fails
    """
    request = build_section_request(q, section, limit)

    try:
        response = client.search(request)
    except SearchError as e:
        raise HTTPException(
            status_code=502,
            detail=f"Search failed: {str(e)}",
        ) from e

    display = presenter.select_display_state(q, response, section, limit=limit)

    return SearchViewResponse(
        term=q,
        section=section,
        state=display.kind.value,
        count=response.count,
        facets=[
            FacetCount(name=name, count=count)
            for name, count in aggregate_facets(response).items()
        ],
        results=[
            SearchResultItem(
                id=item.id,
                href=item.href,
                title_html=item.title_html,
                breadcrumbs=list(item.breadcrumbs),
                breadcrumb_text=item.breadcrumb_text,
                page_title=item.page_title,
            )
            for item in display.results
        ],
        see_all_url=display.see_all_url,
    )
