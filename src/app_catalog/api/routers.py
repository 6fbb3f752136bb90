from fastapi import APIRouter, Depends, Query

from ..application.use_cases import ListAppsUseCase
from ..container import get_app_container

router = APIRouter()


def get_list_apps_use_case() -> ListAppsUseCase:
    return get_app_container().list_apps_use_case


@router.get("/apps")
def list_apps(
    limit: str | None = Query(default=None, description="Maximum number of apps; absent means all"),
    skip: str | None = Query(default=None, description="Number of apps to skip, default 0"),
    sort: str | None = Query(default=None, description="Sort field: rating, size or downloads"),
    order: str | None = Query(default=None, description="'asc' for ascending, anything else descending"),
    search: str | None = Query(default=None, description="Case-insensitive title substring"),
    use_case: ListAppsUseCase = Depends(get_list_apps_use_case),
) -> dict:
    page = use_case.execute(
        {
            "limit": limit,
            "skip": skip,
            "sort": sort,
            "order": order,
            "search": search,
        }
    )
    return page.to_response()
