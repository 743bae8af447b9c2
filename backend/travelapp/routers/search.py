from fastapi import APIRouter, Query

from travelapp.services.place_search import place_search_client

router = APIRouter()


@router.get("/search_nearby")
async def search_nearby(
    latitude: float | None = Query(None),
    longitude: float | None = Query(None),
    radius: str | None = Query(None, description="Search span, e.g. 200 or 200m"),
    postcode: str | None = Query(None),
    limit: int = Query(20, ge=1, le=100),
):
    """Nearby places from Longdo Map, passed through unchanged."""
    return await place_search_client.search_nearby(
        latitude=latitude,
        longitude=longitude,
        radius=radius,
        postcode=postcode,
        limit=limit,
    )
