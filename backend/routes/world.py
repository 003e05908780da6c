from fastapi import APIRouter, Depends
from sqlmodel import Session

from models.common import get_session
from routes.deps import current_email
from services.errors import InvalidRequestError
from services.world import WorldApi, get_world_api, news_country

router = APIRouter(tags=["world"])


@router.get("/countries")
async def countries(search: str = "", world: WorldApi = Depends(get_world_api)):
    return await world.search_countries(search)


@router.get("/cities")
async def cities(country: str = "", world: WorldApi = Depends(get_world_api)):
    if not country.strip():
        raise InvalidRequestError("Missing country parameter")
    return {"data": await world.get_cities(country.strip())}


@router.get("/news")
async def news(
    mode: str = "",
    country: str = "",
    q: str = "",
    email: str = Depends(current_email),
    session: Session = Depends(get_session),
    world: WorldApi = Depends(get_world_api),
):
    local_country = news_country(session, email, mode, country.strip())
    return await world.fetch_news(local_country=local_country, query=q.strip())
