# pokeproxy/api/lookup.py

import logging

import httpx
from fastapi import APIRouter, Depends, HTTPException

from pokeproxy.config import Settings, get_settings
from pokeproxy.models.lookup import ErrorOut, LookupOut
from pokeproxy.upstream.client import get_http_client
from pokeproxy.upstream.pokeapi import UpstreamNotFound, fetch_pokemon

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/lookup", tags=["lookup"])


@router.get(
    "/{identifier}",
    response_model=LookupOut,
    responses={404: {"model": ErrorOut}, 500: {"model": ErrorOut}},
)
async def lookup(
    identifier: str,
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> LookupOut:
    """
    Look up a Pokémon by name (case-insensitive) and return name, id and artwork URL.
    """
    try:
        return await fetch_pokemon(client, identifier, settings)
    except UpstreamNotFound as exc:
        logger.info("Lookup miss: %s", exc)
        raise HTTPException(status_code=404, detail="not found")
    except Exception:
        logger.exception("Upstream fetch failed for %r", identifier)
        raise HTTPException(status_code=500, detail="server error")
