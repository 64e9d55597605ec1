# pokeproxy/upstream/pokeapi.py

import logging
from typing import Any, Mapping
from urllib.parse import quote

import httpx

from pokeproxy.config import Settings
from pokeproxy.models.lookup import LookupOut

logger = logging.getLogger(__name__)


class UpstreamNotFound(Exception):
    """The upstream answered with a non-success status."""

    def __init__(self, identifier: str, status_code: int):
        super().__init__(f"upstream returned {status_code} for {identifier!r}")
        self.identifier = identifier
        self.status_code = status_code


def normalize_identifier(identifier: str) -> str:
    return identifier.lower()


def build_upstream_url(identifier: str, template: str) -> str:
    # keep the identifier a single path segment
    return template.format(identifier=quote(identifier, safe=""))


def project_pokemon(payload: Mapping[str, Any]) -> LookupOut:
    """
    Reduce a PokeAPI /pokemon payload to name, id and official artwork URL.

    Raises KeyError / TypeError when the payload does not have that shape.
    """
    return LookupOut(
        name=payload["name"],
        id=payload["id"],
        image=payload["sprites"]["other"]["official-artwork"]["front_default"],
    )


async def fetch_pokemon(
    client: httpx.AsyncClient,
    identifier: str,
    settings: Settings,
) -> LookupOut:
    identifier = normalize_identifier(identifier)
    url = build_upstream_url(identifier, settings.upstream_url_template)

    response = await client.get(url)

    if not response.is_success:
        raise UpstreamNotFound(identifier, response.status_code)

    return project_pokemon(response.json())
