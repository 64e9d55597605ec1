# pokeproxy/frontend/search.py
"""
Search client for the lookup proxy.

Python counterpart of the page script: it takes the text typed by the user,
calls the proxy and updates a SearchView. Exactly one of the two outcomes is
rendered per search: the artwork with its caption, or the error message.
"""

from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote

import httpx


class LookupFailed(Exception):
    """The proxy answered with an error body; the message is the server's."""


@dataclass
class SearchView:
    image_src: Optional[str] = None
    image_alt: str = ""
    caption: str = ""
    error_message: str = ""
    result_hidden: bool = True

    def reset(self) -> None:
        self.image_src = None
        self.image_alt = ""
        self.caption = ""
        self.error_message = ""
        self.result_hidden = True

    def render(self) -> str:
        if self.result_hidden:
            return ""
        if self.error_message:
            return f"Error: {self.error_message}"
        return f"{self.caption}\n{self.image_src or '(no artwork)'}"


def lookup_url(base_url: str, value: str) -> str:
    return f"{base_url.rstrip('/')}/lookup/{quote(value, safe='')}"


async def search_pokemon(
    value: str,
    view: SearchView,
    client: httpx.AsyncClient,
    base_url: str,
) -> SearchView:
    view.reset()

    try:
        response = await client.get(lookup_url(base_url, value))

        if not response.is_success:
            error = response.json()
            raise LookupFailed(error["error"])

        data = response.json()
        image, name, pokemon_id = data["image"], data["name"], data["id"]
    except Exception as exc:
        view.error_message = str(exc)
        view.result_hidden = False
        return view

    view.image_src = image
    view.image_alt = f"Image of {name}"
    view.caption = f"#{pokemon_id} {name}"
    view.result_hidden = False
    return view
