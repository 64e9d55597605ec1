# search.py
"""
Look up one Pokémon through the running proxy and print the result.

Usage example:
    python search.py Pikachu
"""

import asyncio
import sys

import httpx

from pokeproxy.config import get_settings
from pokeproxy.frontend.search import SearchView, search_pokemon


async def _search(value: str) -> SearchView:
    settings = get_settings()
    async with httpx.AsyncClient() as client:
        return await search_pokemon(value, SearchView(), client, settings.proxy_base_url)


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) != 1:
        print("usage: python search.py <name>", file=sys.stderr)
        return 2

    view = asyncio.run(_search(argv[0]))
    print(view.render())
    return 1 if view.error_message else 0


if __name__ == "__main__":
    sys.exit(main())
