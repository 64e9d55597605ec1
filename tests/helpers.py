import httpx

UPSTREAM_TEMPLATE = "https://upstream.test/api/v2/pokemon/{identifier}"

PIKACHU = {
    "name": "pikachu",
    "id": 25,
    "height": 4,
    "sprites": {
        "front_default": "https://x/sprite-25.png",
        "other": {"official-artwork": {"front_default": "https://x/25.png"}},
    },
}


def stub_upstream(routes, seen=None):
    """
    AsyncClient whose transport answers from `routes` ({path: Response}) and 404s otherwise.
    """
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request.url)
        if request.url.path in routes:
            return routes[request.url.path]
        return httpx.Response(404, text="Not Found")

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def failing_upstream(exc: Exception):
    def handler(request: httpx.Request) -> httpx.Response:
        raise exc

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))
