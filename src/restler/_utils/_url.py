from httpx import URL

from ._endpoint import EndpointLike, endpoint_value


def url_for(base_url: URL | str, endpoint: EndpointLike) -> URL:
    """Append the endpoint path to the base URL.

    The result always has a single ``/`` between the base path and the
    endpoint path. Characters such as ``?`` inside the endpoint value are
    percent-encoded as part of the path.
    """
    base = URL(str(base_url))
    segment = endpoint_value(endpoint).strip("/")
    path = base.path.rstrip("/")
    if segment:
        path = f"{path}/{segment}"
    return base.copy_with(path=path or "/")
