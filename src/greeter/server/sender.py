"""Write a greeter Response to an ASGI ``send`` callable."""

from greeter._internal.asgi import Send
from greeter.http.response import Response

# 1xx, 204 and 304 responses never carry a body.
_NO_BODY_STATUSES = frozenset({204, 304})


async def send_response(response: Response, send: Send) -> None:
    """Emit ``http.response.start`` then a single ``http.response.body``.

    Header names are lower-cased and ``content-length`` is always set
    from the encoded body.
    """
    status = response.status
    body = b"" if status < 200 or status in _NO_BODY_STATUSES else response.body_bytes
    headers = [(b"content-type", response.content_type.encode("latin-1"))]
    headers.extend(
        (name.lower().encode("latin-1"), value.encode("latin-1"))
        for name, value in response.headers
    )
    headers.append((b"content-length", str(len(body)).encode("latin-1")))
    await send({"type": "http.response.start", "status": status, "headers": headers})
    await send({"type": "http.response.body", "body": body})
