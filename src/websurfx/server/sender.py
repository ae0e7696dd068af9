"""Write a Response to the ASGI ``send`` channel.

Every response goes out as exactly two messages: ``http.response.start``
with the headers, then one ``http.response.body``.
"""

from collections.abc import Iterator

from websurfx._internal.asgi import Send
from websurfx.http.response import Response

# RFC 9110: these never carry content
_NO_BODY_STATUSES = frozenset({204, 304})


def _encode_headers(response: Response, content_length: int) -> Iterator[tuple[bytes, bytes]]:
    yield b"content-type", response.content_type.encode("latin-1")
    for name, value in response.headers:
        lowered = name.lower()
        if lowered != "content-length":
            yield lowered.encode("latin-1"), value.encode("latin-1")
    yield b"content-length", str(content_length).encode("latin-1")


async def send_response(response: Response, send: Send, *, head: bool = False) -> None:
    """Emit *response*.

    ``content-length`` is always computed here; a value set by a handler
    is dropped. Informational, 204 and 304 responses carry no body. For
    ``HEAD`` the length describes the body that was not sent.
    """
    status = response.status
    if status < 200 or status in _NO_BODY_STATUSES:
        body = b""
    else:
        body = response.body_bytes

    await send(
        {
            "type": "http.response.start",
            "status": status,
            "headers": list(_encode_headers(response, len(body))),
        }
    )
    await send({"type": "http.response.body", "body": b"" if head else body})
