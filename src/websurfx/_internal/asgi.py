"""Raw ASGI message shapes.

Only the ASGI entry points (App and the request handler) touch these;
everything else works with Request and Response.
"""

from collections.abc import Awaitable, Callable, MutableMapping
from typing import Any

type Message = MutableMapping[str, Any]
type Scope = Message
type Receive = Callable[[], Awaitable[Message]]
type Send = Callable[[Message], Awaitable[None]]
