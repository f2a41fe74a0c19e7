from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class ArticleFound:
    name: str


@dataclass(frozen=True)
class ArticleNotFound:
    reason: str


@dataclass(frozen=True)
class Unrecognized:
    detail: str


ServerReply = Union[ArticleFound, ArticleNotFound, Unrecognized]


def decode_reply(body: Optional[bytes]) -> ServerReply:
    """
    Classify a raw /addProductByBarcode response body.

    Recognized shapes (checked in this order):
      - {"nom": "<article>"}  -> ArticleFound
      - {"error": "<reason>"} -> ArticleNotFound
    Anything else, including an empty or non-JSON body, is Unrecognized.
    """
    if not body:
        return Unrecognized("empty body")

    try:
        payload = json.loads(body)
    except (ValueError, UnicodeDecodeError) as e:
        return Unrecognized(f"body is not JSON: {e}")

    if not isinstance(payload, dict):
        return Unrecognized(f"expected a JSON object, got {type(payload).__name__}")

    name = payload.get("nom")
    if isinstance(name, str):
        return ArticleFound(name)

    reason = payload.get("error")
    if isinstance(reason, str):
        return ArticleNotFound(reason)

    return Unrecognized(f"unexpected keys: {sorted(payload)}")
