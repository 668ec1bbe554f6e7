"""Readable error messages from Stockroom API responses.

Two body shapes come back from the API:

- request validation (422): {"detail": [{"loc": [...], "msg": "..."}]}
- inventory and domain errors (400/404/409/500): {"error": {"field": ["msg", ...]}}
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from requests import Response


def extract_error_detail(response: Response) -> str:
    """One-line summary of an error response for Locust failures and logs."""
    try:
        body = response.json()
    except ValueError:
        text = getattr(response, "text", "") or ""
        return text[:300] or "(empty response body)"

    if isinstance(body.get("detail"), list):
        return " | ".join(
            f"{'.'.join(str(part) for part in err.get('loc', []))}: {err.get('msg', err)}" for err in body["detail"]
        )

    error = body.get("error")
    if isinstance(error, dict):
        return " | ".join(
            f"{field}: {'; '.join(map(str, messages)) if isinstance(messages, list) else messages}"
            for field, messages in error.items()
        )
    if error is not None:
        return str(error)

    return str(body)[:300]
