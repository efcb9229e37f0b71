"""Response error extraction for load test observability.

Parses marketplace API error responses into human-readable messages.
Handles two response shapes:

- Pydantic validation (422): {"detail": [{"loc": [...], "msg": "...", "type": "..."}]}
- Marketplace errors (400/401/403/404/500): {"message": "msg", "errors": {"field": ["msg"]}}
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from requests import Response


def extract_error_detail(response: Response) -> str:
    """Extract a compact error message for Locust failure messages and log lines."""
    try:
        body = response.json()
    except ValueError:
        text = getattr(response, "text", "") or ""
        return text[:300] or "(empty response body)"

    if "detail" in body and isinstance(body["detail"], list):
        parts = []
        for err in body["detail"]:
            loc = ".".join(str(p) for p in err.get("loc", []))
            msg = err.get("msg", str(err))
            parts.append(f"{loc}: {msg}" if loc else msg)
        return " | ".join(parts)

    if "errors" in body and isinstance(body["errors"], dict):
        fields = " | ".join(f"{k}: {', '.join(map(str, v)) if isinstance(v, list) else v}" for k, v in body["errors"].items())
        return f"{body.get('message', 'Validation failed')} ({fields})"

    if "message" in body:
        return str(body["message"])

    return str(body)[:300]
