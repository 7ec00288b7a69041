"""OpenAPI metadata customization.

Adds tag descriptions to the generated schema so the docs group the faucet
and health endpoints, keeping documentation concerns out of the app factory.
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import FastAPI

TAGS_METADATA = [
    {
        "name": "Faucet",
        "description": "Request testnet tokens for an address (one request per 24 hours).",
    },
    {
        "name": "Health",
        "description": "Liveness check.",
    },
]


def apply_openapi_customizations(app: FastAPI) -> None:
    """Wrap FastAPI's OpenAPI generation to add missing tag metadata."""

    original_openapi = app.openapi

    def custom_openapi() -> Dict[str, Any]:
        schema = original_openapi()

        tags = schema.setdefault("tags", [])
        existing_tag_names = {t.get("name") for t in tags}
        for tag in TAGS_METADATA:
            if tag["name"] not in existing_tag_names:
                tags.append(dict(tag))

        return schema

    app.openapi = custom_openapi  # type: ignore[assignment]
