"""
HTTP API for Form Assist.

Exposes the form-assist, validate-schema and limits operations over
Starlette routes.
"""

from form_assist.api.app import create_app, new_preview_id

__all__ = [
    "create_app",
    "new_preview_id",
]
