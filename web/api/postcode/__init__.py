"""Postcode lookup API."""

from web.api.postcode.views import lookup_postcode

__all__ = [
    "lookup_postcode",
]
