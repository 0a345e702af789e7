"""Middleware — Protocol-based, no inheritance required.

A middleware is any callable matching:
    async def mw(request: Request, next: Next) -> Response

The locale middleware lives in ``intlroute.i18n.middleware`` and is
re-exported as ``intlroute.LocaleMiddleware``.
"""

from intlroute.middleware.protocol import Middleware, Next

__all__ = [
    "Middleware",
    "Next",
]
