"""POST /exchange_token: confidential half of the OAuth code exchange.

The browser hands over the authorization code it received on the redirect;
this function adds the client credentials (which must never reach the
browser), calls the provider token endpoint once and relays its JSON.

    200  provider token payload, verbatim
    400  {"error": "Missing code"} or the provider's error payload, verbatim
    405  {"error": "Method Not Allowed"}
    500  {"error": "Token exchange failed", "details": "..."}
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from warhorn_demo.constants import (
    ERROR_METHOD_NOT_ALLOWED,
    ERROR_MISSING_CODE,
    ERROR_TOKEN_EXCHANGE_FAILED,
    EXCHANGE_TOKEN_PATH,
)
from warhorn_demo.services.warhorn import WarhornClient, get_warhorn_client

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post(EXCHANGE_TOKEN_PATH)
async def exchange_token(
    request: Request,
    warhorn: Annotated[WarhornClient, Depends(get_warhorn_client)],
) -> JSONResponse:
    """Exchange an authorization code for an access token."""
    try:
        body = await request.json()
        code = body.get("code") if isinstance(body, dict) else None
        if not code:
            return JSONResponse({"error": ERROR_MISSING_CODE}, status_code=400)

        data = await warhorn.exchange_code(code)
        if isinstance(data, dict) and data.get("error"):
            logger.warning(f"Error response from token endpoint: {data}")
            return JSONResponse(data, status_code=400)

        logger.info("Token exchange succeeded")
        return JSONResponse(data, status_code=200)

    except Exception as e:
        logger.error(f"Token exchange failed: {e!r}")
        return JSONResponse(
            {"error": ERROR_TOKEN_EXCHANGE_FAILED, "details": str(e) or type(e).__name__},
            status_code=500,
        )


async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """JSON 405 body for every non-POST method on the exchange function."""
    if request.url.path == EXCHANGE_TOKEN_PATH:
        return JSONResponse(
            {"error": ERROR_METHOD_NOT_ALLOWED}, status_code=405, headers=exc.headers
        )
    return await http_exception_handler(request, exc)
