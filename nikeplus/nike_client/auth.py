"""Nike+ developer portal login and access-token exchange.

The handshake has two steps against the developer portal:

1. ``login`` posts the account credentials as a form. The portal answers with a
   redirect chain; the session cookie it sets lands in ``session.http``'s cookie
   jar. A failed login is only visible as an ``error=`` marker in the query of
   the final redirect URL, not in the status code.
2. ``ask_access_token`` posts to the token endpoint with that cookie and stores
   the returned ``auth_token`` on the session.

``ask_access_token`` does not check that ``login`` ran first; any session whose
cookie jar already holds a valid portal cookie may call it directly.
"""

from __future__ import annotations

import logging
from urllib.parse import urlsplit

from ..config import (
    NIKEPLUS_LOGIN_CONTINUE_URL,
    NIKEPLUS_LOGIN_URL,
    NIKEPLUS_TOKEN_URL,
    REQUEST_TIMEOUT,
)
from ..errors import LoginError, TokenError
from .response_handling import decode_response
from .session import NikeSession, mask_email, mask_tail

LOGGER = logging.getLogger(__name__)

__all__ = ["ask_access_token", "login"]


def login(session: NikeSession, email: str, password: str) -> None:
    """Authenticate ``session`` with the developer portal.

    Raises:
        LoginError: The final redirect URL reports an error.
        requests.RequestException: Transport failure or malformed redirect.
    """

    payload = {
        "email": email,
        "password": password,
        "continue_url": NIKEPLUS_LOGIN_CONTINUE_URL,
    }
    masked_email = mask_email(email)
    LOGGER.info("Logging in to Nike+ developer portal as %s", masked_email)
    response = session.http.post(
        NIKEPLUS_LOGIN_URL,
        data=payload,
        timeout=REQUEST_TIMEOUT,
    )
    try:
        final_url = response.url
    finally:
        response.close()

    if final_url:
        query = urlsplit(final_url).query
        if "error=" in query:
            LOGGER.warning("Nike+ login rejected for %s: %s", masked_email, query)
            raise LoginError(f"Login return: {query}", query=query)
    LOGGER.info("Nike+ login succeeded for %s", masked_email)


def ask_access_token(session: NikeSession) -> str:
    """Exchange the portal session cookie for an access token.

    Returns the token after storing it on ``session``.

    Raises:
        TokenError: The response has no string ``auth_token``.
        NikePlusAPIError: The portal answered with an error body.
        ResponseDecodeError: The response is not a JSON object.
    """

    LOGGER.debug("Token endpoint: %s", NIKEPLUS_TOKEN_URL)
    response = session.http.post(
        NIKEPLUS_TOKEN_URL,
        headers={"Accept": "application/json"},
        timeout=REQUEST_TIMEOUT,
    )
    data = decode_response(response, dict)
    token = data.get("auth_token")
    if not isinstance(token, str):
        LOGGER.error("No auth_token in token response (keys=%s)", sorted(data))
        raise TokenError("Cannot obtain access token")
    session.access_token = token
    LOGGER.info("Obtained Nike+ access token %s", mask_tail(token))
    return token
