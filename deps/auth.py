import logging
import os
from typing import Annotated

from fastapi import Header, HTTPException

logger = logging.getLogger(__name__)


def admin_token() -> str:
    # read per request so the token can be rotated without a restart
    return os.getenv("ADMIN_TOKEN", "")


def require_admin(
    x_admin_token: Annotated[str | None, Header(alias="x-admin-token")] = None,
) -> None:
    """
    Admin guard. With ADMIN_TOKEN unset the admin area is open, as in a
    classroom install; once it is set, X-Admin-Token must match it.
    """
    expected = admin_token()
    if not expected:
        return
    if x_admin_token != expected:
        logger.warning("rejected admin request with bad or missing x-admin-token")
        raise HTTPException(status_code=401, detail="Unauthorized.")
