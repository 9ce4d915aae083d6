"""
Caller identity dependency for FastAPI.

Authentication is handled in front of this service; the gateway forwards the
authenticated user id in the X-User-Id header.
"""

from typing import Optional

from fastapi import Header, HTTPException, status


async def get_current_user_id(
    x_user_id: Optional[str] = Header(default=None, alias="X-User-Id"),
) -> str:
    """Raises HTTPException 401 when the header is missing or blank."""
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing X-User-Id header",
        )
    return x_user_id.strip()
