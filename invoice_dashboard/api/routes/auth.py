"""Sign-in — credential check against the users table.

Invariants:
    - Unknown email and wrong password are indistinguishable to the caller (401)
    - The password hash is never part of a response
"""

from fastapi import APIRouter, Depends, Form, HTTPException, status

from invoice_dashboard.api.dependencies import get_user_queries
from invoice_dashboard.schemas.user import UserPublic
from invoice_dashboard.services.user_queries import UserQueries

router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


@router.post("/login", response_model=UserPublic)
async def login(
    email: str = Form(...),
    password: str = Form(...),
    queries: UserQueries = Depends(get_user_queries),
):
    user = await queries.authenticate(email, password)
    if user is None:
        raise HTTPException(
            status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials.",
        )
    return user
