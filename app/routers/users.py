# =============================================================================
# app/routers/users.py - User Listing Endpoint
# =============================================================================
# GET /users returns every user's first name as a JSON array.
# The endpoint takes no parameters; query strings and bodies are ignored.
# =============================================================================

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.config import PUBLIC_CORS_HEADERS
from app.dependencies import UserStoreDep
from core.services.user_service import UserService

router = APIRouter()


@router.get(
    "/users",
    response_model=list[str],
    responses={500: {"description": "Query failed; body is the error text"}},
)
def list_users(store: UserStoreDep):
    """
    List user first names.

    Sync endpoint: FastAPI runs it in its thread pool, so a slow query
    only holds up its own request.
    """
    names = UserService.list_names(store)
    return JSONResponse(content=names, headers=PUBLIC_CORS_HEADERS)
