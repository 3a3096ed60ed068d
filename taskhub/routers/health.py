from fastapi import APIRouter, Request

from taskhub.core.responses import error_response

router = APIRouter(tags=["health"])


@router.get("/z")
def healthz(request: Request):
    # API up + base joignable
    if not request.app.state.database.ping():
        return error_response("Database unavailable", 500)
    return {"status": "ok", "database": "ok"}
