"""Global exception handlers for the API."""

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

logger = structlog.get_logger()


class AccountPendingApprovalError(Exception):
    """Candidate account exists but an admin has not approved it yet."""

    def __init__(self, account_status: str):
        self.account_status = account_status
        super().__init__(f"Account status is {account_status}")


def _error_body(code: str, message: str) -> dict:
    return {"error": {"code": code, "message": message, "details": {}}}


def setup_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""

    @app.exception_handler(AccountPendingApprovalError)
    async def pending_approval_handler(request: Request, exc: AccountPendingApprovalError) -> JSONResponse:
        logger.info(
            "Account pending approval",
            status=exc.account_status,
            path=request.url.path,
        )
        # Top-level keys: the candidate area reads requiresApproval directly
        return JSONResponse(
            status_code=403,
            content={
                "error": "Conta pendente de aprovação",
                "status": exc.account_status,
                "requiresApproval": True,
            },
        )

    @app.exception_handler(PyMongoError)
    async def database_error_handler(request: Request, exc: PyMongoError) -> JSONResponse:
        logger.error(
            "Database error",
            error=str(exc),
            path=request.url.path,
        )
        return JSONResponse(
            status_code=500,
            content=_error_body("DATABASE_ERROR", "A database error occurred"),
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "Unexpected error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=500,
            content=_error_body("INTERNAL_ERROR", "An unexpected error occurred"),
        )
