from fastapi import APIRouter, Depends, HTTPException, Request, status
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from application.service.get_monthly_transactions import MonthlyTransactionsService
from application.service.list_user_transactions import ListUserTransactionsService
from infrastructure.db.database import get_db_session
from infrastructure.db.repositories.user_repo_sqlalchemy import UserRepoSqlalchemy
from infrastructure.logging.logging_adapter import LoggingAdapter
from infrastructure.metrics.metrics_adapter import MetricsAdapter
from app.schemas.transaction_schema import MonthGroupResponse, UserTransactionsResponse
from domain.config import get_service_config
from domain.exceptions import (
    InvalidIdentifierError,
    MalformedRecordError,
    ProcessingError,
    StorageError,
    UserNotFoundError,
)
from domain.interfaces import UserRepository, MetricsPort, LoggingPort


def get_user_repository(db: AsyncSession = Depends(get_db_session)) -> UserRepository:
    return UserRepoSqlalchemy(db)

def get_metrics_port() -> MetricsPort:
    return MetricsAdapter()

def get_logging_port() -> LoggingPort:
    return LoggingAdapter(service_name=get_service_config().service_name)

def _request_id(request: Request) -> Optional[str]:
    """Request id chosen by RequestLogMiddleware (incoming header or generated)."""
    return getattr(request.state, "request_id", None) or request.headers.get("X-Request-ID")

router = APIRouter(prefix="/api")

@router.get("/transactions", response_model=list[UserTransactionsResponse])
async def all_transactions(
    request: Request,
    user_repo: UserRepository = Depends(get_user_repository),
    logging_port: LoggingPort = Depends(get_logging_port),
) -> list[UserTransactionsResponse]:
    """
    List every user with their raw transactions.

    No normalization or grouping is applied: dates are returned as stored.
    """
    srv = ListUserTransactionsService(user_repo, logging_port=logging_port)
    try:
        users = await srv.execute(request_id=_request_id(request))
    except StorageError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail={"error": "storage_error", "message": str(e)}
        )
    return [UserTransactionsResponse.from_domain(u) for u in users]

@router.get("/transactions/{user_id}", response_model=list[MonthGroupResponse])
async def monthly_transactions(
    user_id: str,
    request: Request,
    user_repo: UserRepository = Depends(get_user_repository),
    metrics_port: MetricsPort = Depends(get_metrics_port),
    logging_port: LoggingPort = Depends(get_logging_port),
) -> list[MonthGroupResponse]:
    """
    Get a user's transactions grouped by calendar month (UTC).

    Groups are ordered most recent first; transactions inside a group keep
    their stored order. A user without transactions gets an empty list.
    """
    srv = MonthlyTransactionsService(
        user_repo=user_repo,
        metrics_port=metrics_port,
        logging_port=logging_port
    )
    try:
        groups = await srv.execute(user_id, request_id=_request_id(request))
    except InvalidIdentifierError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "invalid_user_id", "message": "Invalid user ID format"}
        )
    except UserNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"error": "user_not_found", "message": f"User {user_id} not found"}
        )
    except MalformedRecordError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={
                "error": "malformed_record",
                "message": str(e),
                "user_id": e.user_id,
                "index": e.index,
                "date": str(e.raw_date),
            }
        )
    except StorageError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail={"error": "storage_error", "message": str(e)}
        )
    except ProcessingError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "server_error", "message": str(e.cause or e)}
        )
    return [MonthGroupResponse.from_domain(g) for g in groups]
