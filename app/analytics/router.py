import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.concurrency import run_in_threadpool
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from app.analytics.cruds.analytics import run_query
from app.analytics.errors import ExecutionFailure, InvalidQuery
from app.analytics.metadata import get_query_info, list_query_info
from app.analytics.queries import resolve
from app.analytics.schemas import ErrorResponse, QueryInfoList, QueryInfoOut, QueryResult
from app.database import get_pool


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/analytics")

INVALID_QUERY = {"error": "Invalid query type"}
QUERY_FAILED = {"error": "Database query failed"}

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def _info_out(name: str, sql: Optional[str] = None) -> QueryInfoOut:
    info = get_query_info(name)
    return QueryInfoOut(
        name=name,
        title=info.title,
        description=info.description,
        insights=list(info.insights),
        tables=list(info.tables),
        sql=sql,
    )


@router.get("", response_model=QueryResult, responses=_ERROR_RESPONSES)
async def get_analytics(query_type: Optional[str] = Query(None, alias="type"), pool=Depends(get_pool)):
    """Run one named analytics query and return its rows."""
    try:
        rows = await run_in_threadpool(run_query, pool, query_type)
    except InvalidQuery:
        logger.warning("Rejected analytics query type %r", query_type)
        return JSONResponse(status_code=400, content=INVALID_QUERY)
    except ExecutionFailure:
        return JSONResponse(status_code=500, content=QUERY_FAILED)
    # Decimal aggregates become JSON numbers rather than strings
    return QueryResult(data=jsonable_encoder(rows))


@router.get("/queries", response_model=QueryInfoList)
def get_queries():
    """List every registered query with its dashboard description."""
    return QueryInfoList(data=[_info_out(name) for name, _ in list_query_info()])


@router.get("/queries/{name}", response_model=QueryInfoOut, responses={400: {"model": ErrorResponse}})
def get_query(name: str):
    """Describe a single query, including its SQL text."""
    try:
        sql = resolve(name)
    except InvalidQuery:
        return JSONResponse(status_code=400, content=INVALID_QUERY)
    return _info_out(name, sql=sql.strip())
