from typing import Any, Dict, List, Optional

from pydantic import BaseModel


class QueryResult(BaseModel):
    """Rows returned by one analytics query, keyed by column name."""
    data: List[Dict[str, Any]]


class ErrorResponse(BaseModel):
    """Error body; never carries database details."""
    error: str


class QueryInfoOut(BaseModel):
    """Description of a registered query for the dashboard UI."""
    name: str
    title: str
    description: str
    insights: List[str]
    tables: List[str]
    sql: Optional[str] = None


class QueryInfoList(BaseModel):
    data: List[QueryInfoOut]
