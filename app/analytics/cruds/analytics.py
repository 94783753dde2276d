import logging
from typing import Any, Dict, List

from app.analytics.errors import ExecutionFailure
from app.analytics.queries import resolve
from app.database import scoped_connection


logger = logging.getLogger(__name__)


def run_query(pool, name: str) -> List[Dict[str, Any]]:
    """Execute the registered query `name` on a pooled connection.

    Raises InvalidQuery before touching the pool when the name is unknown,
    and ExecutionFailure for any error raised while acquiring the connection
    or running the statement. The connection is released on every path.
    """
    sql = resolve(name)
    try:
        with scoped_connection(pool) as conn:
            return conn.execute(sql)
    except Exception as e:
        logger.exception("Analytics query %s failed", name)
        raise ExecutionFailure(name) from e
