from .analytics import ErrorResponse, QueryInfoList, QueryInfoOut, QueryResult

__all__ = [
	"ErrorResponse",
	"QueryInfoList",
	"QueryInfoOut",
	"QueryResult",
]
