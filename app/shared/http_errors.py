import logging
from fastapi import HTTPException

logger = logging.getLogger(__name__)


def to_http_exception(error: Exception, action: str) -> HTTPException:
    """
    Translate a service error into the response shown to the cashier.

    ValueError carries a user-facing validation message (400), LookupError a
    missing record or cart (404). Anything else is logged and reported as a
    plain 500; nothing is retried.
    """
    if isinstance(error, ValueError):
        logger.warning(f"Rejected {action}: {error}")
        return HTTPException(status_code=400, detail=str(error))
    if isinstance(error, LookupError):
        return HTTPException(status_code=404, detail=str(error).strip("'\""))
    logger.error(f"Error {action}: {error}")
    return HTTPException(status_code=500, detail="Internal Server Error")
