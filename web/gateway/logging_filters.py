"""Logging filters for enriching log records with request context.

``RequestIdFilter`` copies the current request id, set by
``gateway.middleware.RequestIdMiddleware``, onto every log record so JSON
log lines from one request can be correlated (including the lines the
catalog service writes for the lookups that request triggered).
"""

from logging import Filter, LogRecord
from .middleware import REQUEST_ID_CTX


class RequestIdFilter(Filter):
    """Attach a ``request_id`` attribute to log records.

    Outside a request the context var holds its default ("-"), so
    formatters can always reference ``%(request_id)s``.
    """

    def filter(self, record: LogRecord) -> bool:
        record.request_id = REQUEST_ID_CTX.get()
        return True
