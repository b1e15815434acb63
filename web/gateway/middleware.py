"""Gateway middleware for the order service.

``RequestIdMiddleware`` gives every incoming HTTP request an identifier.
The id is taken from the incoming ``X-Request-Id`` header when the client
sends one, and generated as a UUIDv4 otherwise. It is stored on the
``request`` object and in a context variable, so code running downstream
(log filters, the catalog HTTP client) can read it without it being
passed around. The response carries the same id in ``X-Request-ID``.

``ApiSizeLimitMiddleware`` rejects oversized bodies sent to the orders API
before they are parsed.
"""

import uuid
import os
import contextvars
from django.http import JsonResponse

from django.utils.deprecation import MiddlewareMixin

REQUEST_ID_CTX = contextvars.ContextVar("request_id", default="-")
MAX_API_BYTES = int(os.getenv("API_MAX_BYTES", str(64 * 1024)))
API_PREFIX = "/orders"


class RequestIdMiddleware(MiddlewareMixin):
    """Django middleware that sets and returns a per-request identifier.

    Attributes:
        HEADER (str): Incoming header name as found in ``request.META``.
        RESPONSE_HEADER (str): Header name set on responses.
    """

    HEADER = "HTTP_X_REQUEST_ID"
    RESPONSE_HEADER = "X-Request-ID"

    def process_request(self, request):
        rid = request.META.get(self.HEADER) or str(uuid.uuid4())
        request.request_id = rid
        REQUEST_ID_CTX.set(rid)

    def process_response(self, request, response):
        """Copy the request id onto the response and clear the context var.

        Args:
            request: Django HttpRequest.
            response: Django HttpResponse to modify.

        Returns:
            The same HttpResponse instance with the ``X-Request-ID`` header set.
        """
        response[self.RESPONSE_HEADER] = getattr(request, "request_id", REQUEST_ID_CTX.get())
        # worker threads are reused: drop the id so later log lines are not mis-tagged
        REQUEST_ID_CTX.set("-")
        return response


class ApiSizeLimitMiddleware(MiddlewareMixin):
    def process_request(self, request):
        if request.path.startswith(API_PREFIX):
            clen = request.META.get("CONTENT_LENGTH")
            if clen and clen.isdigit() and int(clen) > MAX_API_BYTES:
                return JsonResponse({"error": "PAYLOAD_TOO_LARGE"}, status=413)
