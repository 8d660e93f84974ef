"""HTTP middleware: request ID.

Applied in main app; order matters (first added = outermost).
"""

from cardfile.middleware.request_id import RequestIDMiddleware, get_request_id

__all__ = ["RequestIDMiddleware", "get_request_id"]
