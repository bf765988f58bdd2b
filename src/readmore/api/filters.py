"""Request preconditions checked before a route handler runs."""

import logging

from fastapi import HTTPException, Request

logger = logging.getLogger(__name__)


class RequiredParameter:
    """
    Dependency that rejects a request with 400 when a named parameter is absent.

    Attach it to a route with ``dependencies=[Depends(...)]``; the handler is
    never invoked for a rejected request. Only presence is checked, so an
    empty value passes. Subclasses decide where the parameter is looked up.
    """

    source = "request"

    def __init__(self, name: str):
        self.name = name

    async def __call__(self, request: Request) -> None:
        if not self._lookup(request, self.name):
            logger.info("Rejected %s %s: missing %s parameter '%s'",
                        request.method, request.url.path, self.source, self.name)
            raise HTTPException(
                status_code=400,
                detail=f"Required {self.source} parameter '{self.name}' is missing",
            )

    def _lookup(self, request: Request, name: str) -> bool:
        raise NotImplementedError


class RequiredQueryParameter(RequiredParameter):
    """Requires ``name`` to be present in the query string."""

    source = "query"

    def _lookup(self, request: Request, name: str) -> bool:
        return name in request.query_params
