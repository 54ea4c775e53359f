"""Service layer: structured results over the type engine."""

from xstypes.services.result import ServiceError, ServiceResult

__all__ = ["ServiceError", "ServiceResult"]
