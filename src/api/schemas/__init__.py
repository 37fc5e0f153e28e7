from .cuisine import (
    SubstitutionRequest,
    SubstitutionResponse,
    AuthenticityRequest,
    GuideRequest,
)

__all__ = [
    "SubstitutionRequest",
    "SubstitutionResponse",
    "AuthenticityRequest",
    "GuideRequest",
]
