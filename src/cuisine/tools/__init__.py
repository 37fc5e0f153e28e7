from .substitution import SubstitutionTool
from .authenticity import AuthenticityTool
from .regional import RegionalTool

__all__ = ["SubstitutionTool", "AuthenticityTool", "RegionalTool"]
