from .guide import build_cultural_guide
from .tools import AuthenticityTool, RegionalTool, SubstitutionTool

__all__ = ["build_cultural_guide", "AuthenticityTool", "RegionalTool", "SubstitutionTool"]
