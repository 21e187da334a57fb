"""AI Design Debt MCP Server.

Score how ready a UI component is for AI-generated content across streaming,
confidence, error handling, dynamic content and interaction patterns, and
get a prioritized remediation plan with story-point estimates.
"""

__version__ = "0.1.0"

from .core.scoring import analyze_component

__all__ = ["analyze_component", "__version__"]
