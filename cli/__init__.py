"""CLI package for Password Analyzer.

Provides modular CLI flows for password analysis.
"""

from cli.analyzer import analyze_password, analyze_password_flow, render_breach, render_strength
from cli.activity import review_breach_activity

__all__ = [
    "analyze_password",
    "analyze_password_flow",
    "render_breach",
    "render_strength",
    "review_breach_activity",
]
