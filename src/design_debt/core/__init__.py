"""Core business logic: models, scoring, issue rules, templates and reports.

This module is framework-agnostic. It has no dependency on MCP, FastMCP,
or any server framework, and performs no I/O.
"""
