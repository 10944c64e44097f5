"""
Infrastructure Layer

Contains the ambient services the domain relies on:
- Configuration management
- Logging infrastructure
- Error types and helpers
"""
