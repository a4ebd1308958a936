"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Named constants (namespace, element names, file suffixes)
- exceptions: Custom exception hierarchy
"""
