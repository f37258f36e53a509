"""Core utilities and shared infrastructure.

- config: Validator options, defaults and environment loading
- constants: Named constants (bounds, thresholds, property names)
- exceptions: Custom exception hierarchy
"""
