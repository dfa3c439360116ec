"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Tag names, reference markers, default render palette
- exceptions: Custom exception hierarchy
- registry: Tag name → element factory registry
"""
