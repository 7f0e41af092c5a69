"""
Shared building blocks for the aggregation components.

Subpackages:
- framework: configuration base classes
- schemas: data models handed between components
- utils: structured logging and error types
"""
