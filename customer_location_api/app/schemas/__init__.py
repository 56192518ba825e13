"""
Pydantic schema definitions for API payloads.

Customers and locations each define their own request and response
models.  JSON field names are camelCase (``firstName``); Python code
uses the snake_case attribute names.
"""
