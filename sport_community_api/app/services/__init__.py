"""
Service layer.

Each service encapsulates the store queries for one domain and raises
the errors from ``core.errors``; endpoints stay thin and only translate
those errors into HTTP responses.
"""
