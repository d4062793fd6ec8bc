"""
Use cases for the Todo API.

Routers call these services instead of touching the repository directly;
services raise ``TodoError`` subclasses that routers map to HTTP responses.
"""
