"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (configuration, logging and the movie store),
``schemas`` (pydantic models), ``services`` (operations over the
store) and ``api`` (versioned routers).  Versioning is handled by
grouping routers under the ``api/<version>/`` hierarchy.
"""
