"""
The `schemas` package defines the Pydantic models used by themekit: the
theme request and generated-file data model, and the typed configuration.
"""
