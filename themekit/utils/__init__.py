"""
The `utils` package holds the collaborators around the theme generator:
configuration loading, logging, and the template store and renderer used
to materialize theme files.
"""
