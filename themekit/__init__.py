"""
themekit core package.

Generates `.theme.json` files from templates: file-name derivation and
property building (`generator`), template lookup and rendering (`utils`),
input providers (`providers`), and the `new-theme` action that ties them
together.
"""

__all__ = [
    "action",
    "generator",
    "providers",
    "registry",
    "schemas",
    "utils",
]
