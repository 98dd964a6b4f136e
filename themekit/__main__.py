# themekit/__main__.py
"""
Main entry point so the CLI can be started with `python -m themekit`.
"""
from themekit.cli import app

if __name__ == "__main__":
    app(prog_name="themekit")
