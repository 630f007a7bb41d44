"""CLI package for globalopts.

This module provides the `globalopts` command-line interface for trying
out encoding strings: render their help, show the bound option table, and
parse a sample command line into settings.
"""

from globalopts.cli.main import app

__all__ = ["app"]
