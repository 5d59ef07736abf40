"""Blog Data Package.

Command line entry point for the blog content store: payload validation
and the read API server.

Exported Functions:
    main: Entry point for the blogdata console command
"""
from .blogdata import main

__all__ = ["main"]
