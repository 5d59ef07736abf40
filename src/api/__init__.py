"""Blog Data Read API Package.

Flask application that publishes the blog content store as JSON for the
site's page-rendering front end.

Key Components:
    create_app: Application factory

Endpoints:
    GET /health: Health check endpoint for monitoring
    GET /api/blog-data: Full payload
    GET /api/blogs: Post summaries, filterable by category and tag
    GET /api/blogs/<slug>: One full post
    GET /api/categories: Category list
    GET /api/categories/<category_id>/blogs: Posts in one category

Usage:
    Start the server:
        $ blogdata serve

    Test with curl:
        $ curl http://localhost:5000/api/blogs/database-over-indexing-performance
"""
from .api import create_app

__all__ = ["create_app"]
