"""
Blog Data Read API - Flask Application.

Publishes the content store to the site's page-rendering front end as JSON.
Every endpoint is a read-only GET; the blog data behind the app is the
immutable BlogData passed to (or loaded by) create_app.

Endpoints:
    GET /health
        {"status": "healthy"}
    GET /api/blog-data
        The full payload, {"blogs": [...], "categories": [...]}, in the
        same shape as the content file
    GET /api/blogs?category=<name>&tag=<tag>&exclude_tag=<tag>
        Post summaries (no body blocks), optionally filtered. "tag" and
        "exclude_tag" may repeat.
    GET /api/blogs/<slug>
        One full post, including its content blocks
    GET /api/categories
        The category list
    GET /api/categories/<category_id>/blogs
        Summaries of the posts filed under one category

Error Handling:
    - 404: Unknown slug, category id or route
    - 500: Unexpected exceptions (logged, generic message returned)

    Errors are JSON:
        {"status": "error", "message": "Blog post not found"}

Logging Strategy:
    Logging is configured by the blogdata entry point; this module only
    emits records:
        * INFO: App creation, CORS configuration, content source
        * DEBUG: Individual lookups
        * ERROR: Unexpected exceptions in handlers
"""
import logging
from typing import Any, Dict, Optional

from flask import Flask, request, jsonify, current_app
from flask_cors import CORS

from config import load_config, get_content_settings
from content import BLOG_DATA, BlogData, load_blog_data
from content.filters import filter_posts, get_category, get_post_by_slug, posts_for_category

logger = logging.getLogger(__name__)


def _error(message: str, status_code: int):
    return jsonify({"status": "error", "message": message}), status_code


def _resolve_blog_data(config: Dict[str, Any]) -> BlogData:
    """Pick the blog data an app should serve, based on config."""
    settings = get_content_settings(config)
    if settings["path"] is None and not settings["strict_categories"]:
        logger.info("Serving bundled blog data")
        return BLOG_DATA

    logger.info(f"Loading blog data from {settings['path'] or 'bundled file'}")
    return load_blog_data(settings["path"], strict_categories=settings["strict_categories"])


def create_app(blog_data: Optional[BlogData] = None, config: Optional[Dict[str, Any]] = None) -> Flask:
    """Factory function to create and configure the Flask application.

    Args:
        blog_data: BlogData to serve. If None, it is chosen from the config:
            the bundled BLOG_DATA, or the payload named by content.path.
        config: Optional configuration dictionary (if None, loaded from config.yml)

    Returns:
        Configured Flask application instance

    Raises:
        FileNotFoundError, BlogDataError: If configured content can't be loaded

    Example:
        >>> app = create_app()
        >>> with app.test_client() as client:
        ...     client.get("/api/blogs").status_code
        200
    """
    app = Flask(__name__)

    if config is None:
        config = load_config()

    cors_config = config.get("cors", {})
    if cors_config.get("enabled", False):
        cors_origins = cors_config.get("origins", [])
        if cors_origins:
            CORS(app, origins=cors_origins)
            logger.info(f"CORS enabled for origins: {cors_origins}")
        else:
            logger.warning("CORS enabled but no origins configured")
    else:
        logger.info("CORS is disabled in configuration")

    if blog_data is None:
        blog_data = _resolve_blog_data(config)
    app.config["BLOG_DATA"] = blog_data
    logger.info(
        f"Blog API ready with {blog_data.post_count} post(s) "
        f"and {len(blog_data.categories)} category(ies)"
    )

    @app.errorhandler(404)
    def not_found(error):
        return _error("Resource not found", 404)

    @app.route("/health", methods=["GET"])
    def health_check():
        """Health check endpoint for monitoring and load balancers.

        Example:
            $ curl http://localhost:5000/health
            {"status": "healthy"}
        """
        return jsonify({"status": "healthy"}), 200

    @app.route("/api/blog-data", methods=["GET"])
    def get_blog_data():
        """Return the whole published payload."""
        try:
            data = current_app.config["BLOG_DATA"]
            return jsonify(data.to_dict()), 200
        except Exception as e:
            logger.error(f"Failed to serialize blog data: {e}", exc_info=True)
            return _error("Internal server error", 500)

    @app.route("/api/blogs", methods=["GET"])
    def list_blogs():
        """List post summaries, optionally filtered by category and tags.

        Query Parameters:
            category: Category name (case-insensitive)
            tag: Tag to include, repeatable (any may match)
            exclude_tag: Tag to exclude, repeatable (takes precedence)

        Example:
            $ curl "http://localhost:5000/api/blogs?tag=Redis&tag=MySQL"
            {"blogs": [...], "count": 2}
        """
        filters: Dict[str, Any] = {}
        category = request.args.get("category")
        if category:
            filters["category"] = category
        tags = request.args.getlist("tag")
        if tags:
            filters["tags"] = tags
        exclude_tags = request.args.getlist("exclude_tag")
        if exclude_tags:
            filters["exclude_tags"] = exclude_tags

        try:
            posts = filter_posts(current_app.config["BLOG_DATA"], filters)
        except Exception as e:
            logger.error(f"Failed to list blog posts with filters {filters}: {e}", exc_info=True)
            return _error("Internal server error", 500)

        logger.debug(f"Listing {len(posts)} post(s) for filters {filters}")
        return jsonify({
            "blogs": [post.to_summary() for post in posts],
            "count": len(posts)
        }), 200

    @app.route("/api/blogs/<slug>", methods=["GET"])
    def get_blog(slug: str):
        """Return a single post, with its content blocks, by slug."""
        post = get_post_by_slug(current_app.config["BLOG_DATA"], slug)
        if post is None:
            logger.debug(f"Blog post not found for slug: {slug}")
            return _error("Blog post not found", 404)
        return jsonify(post.to_dict()), 200

    @app.route("/api/categories", methods=["GET"])
    def list_categories():
        """Return the category list in published order."""
        data = current_app.config["BLOG_DATA"]
        return jsonify({
            "categories": [category.to_dict() for category in data.categories],
            "count": len(data.categories)
        }), 200

    @app.route("/api/categories/<category_id>/blogs", methods=["GET"])
    def list_category_blogs(category_id: str):
        """Return summaries of the posts filed under one category."""
        data = current_app.config["BLOG_DATA"]
        category = get_category(data, category_id)
        if category is None:
            return _error("Category not found", 404)

        posts = posts_for_category(data, category_id)
        return jsonify({
            "category": category.to_dict(),
            "blogs": [post.to_summary() for post in posts],
            "count": len(posts)
        }), 200

    return app
