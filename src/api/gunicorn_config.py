"""Gunicorn configuration for the blog data read API.

Logs go to stdout/stderr so container runtimes collect them. The logging
config itself (levels, file handler) is set by `blogdata serve`.
"""

# Overridden by server.bind from config.yml when started via `blogdata serve`
bind = "0.0.0.0:5000"

# The payload is immutable after load, so sync workers share nothing mutable
workers = 2
worker_class = "sync"
timeout = 30
keepalive = 2

accesslog = "-"
errorlog = "-"
loglevel = "info"

# remote ip, timestamp, request line, status, size, referer, user agent, request time (us)
access_log_format = '%(h)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s" %(D)s'

capture_output = True


def on_starting(server):
    """Called just before the master process is initialized."""
    server.log.info("Starting Gunicorn for blog data read API")


def when_ready(server):
    """Called just after the server is started."""
    server.log.info("Gunicorn server is ready to accept connections")


def on_exit(server):
    """Called just before exiting Gunicorn."""
    server.log.info("Shutting down Gunicorn")


def worker_abort(worker):
    """Called when a worker receives a SIGABRT signal."""
    worker.log.error("Worker received SIGABRT signal - likely timeout")


preload_app = True
daemon = False
pidfile = None

limit_request_line = 4096
limit_request_fields = 100
limit_request_field_size = 8190
