"""Gunicorn configuration shared by every English AI service.

Usage (from a service directory):
    gunicorn app.main:app -c ../../infra/gunicorn_conf.py
"""

import multiprocessing
import os

# ── Server Socket ─────────────────────────────
bind = f"0.0.0.0:{os.getenv('SERVICE_PORT', '8080')}"

# ── Worker Processes ──────────────────────────
workers = int(os.getenv("GUNICORN_WORKERS", multiprocessing.cpu_count() + 1))
worker_class = "uvicorn.workers.UvicornWorker"
worker_tmp_dir = "/dev/shm"

# ── Timeouts ──────────────────────────────────
# Must exceed HEALTH_DEADLINE_MS so status requests are never killed mid-aggregation.
timeout = int(os.getenv("GUNICORN_TIMEOUT", "30"))
graceful_timeout = int(os.getenv("GUNICORN_GRACEFUL_TIMEOUT", "10"))
keepalive = int(os.getenv("GUNICORN_KEEPALIVE", "5"))

# ── Logging ───────────────────────────────────
accesslog = None  # request logging goes through structlog middleware
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()

# ── Process Naming ────────────────────────────
proc_name = os.getenv("SERVICE_NAME", "englishai")

# ── Server Mechanics ─────────────────────────
preload_app = True
max_requests = int(os.getenv("GUNICORN_MAX_REQUESTS", "1000"))
max_requests_jitter = int(os.getenv("GUNICORN_MAX_REQUESTS_JITTER", "50"))
