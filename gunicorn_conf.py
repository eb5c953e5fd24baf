import logging
import os

logger = logging.getLogger("gunicorn.conf")

# base settings
web_concurrency = int(os.getenv("WEB_CONCURRENCY", 2))
max_workers = int(os.getenv("GUNICORN_MAX_WORKERS", 4))
min_workers = int(os.getenv("GUNICORN_MIN_WORKERS", 1))
preload_app = os.getenv("PRELOAD_APP", "true").lower() == "true"

bind = os.getenv("BIND", "0.0.0.0:8000")
worker_class = os.getenv("WORKER_CLASS", "uvicorn.workers.UvicornWorker")
workers = max(min_workers, min(web_concurrency, max_workers))
threads = int(os.getenv("THREADS", 2))
worker_connections = int(os.getenv("GUNICORN_WORKER_CONNECTIONS", 1000))
max_requests = int(os.getenv("MAX_REQUESTS", 1000))
max_requests_jitter = int(os.getenv("MAX_REQUESTS_JITTER", 50))
graceful_timeout = int(os.getenv("GRACEFUL_TIMEOUT", 120))
# photo uploads wait on the blob publisher
timeout = int(os.getenv("TIMEOUT", 120))
keepalive = int(os.getenv("KEEP_ALIVE", 5))
worker_tmp_dir = "/dev/shm"

loglevel = os.getenv("LOG_LEVEL", "info")
accesslog = os.getenv("ACCESS_LOG", "-")
errorlog = os.getenv("ERROR_LOG", "-")


def on_starting(server):
    logger.info(f"Starting photo booth with {workers} workers (min={min_workers}, max={max_workers})")


def post_fork(server, worker):
    server.log.info(f"Worker spawned (pid: {worker.pid})")


def worker_abort(worker):
    worker.log.warning(f"Worker {worker.pid} aborted, most likely a request exceeded {timeout}s")


def when_ready(server):
    logger.info(f"Server is ready with {len(server.WORKERS)} workers")
