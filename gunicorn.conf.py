# gunicorn.conf.py
import os
import logging
import sys
import multiprocessing

wsgi_app = "app:app"

# Access and error logs go to stdout
accesslog = '-'
errorlog = '-'
loglevel = os.getenv('LOG_LEVEL', 'info').lower()

port = os.getenv('PORT', '3000')
bind = f"0.0.0.0:{port}"

# Requests are handled synchronously, each rescanning the chapter directory
worker_class = "sync"
workers = int(os.getenv('WEB_CONCURRENCY', min(multiprocessing.cpu_count() + 1, 4)))
timeout = 30

proc_name = "bible_vision"

def on_starting(server):
    logger = logging.getLogger('gunicorn.error')
    logger.addHandler(logging.StreamHandler(sys.stdout))
    logger.info(f"Starting gunicorn with {workers} sync workers on {bind}")
    logger.info(f"Chapter directory: {os.getenv('BIBLE_DIR', 'data/bible (auto-detected)')}")
