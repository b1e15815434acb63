import os

wsgi_app = "config.wsgi:application"
bind = f"0.0.0.0:{os.getenv('PORT', '3002')}"

# Un solo proceso: el almacén de pedidos vive en memoria
workers = 1

# Threads por worker (para IO bloqueante hacia el catálogo)
worker_class = "gthread"
threads = int(os.getenv("GTHREADS", "4"))  # ajustable por env

# Timeouts
timeout = int(os.getenv("GUNI_TIMEOUT", "60"))
graceful_timeout = int(os.getenv("GUNI_GRACEFUL_TIMEOUT", "30"))
keepalive = int(os.getenv("GUNI_KEEPALIVE", "5"))

# Logging
accesslog = "-"
errorlog = "-"
loglevel = os.getenv("GUNI_LOGLEVEL", "info")
