"""Container entry point.

Runs the Flask app under gunicorn in-process, so the image needs no
arguments: ``hello-k3s`` (or ``python -m hello_k3s``) reads its settings
from the environment and serves until the orchestrator sends SIGTERM.
"""

import logging

from gunicorn.app.base import BaseApplication

from hello_k3s import __version__
from hello_k3s.app import create_app
from hello_k3s.config import Config, ConfigError

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level="info"):
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


class HelloK3sApplication(BaseApplication):
    """gunicorn application serving a single WSGI app from a Config."""

    def __init__(self, app, config):
        self.application = app
        self.options = {
            "bind": config.bind,
            "workers": 1,
            "worker_class": "gthread",
            "threads": config.threads,
            "graceful_timeout": config.graceful_timeout,
            "loglevel": config.log_level,
            "accesslog": "-",
            "errorlog": "-",
        }
        super().__init__()

    def load_config(self):
        for key, value in self.options.items():
            if key in self.cfg.settings and value is not None:
                self.cfg.set(key.lower(), value)

    def load(self):
        return self.application


def main():
    try:
        config = Config.from_env()
    except ConfigError as exc:
        configure_logging()
        logger.error("invalid configuration: %s", exc)
        return 2

    configure_logging(config.log_level)
    logger.info("starting hello-k3s %s on %s", __version__, config.bind)

    HelloK3sApplication(create_app(), config).run()  # exits 1 on bind failure, 0 on SIGTERM
