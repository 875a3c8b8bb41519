"""
Referent — the web form for article summaries, theses, Telegram posts
and translations.

Usage:
  python server.py
"""

import logging

import config
from orchestrator import Orchestrator
from webapp import create_app

logging.basicConfig(
    format="%(asctime)s [%(name)s] %(levelname)s %(message)s",
    level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
)
log = logging.getLogger("server")


def main():
    if not config.OPENROUTER_API_KEY:
        log.warning("OPENROUTER_API_KEY is not set; AI tasks will fail with config_error")

    app = create_app(Orchestrator())
    # Suppress Flask request logs in the main console
    logging.getLogger("werkzeug").setLevel(logging.WARNING)

    log.info(f"Referent: http://{config.WEB_HOST}:{config.WEB_PORT}")
    app.run(host=config.WEB_HOST, port=config.WEB_PORT, use_reloader=False)


if __name__ == "__main__":
    main()
