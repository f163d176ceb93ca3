"""Main Flask application for the hand evaluation API."""

import os

from hand_eval.config import get_config
from hand_eval.web.app import create_app, setup_logging

app = create_app()


if __name__ == "__main__":
    setup_logging(get_config())

    port = int(os.environ.get("PORT", "5000"))
    print(f"Starting hand evaluation API on http://localhost:{port}")
    app.run(host="0.0.0.0", port=port, debug=app.config.get("DEBUG", False))
