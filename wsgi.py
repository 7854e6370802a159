"""WSGI entry point for the compound interest calculator API."""

import os
import sys

from compound_interest.app import create_app

app = create_app()

if __name__ == "__main__":
    port = 5000

    # PORT is set by most hosting platforms
    if "PORT" in os.environ:
        port = int(os.environ["PORT"])

    if len(sys.argv) > 1 and sys.argv[1] == "--port" and len(sys.argv) > 2:
        port = int(sys.argv[2])

    debug = app.config["ENV"] == "development"
    app.run(debug=debug, host="0.0.0.0", port=port)
