#!/usr/bin/env python3
"""Docs metadata server: REST API over the frontmatter validator."""

import argparse

from flask import Flask

from config import DOCS_ROOT, PORT

app = Flask(__name__)

from routes.docs import bp as docs_bp  # noqa: E402

app.register_blueprint(docs_bp)


def main():
    """Entry point for `docs-metadata-server` CLI command."""
    parser = argparse.ArgumentParser(description="Docs Metadata Server")
    parser.add_argument(
        "--port", type=int, default=PORT, help=f"Port to listen on (default: {PORT})"
    )
    cli_args = parser.parse_args()

    print("\n  Docs Metadata Server v0.1.0")
    print(f"  Port: {cli_args.port}")
    print(f"  Docs root: {DOCS_ROOT}\n")

    app.run(port=cli_args.port, threaded=True)


if __name__ == "__main__":
    main()
