"""
CLI entry point for running the search API.
"""

import argparse
import sys

import uvicorn


def main():
    parser = argparse.ArgumentParser(
        description="Neural search gateway for the OpenSearch document collections",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Serve on the default port
  python -m corpus_search

  # Serve on another interface and port with auto reload
  python -m corpus_search --host 0.0.0.0 --port 8080 --reload
        """,
    )
    parser.add_argument("--host", default="127.0.0.1", help="Interface to bind")
    parser.add_argument("--port", type=int, default=3000, help="Port to listen on")
    parser.add_argument(
        "--log-level",
        default="info",
        choices=["debug", "info", "warning", "error"],
        help="Server log level",
    )
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")

    args = parser.parse_args()

    try:
        uvicorn.run(
            "corpus_search.backend.server:create_app",
            factory=True,
            host=args.host,
            port=args.port,
            log_level=args.log_level,
            reload=args.reload,
        )
    except KeyboardInterrupt:
        sys.exit(0)


if __name__ == "__main__":
    main()
