#!/usr/bin/env python3
"""
Startup script for the Safe Walk Routing API server.

This script starts the FastAPI server with proper configuration. The extract
to load is read from SAFE_WALK_EXTRACT_PATH (or --extract).
"""

import os
import sys
import uvicorn
import argparse

from safe_walk_routing.config.routing_config import RoutingConfig


def main(argv=None):
    """Start the FastAPI server."""
    defaults = RoutingConfig.from_env()

    parser = argparse.ArgumentParser(description="Safe Walk Routing API Server")
    parser.add_argument("--host", default=defaults.host, help="Host to bind to")
    parser.add_argument("--port", type=int, default=defaults.port, help="Port to bind to")
    parser.add_argument("--extract", default=defaults.extract_path, help="OSM extract to build the graph from")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload for development")
    parser.add_argument("--log-level", default=defaults.log_level, choices=["debug", "info", "warning", "error"],
                        help="Log level")

    args = parser.parse_args(argv)
    # Resolve against the caller's cwd before the chdir below
    extract_path = os.path.abspath(args.extract)

    # The service reads its config from the environment when api.main is imported
    os.environ["SAFE_WALK_EXTRACT_PATH"] = extract_path
    os.environ["SAFE_WALK_LOG_LEVEL"] = args.log_level

    print("Starting Safe Walk Routing API Server")
    print(f"URL: http://{args.host}:{args.port}")
    print(f"Extract: {extract_path}")
    print(f"Health check: http://{args.host}:{args.port}/health")
    print("-" * 50)

    # Ensure we're in the right directory
    os.chdir(os.path.dirname(os.path.abspath(__file__)))

    # Start the server; a failed graph build aborts startup
    uvicorn.run(
        "api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level,
        access_log=True
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
