"""
Web Search Shortcut API Server
Run the Flask REST API a launcher host queries for shortcut results.
Usage:
    python main.py
    python main.py --port 8000
    python main.py --records ~/shortcuts.json
    gunicorn "Shortcut.Routes.LauncherRoute:CreateApp()"
"""

import argparse
import os
import sys
from Shortcut.Utility.config import Settings
from Shortcut.Routes.LauncherRoute import CreateApp


def main():
    """Parse arguments and start the API server."""
    parser = argparse.ArgumentParser(
        description="Web Search Shortcut REST API Server",
        epilog="""
            Examples:
            python main.py                          # Start on port 5000
            python main.py --port 8000              # Start on port 8000
            python main.py --records shortcuts.json # Use another shortcut file
            python main.py --debug                  # Start in debug mode
        """
    )
    parser.add_argument(
        '--port',
        type=int,
        default=5000,
        help='Port to run the server on (default: 5000)'
    )
    parser.add_argument(
        '--host',
        default='127.0.0.1',
        help='Host to bind to (default: 127.0.0.1)'
    )
    parser.add_argument(
        '--records',
        default=None,
        help='Shortcut JSON file (default: $SHORTCUTS_FILE or ~/.websearch-shortcut/shortcuts.json)'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Run in debug mode'
    )

    args = parser.parse_args()
    if args.records:
        os.environ["SHORTCUTS_FILE"] = args.records

    try:
        settings = Settings.from_env()
    except ValueError as e:
        print(f"\nInvalid configuration: {e}")
        sys.exit(2)
    app = CreateApp(settings)

    print(f"\n{'='*60}")
    print("Web Search Shortcut API Server")
    print(f"{'='*60}")
    print(f"Server starting on http://{args.host}:{args.port}")
    print(f"Shortcut file: {settings.shortcuts_file}")
    print(f"Debug mode: {args.debug}")
    print(f"\nEndpoints:")
    print(f"  GET  http://{args.host}:{args.port}/api/health-check")
    print(f"  POST http://{args.host}:{args.port}/api/query")
    print(f"  POST http://{args.host}:{args.port}/api/activate")
    print(f"{'='*60}\n")

    try:
        app.run(
            host=args.host,
            port=args.port,
            debug=args.debug,
            use_reloader=args.debug
        )
    except KeyboardInterrupt:
        print("\n\nServer stopped by user")
        sys.exit(0)
    except Exception as e:
        print(f"\nError starting server: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
