"""
Flask REST API bridging a launcher host to the shortcut resolver

The host forwards every keystroke to /api/query, sends the same text again with
"delayed": true once the user pauses, and posts the chosen row's activation
back to /api/activate.

Endpoints:
    POST /api/query        - Resolve a query into ranked rows
    POST /api/activate     - Carry out a row (or context action) activation
    GET  /api/health-check - Health check
"""

from typing import Optional
from flask import Flask, request, jsonify
from flask_cors import CORS

from Shortcut.Utility.config import Settings
from Shortcut.Model.ResolvedResult import ActivationKind
from Shortcut.Storage.RecordStore import RecordStore
from Shortcut.Storage.JsonRecordSource import JsonRecordSource
from Shortcut.Suggestion.ProviderFactory import ProviderFactory
from Shortcut.Suggestion.SuggestionClient import SuggestionClient
from Shortcut.Suggestion.SuggestionHttpClient import SuggestionHttpClient
from Shortcut.Business.LauncherPlugin import LauncherPlugin
from Shortcut.Utility.shell import ShellOpener
from Shortcut.Routes.validators import validate_query_payload, validate_activation_payload, map_results

import logging
logger = logging.getLogger(__name__)

"""Build the plugin from settings.
    Args:
        settings: resolved runtime settings
    Returns:
        LauncherPlugin wired to the JSON record file, the HTTP suggestion client and the shell
"""
def CreatePlugin(settings: Settings) -> LauncherPlugin:
    store = RecordStore(JsonRecordSource(settings.shortcuts_file))
    client = SuggestionClient(SuggestionHttpClient(timeout=settings.suggestion_timeout), limit=settings.suggestion_limit)
    return LauncherPlugin(store, client=client, opener=ShellOpener(settings.browser_path))

"""Create and configure the Flask application.
    Args:
        settings: Optional settings, read from the environment when omitted
        plugin: Optional pre-built plugin (tests inject one)
    Returns:
        Flask application instance
"""
def CreateApp(settings: Optional[Settings] = None, plugin: Optional[LauncherPlugin] = None):
    settings = settings or Settings.from_env()
    logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO))

    app = Flask(__name__)
    if settings.cors_origins:
        # /api/activate stays same-origin only
        CORS(app, resources={
            r"/api/query": {"origins": settings.cors_origins},
            r"/api/health-check": {"origins": settings.cors_origins},
        })
    RegisterRoutes(app, plugin or CreatePlugin(settings))
    return app

"""Register all API routes.
    Args:
        app: Flask application instance
        plugin: plugin serving the routes
"""
def RegisterRoutes(app: Flask, plugin: LauncherPlugin) -> None:

    @app.route('/api/health-check', methods=['GET'])
    def HealthCheck():
        records = plugin.store.Snapshot()
        return jsonify({
            "status": "degraded" if records.load_error else "healthy",
            "shortcuts": len(records.records),
            "load_error": records.load_error,
            "providers": ProviderFactory.registered_keys(),
        }), 200

    """Resolve a query.
        Request JSON body:
        {
            "search": "g golang",          # Required, raw launcher input
            "action_keyword": "ws",        # Optional, host's plugin keyword
            "delayed": false               # Optional, true once the user paused
        }
        Returns:
            JSON response with ranked rows
    """
    @app.route('/api/query', methods=['POST'])
    def QueryEndpoint():
        try:
            data = request.get_json(silent=True) or {}
            try:
                search, action_keyword, delayed = validate_query_payload(data)
            except ValueError as e:
                return jsonify({"error": "invalid_parameter", "message": str(e)}), 400

            if delayed:
                results = plugin.QueryDelayed(search, action_keyword)
            else:
                results = plugin.Query(search, action_keyword)
            menus = [plugin.LoadContextMenus(r) for r in results]
            return jsonify({"search": search, "delayed": delayed, "results": map_results(results, menus)}), 200

        except Exception as e:
            logger.exception("Error resolving query: %s", e)
            return jsonify({"error": "internal_error", "message": str(e)}), 500

    """Carry out an activation.
        Request JSON body:
        {
            "activation": {"kind": "open_url", "target": "https://a.com/x https://b.com/x"}
        }
        open_url targets must all be http(s); open_path only accepts the shortcut file or its folder.
    """
    @app.route('/api/activate', methods=['POST'])
    def ActivateEndpoint():
        try:
            data = request.get_json(silent=True) or {}
            try:
                activation = validate_activation_payload(data, plugin.store.GetPath())
            except ValueError as e:
                return jsonify({"error": "invalid_parameter", "message": str(e)}), 400

            success = plugin.Activate(activation)
            change_query = activation.target if activation.kind == ActivationKind.CHANGE_QUERY else None
            return jsonify({"success": success, "change_query": change_query}), 200

        except Exception as e:
            logger.exception("Error activating %s: %s", request.path, e)
            return jsonify({"error": "internal_error", "message": str(e)}), 500

    @app.errorhandler(404)
    def NotFound(error):
        return jsonify({
            "error": "not_found",
            "message": "Endpoint not found. Try GET /api/health-check or POST /api/query"
        }), 404

    @app.errorhandler(405)
    def MethodNotAllowed(error):
        return jsonify({
            "error": "method_not_allowed",
            "message": "Method not allowed for this endpoint"
        }), 405
