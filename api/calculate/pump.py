from http.server import BaseHTTPRequestHandler
import json
import sys
import os

# Backend package lives next to the serverless functions
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'sizing_backend'))

from sizing.service import handle_pump_request

CORS_HEADERS = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Headers': 'Content-Type, Authorization',
    'Access-Control-Allow-Methods': 'POST, OPTIONS',
}


class handler(BaseHTTPRequestHandler):
    def _send_json(self, status, payload):
        self.send_response(status)
        self.send_header('Content-type', 'application/json')
        for name, value in CORS_HEADERS.items():
            self.send_header(name, value)
        self.end_headers()
        self.wfile.write(json.dumps(payload).encode())

    def _method_not_allowed(self):
        self._send_json(405, {"error": "Method not allowed"})

    def do_POST(self):
        content_length = int(self.headers.get('Content-Length', 0))
        body = self.rfile.read(content_length)

        status, response = handle_pump_request(body)
        self._send_json(status, response)

    def do_OPTIONS(self):
        """CORS preflight"""
        self.send_response(200)
        for name, value in CORS_HEADERS.items():
            self.send_header(name, value)
        self.send_header('Content-Length', '0')
        self.end_headers()

    do_GET = _method_not_allowed
    do_PUT = _method_not_allowed
    do_PATCH = _method_not_allowed
    do_DELETE = _method_not_allowed
