"""
Test helpers: a fake HTTP transport standing in for requests.Session.
"""

import json

import requests

from skyanswers.config import AUTH_URL, ROOM_URL, STEPS_URL


def make_response(status=200, payload=None, url='', text=None):
    """Build a real requests.Response with a JSON (or raw *text*) body."""
    response = requests.Response()
    response.status_code = status
    response.url = url
    body = text if text is not None else json.dumps(payload if payload is not None else {})
    response._content = body.encode('utf-8')
    response.encoding = 'utf-8'
    return response


def step_url(task_id):
    return f"{STEPS_URL}{task_id}"


class FakeTransport:
    """Routes (method, url) to canned responses or exceptions and records every call."""

    def __init__(self, routes=None, token='test-token'):
        self.routes = dict(routes or {})
        if token is not None:
            self.routes.setdefault(('POST', AUTH_URL), make_response(200, {'jwtToken': token}, AUTH_URL))
        self.calls = []

    def _respond(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        result = self.routes.get((method, url))
        if result is None:
            return make_response(404, {'error': 'not found'}, url)
        if isinstance(result, Exception):
            raise result
        return result

    def post(self, url, **kwargs):
        return self._respond('POST', url, **kwargs)

    def request(self, method, url, **kwargs):
        return self._respond(method, url, **kwargs)

    def calls_to(self, url):
        return [call for call in self.calls if call[1] == url]

    def step_calls(self):
        return [call for call in self.calls if call[1].startswith(STEPS_URL)]


def room_routes(task_ids, markups=None):
    """Routes for a room listing *task_ids*, each step serving its markup."""
    routes = {('POST', ROOM_URL): make_response(200, {'meta': {'stepUuids': list(task_ids)}}, ROOM_URL)}
    for task_id in task_ids:
        markup = (markups or {}).get(task_id, f"<p>Question {task_id}</p>")
        if isinstance(markup, (requests.Response, Exception)):
            routes[('GET', step_url(task_id))] = markup
        else:
            routes[('GET', step_url(task_id))] = make_response(200, {'content': markup}, step_url(task_id))
    return routes


