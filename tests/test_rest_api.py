import json
import threading
import urllib.error
import urllib.request

import pytest

from structlab.message_queue import MessageQueue
from structlab.rest_api import RestAPIServer


@pytest.fixture
def api():
    return RestAPIServer(MessageQueue())


def test_post_event_without_source_is_tagged_rest_api(api):
    response = api.post_event('{"kind": "click"}')
    assert response.status == 200
    assert json.loads(response.body) == {"status": "success"}
    assert api.queue.pop() == {"kind": "click", "source": "rest_api"}


def test_post_event_keeps_given_source(api, capsys):
    api.post_event(b'{"source": "sensor", "v": 3}')
    assert api.queue.pop() == {"source": "sensor", "v": 3}
    out = capsys.readouterr().out
    assert "  Source: sensor\n" in out
    assert '  Body: {"source":"sensor","v":3}\n' in out


def test_post_invalid_json_is_rejected(api):
    response = api.post_event("{not json")
    assert response.status == 400
    assert json.loads(response.body) == {"status": "error", "message": "Invalid JSON"}
    assert api.queue.empty()


def test_post_non_object_is_rejected(api):
    response = api.post_event("[1, 2]")
    assert response.status == 400
    assert api.queue.empty()


def test_health(api):
    response = api.health()
    assert (response.status, response.body, response.content_type) == (200, "OK", "text/plain")


def test_status(api):
    response = api.status()
    assert response.status == 200
    assert json.loads(response.body) == {
        "status": "running",
        "service": "eda-system",
        "version": "1.0.0",
    }


def test_handle_dispatches_and_rejects_unknown(api):
    assert api.handle("GET", "/health").body == "OK"
    assert api.handle("POST", "/api/events", '{"a": 1}').status == 200
    assert api.handle("GET", "/missing").status == 404
    assert api.handle("GET", "/api/events").status == 404


def test_real_server_round_trip(api):
    server = api.make_server("127.0.0.1", 0)
    port = server.server_address[1]
    worker = threading.Thread(target=server.serve_forever, daemon=True)
    worker.start()
    try:
        request = urllib.request.Request(
            f"http://127.0.0.1:{port}/api/events",
            data=b'{"source": "web"}',
            headers={"Content-Type": "application/json"},
            method="POST",
        )
        with urllib.request.urlopen(request, timeout=5) as reply:
            assert reply.status == 200
            assert json.loads(reply.read()) == {"status": "success"}
        with urllib.request.urlopen(f"http://127.0.0.1:{port}/health", timeout=5) as reply:
            assert reply.read() == b"OK"
        with pytest.raises(urllib.error.HTTPError) as info:
            bad = urllib.request.Request(
                f"http://127.0.0.1:{port}/api/events", data=b"oops", method="POST"
            )
            urllib.request.urlopen(bad, timeout=5)
        assert info.value.code == 400
    finally:
        server.shutdown()
        server.server_close()
    assert api.queue.pop() == {"source": "web"}