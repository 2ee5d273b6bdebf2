import socket
import threading

import pytest
import structlog
from tenacity import retry, retry_if_exception_type, stop_after_delay, wait_fixed

import replitdb.data.blocking as KV
import replitdb.data.nonblocking as AKV
from replitdb.settings import Config
from tests.fake_server import FakeDatabaseServer


@retry(retry=retry_if_exception_type(OSError), stop=stop_after_delay(5), wait=wait_fixed(0.05), reraise=True)
def wait_for_server(host: str, port: int):
    socket.create_connection((host, port), timeout=1).close()


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    structlog.reset_defaults()


@pytest.fixture
def fake_db():
    server = FakeDatabaseServer()
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    wait_for_server(*server.server_address[:2])
    try:
        yield server
    finally:
        server.shutdown()
        server.server_close()
        thread.join()


@pytest.fixture
def config(fake_db):
    return Config(url=fake_db.url, token=fake_db.token)


@pytest.fixture
def client(config):
    with KV.connect(config) as client:
        yield client


@pytest.fixture
def aclient(config):
    with AKV.connect(config) as client:
        yield client


@pytest.fixture
def closed_port():
    """A local port nothing is listening on."""
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]
