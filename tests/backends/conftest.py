"""Backend test fixtures -- parameterized for conformance testing."""

from __future__ import annotations

import socket
import tempfile
import uuid
from typing import TYPE_CHECKING

import pytest

from pathio._client import Client
from pathio._config import ClientConfig

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

REGION = "us-east-1"


def _s3_available() -> bool:
    try:
        import boto3  # noqa: F401
        import moto  # noqa: F401

        return True
    except ImportError:
        return False


def _free_port() -> int:
    with socket.socket() as s:
        s.bind(("", 0))
        return s.getsockname()[1]


@pytest.fixture(scope="session")
def moto_server() -> Iterator[str | None]:
    """Start a moto HTTP server for the test session."""
    if not _s3_available():
        yield None
        return
    from moto.moto_server.threaded_moto_server import ThreadedMotoServer

    port = _free_port()
    server = ThreadedMotoServer(port=port, verbose=False)
    server.start()
    yield f"http://127.0.0.1:{port}"
    server.stop()


@pytest.fixture
def moto_options(moto_server: str | None) -> dict[str, object]:
    """``session.client`` keyword arguments pointing at the moto server."""
    if moto_server is None:
        pytest.skip("moto/boto3 not installed")
    return {
        "endpoint_url": moto_server,
        "aws_access_key_id": "testing",
        "aws_secret_access_key": "testing",
    }


@pytest.fixture
def make_bucket(moto_options: dict[str, object]) -> Callable[..., str]:
    """Return a function creating a uniquely named bucket on the moto server."""
    import boto3

    def _make(prefix: str = "test", region: str = REGION) -> str:
        bucket = f"{prefix}-{uuid.uuid4().hex[:8]}"
        client = boto3.client("s3", region_name=region, **moto_options)  # type: ignore[arg-type]
        if region == "us-east-1":
            client.create_bucket(Bucket=bucket)
        else:
            client.create_bucket(Bucket=bucket, CreateBucketConfiguration={"LocationConstraint": region})
        return bucket

    return _make


_s3_param = pytest.param(
    "s3",
    marks=[pytest.mark.integration, pytest.mark.skipif(not _s3_available(), reason="moto/boto3 not installed")],
)


@pytest.fixture(params=["local", _s3_param])
def root(request: pytest.FixtureRequest, moto_server: str | None) -> Iterator[tuple[Client, str]]:
    """Parameterized ``(client, root path)`` fixture. Add new backends here."""
    if request.param == "local":
        with tempfile.TemporaryDirectory() as tmp:
            yield Client(), f"{tmp}/"
    elif request.param == "s3":
        options = request.getfixturevalue("moto_options")
        bucket = request.getfixturevalue("make_bucket")(prefix="conformance")
        yield Client(ClientConfig(client_options=options)), f"s3://{bucket}/"
    else:
        pytest.skip(f"Unknown backend: {request.param}")
