"""
Shared pytest fixtures for nvd-mirror tests.
"""

from __future__ import annotations

from typing import Dict, Optional, Set
from unittest.mock import MagicMock

import pytest
import requests
from botocore.exceptions import ClientError

from nvdmirror.utils.config_loader import MirrorConfig


def make_client_error(code: str, operation: str = "HeadObject") -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": "error"}}, operation)


class FakeStorage:
    """In-memory stand-in for S3Operations."""

    def __init__(self, objects: Optional[Dict[str, bytes]] = None):
        self.objects: Dict[str, bytes] = dict(objects or {})
        self.uploads = []
        self.lookups = []

    def get_object_size(self, s3_key):
        self.lookups.append(s3_key)
        if s3_key not in self.objects:
            return None
        return len(self.objects[s3_key])

    def upload_file(self, local_path, s3_key):
        with open(local_path, "rb") as fh:
            self.objects[s3_key] = fh.read()
        self.uploads.append(s3_key)


class FakeFeedServer:
    """Builds a MagicMock requests session serving in-memory feeds."""

    def __init__(self, feeds: Optional[Dict[str, bytes]] = None):
        self.feeds: Dict[str, bytes] = dict(feeds or {})
        self.head_failures: Set[str] = set()
        self.get_failures: Set[str] = set()
        self.get_calls = []
        self.head_calls = []
        self.responses = []
        self.session = MagicMock(spec=requests.Session)
        self.session.head.side_effect = self._head
        self.session.get.side_effect = self._get

    def _head(self, url, **kwargs):
        self.head_calls.append(url)
        if url in self.head_failures:
            raise requests.ConnectionError(f"connection refused: {url}")
        response = MagicMock()
        if url not in self.feeds:
            response.status_code = 404
            response.raise_for_status.side_effect = requests.HTTPError("404 Not Found")
            return response
        response.status_code = 200
        response.headers = {"Content-Length": str(len(self.feeds[url]))}
        return response

    def _get(self, url, **kwargs):
        self.get_calls.append(url)
        if url in self.get_failures:
            raise requests.ConnectionError(f"connection reset: {url}")
        response = MagicMock()
        response.__enter__.return_value = response
        self.responses.append(response)
        response.__exit__.return_value = False
        if url not in self.feeds:
            response.raise_for_status.side_effect = requests.HTTPError("404 Not Found")
            return response
        body = self.feeds[url]
        chunks = [body[i:i + 7] for i in range(0, len(body), 7)]
        response.raw.stream.return_value = iter(chunks)
        return response


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in [
        "BUCKET_NAME",
        "S3_BUCKET_NAME",
        "START_YEAR",
        "END_YEAR",
        "OUTPUT_DIR",
        "AWS_PROFILE",
        "AWS_REGION",
        "AWS_DEFAULT_REGION",
        "REQUEST_TIMEOUT",
    ]:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def config(tmp_path):
    return MirrorConfig(
        bucket_name="nvd-bucket",
        start_year=2020,
        end_year=2021,
        output_dir=str(tmp_path),
    )


@pytest.fixture
def storage():
    return FakeStorage()


@pytest.fixture
def feed_server():
    return FakeFeedServer()
