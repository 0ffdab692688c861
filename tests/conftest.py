import pandas as pd
import pytest
import requests

from champ_block.data import build_catalog
from champ_block.storage import MemoryStorage

CDN = "https://cdn.test/cdn"
VERSION = "14.10.1"


def champion_payload(*names):
    return {
        "type": "champion",
        "version": VERSION,
        "data": {
            n: {"id": n, "name": n, "title": f"the {n}", "image": {"full": f"{n}.png"}}
            for n in names
        },
    }


class FakeResponse:
    def __init__(self, status_code=200, payload=None, body_error=None):
        self.status_code = status_code
        self._payload = payload
        self._body_error = body_error

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")

    def json(self):
        if self._body_error is not None:
            raise self._body_error
        return self._payload


class FakeSession:
    def __init__(self, response):
        self.response = response
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        return self.response


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def catalog() -> pd.DataFrame:
    return build_catalog(champion_payload("Zed", "Ahri", "Yasuo", "Aatrox", "Lux"), CDN, VERSION)
