from unittest import mock

import pytest

from oae_bbb import config

PROPERTIES = """\
# shared by every tenant
bbb.endpoint=https://bbb.example.org/bigbluebutton/
bbb.secret=globalsecret

cam.bbb.endpoint=https://bbb.cam.example.org/bigbluebutton
cam.bbb.secret=camsecret

oxford.bbb.checksumType=sha256
"""

@pytest.fixture(autouse=True)
def bbb_properties(tmp_path, monkeypatch):
    path = tmp_path / "bbb.properties"
    path.write_text(PROPERTIES, encoding="utf-8")
    monkeypatch.setenv("OAE_BBB_CONFIG", str(path))
    config.reset()
    yield path
    config.reset()

def xml_response(body, status_code=200):
    response = mock.Mock()
    response.status_code = status_code
    response.content = body.encode("utf-8")
    response.text = body
    response.raise_for_status = mock.Mock()
    return response

@pytest.fixture
def requests_get():
    with mock.patch("oae_bbb.proxy.requests.get") as get:
        yield get
