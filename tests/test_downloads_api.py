import json

import httpx
import pytest

from repos_client.domain.entities import Resource
from repos_client.domain.exceptions import ClientArgumentError, NotFoundError

USER = "peter-murach"
REPO = "github"
REQUEST_PATH = f"/repos/{USER}/{REPO}/downloads"

DOWNLOADS = [
    {
        "url": f"https://api.github.com{REQUEST_PATH}/1",
        "html_url": "https://github.com/repos/octocat/Hello-World/downloads/new_file.jpg",
        "id": 1,
        "name": "new_file.jpg",
        "description": "Description of your download",
        "size": 1024,
        "download_count": 40,
        "content_type": ".jpg",
    }
]


@pytest.fixture
def requests_seen() -> list[httpx.Request]:
    return []


@pytest.fixture
def found(http_github, requests_seen):
    def handler(request: httpx.Request) -> httpx.Response:
        requests_seen.append(request)
        return httpx.Response(200, json=DOWNLOADS)

    return http_github(handler).repos().downloads


@pytest.fixture
def missing(http_github, requests_seen):
    def handler(request: httpx.Request) -> httpx.Response:
        requests_seen.append(request)
        return httpx.Response(404, content=b"")

    return http_github(handler).repos().downloads


def test_responds_to_all(found) -> None:
    assert found.all == found.list


def test_fails_without_username(found, requests_seen) -> None:
    with pytest.raises(ClientArgumentError):
        found.list()

    assert requests_seen == []


def test_gets_the_resources(found, requests_seen) -> None:
    found.list(USER, REPO)

    assert len(requests_seen) == 1
    assert requests_seen[0].method == "GET"
    assert requests_seen[0].url.path == REQUEST_PATH
    assert requests_seen[0].headers["authorization"] == "Bearer secret-token"


def test_returns_list_of_resources(found) -> None:
    downloads = found.list(USER, REPO)

    assert isinstance(downloads, list)
    assert len(downloads) == 1
    assert isinstance(downloads[0], Resource)
    assert downloads[0].name == "new_file.jpg"


def test_yields_each_download(found) -> None:
    names: list[str] = []

    found.list(USER, REPO, on_each=lambda d: names.append(d.name))

    assert names == ["new_file.jpg"]


def test_not_found_raises(missing) -> None:
    with pytest.raises(NotFoundError) as excinfo:
        missing.list(USER, REPO)

    assert excinfo.value.status == 404
    assert excinfo.value.message == "Not Found"


def test_create_requires_name_and_size(found, requests_seen) -> None:
    with pytest.raises(ClientArgumentError) as excinfo:
        found.create(USER, REPO, description="no name or size")

    assert excinfo.value.missing == ("name", "size")
    assert requests_seen == []


def test_create_posts_json_body(http_github, requests_seen) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        requests_seen.append(request)
        return httpx.Response(201, json={"id": 2, "name": "new_file.jpg"})

    downloads = http_github(handler).repos().downloads
    created = downloads.create(USER, REPO, name="new_file.jpg", size=114034)

    assert created.id == 2
    request = requests_seen[0]
    assert request.method == "POST"
    assert request.url.path == REQUEST_PATH
    assert json.loads(request.content) == {
        "name": "new_file.jpg",
        "size": 114034,
    }


def test_get_and_delete_use_download_id(http_github, requests_seen) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        requests_seen.append(request)
        if request.method == "DELETE":
            return httpx.Response(204)
        return httpx.Response(200, json=DOWNLOADS[0])

    downloads = http_github(handler).repos(user=USER, repo=REPO).downloads

    assert downloads.get(id=1).name == "new_file.jpg"
    assert downloads.delete() is None
    assert [(r.method, r.url.path) for r in requests_seen] == [
        ("GET", f"{REQUEST_PATH}/1"),
        ("DELETE", f"{REQUEST_PATH}/1"),
    ]
