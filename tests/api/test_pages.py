"""Page Routes: fixed assets, images, hello and the /hi redirect."""

import pytest


@pytest.mark.parametrize("path, content_type, body", [
    ("/", "text/html; charset=utf-8", "<h1>users</h1>"),
    ("/style.css", "text/css; charset=utf-8", "body { color: black; }"),
    ("/index.js", "application/javascript; charset=utf-8", "console.log('users');"),
    ("/hello", "text/plain; charset=utf-8", "hello"),
])
async def test_text_assets_carry_fixed_headers(client, path, content_type, body):
    res = await client.get(path)

    assert res.status_code == 200
    assert res.text == body
    assert res.headers["content-type"] == content_type
    assert res.headers["content-length"] == str(len(body.encode()))
    assert res.headers["x-content-type-options"] == "nosniff"


async def test_image_served_as_jpeg(client):
    res = await client.get("/image/cat.jpg")

    assert res.status_code == 200
    assert res.headers["content-type"] == "image/jpeg"
    assert res.content == b"\xff\xd8\xff\xe0jpeg"


async def test_missing_image_is_404(client):
    res = await client.get("/image/doesnotexist.jpg")

    assert res.status_code == 404
    assert res.text == "IMAGE NOT FOUND"


async def test_image_name_with_nul_byte_is_404(client):
    res = await client.get("/image/cat%00.jpg")

    assert res.status_code == 404
    assert res.text == "IMAGE NOT FOUND"


async def test_image_traversal_is_404(client):
    res = await client.get("/image/..%2Fhtml%2Findex.html")

    assert res.status_code == 404


async def test_hi_redirects_permanently_to_hello(client):
    res = await client.get("/hi")

    assert res.status_code == 301
    assert res.headers["location"] == "/hello"


async def test_following_hi_lands_on_hello(client):
    res = await client.get("/hi", follow_redirects=True)

    assert res.status_code == 200
    assert res.text == "hello"
