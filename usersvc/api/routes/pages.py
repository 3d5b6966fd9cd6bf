"""Page Routes: the HTML page, its stylesheet and script, images, and the hello endpoints.

Invariants:
    - Text responses carry an explicit charset, Content-Length and X-Content-Type-Options: nosniff
    - Fixed assets come from memory (loaded at startup); they cannot 404 at request time
    - /image/{name} returns 404 "IMAGE NOT FOUND" for anything not inside the image directory
    - /hi is a permanent (301) redirect to /hello
"""

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import PlainTextResponse, RedirectResponse

from usersvc.infrastructure.static_assets import StaticAssets, get_static_assets

router = APIRouter(tags=["pages"])

HTML = "text/html; charset=utf-8"
CSS = "text/css; charset=utf-8"
JS = "application/javascript; charset=utf-8"
TEXT = "text/plain; charset=utf-8"
JPEG = "image/jpeg"


def _text_response(content: str, content_type: str) -> Response:
    return Response(
        content=content,
        headers={
            "Content-Type": content_type,
            "X-Content-Type-Options": "nosniff",
        },
    )


@router.get("/")
async def index(assets: StaticAssets = Depends(get_static_assets)):
    return _text_response(assets.html, HTML)


@router.get("/style.css")
async def stylesheet(assets: StaticAssets = Depends(get_static_assets)):
    return _text_response(assets.css, CSS)


@router.get("/index.js")
async def script(assets: StaticAssets = Depends(get_static_assets)):
    return _text_response(assets.js, JS)


@router.get("/hello")
async def hello():
    return _text_response("hello", TEXT)


@router.get("/hi")
async def hello_redirect():
    return RedirectResponse("/hello", status_code=status.HTTP_301_MOVED_PERMANENTLY)


@router.get("/image/{image_name}")
async def image(image_name: str, assets: StaticAssets = Depends(get_static_assets)):
    """Serve a JPEG from the image directory."""
    content = assets.read_image(image_name)
    if content is None:
        return PlainTextResponse(
            "IMAGE NOT FOUND", status_code=status.HTTP_404_NOT_FOUND,
        )
    return Response(content=content, media_type=JPEG)
