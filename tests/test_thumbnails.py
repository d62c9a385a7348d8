import asyncio

import pytest
import requests

from videoembed import (
    ImageOptions,
    ImageResult,
    InvalidUsageError,
    NotFoundError,
    UpstreamError,
    dailymotion,
    info,
    vimeo,
    youtube,
)


def _collector():
    """Return a callback and a future resolved with the arguments it receives."""
    loop = asyncio.get_running_loop()
    received = loop.create_future()

    def callback(*args):
        received.set_result(args)

    return callback, received


# ---- YouTube ----------------------------------------------------------------

def test_youtube_image_without_callback_returns_html():
    assert youtube.image("abc123") == '<img src="//img.youtube.com/vi/abc123/default.jpg"/>'


@pytest.mark.parametrize(
    "variant", ["default", "mqdefault", "hqdefault", "sddefault", "maxresdefault"]
)
def test_youtube_every_allowed_variant_is_kept(variant):
    result = youtube.thumbnail("abc123", {"image": variant})
    assert result.src == f"//img.youtube.com/vi/abc123/{variant}.jpg"


def test_youtube_bogus_variant_falls_back_to_default():
    assert youtube.thumbnail("abc123", {"image": "bogus"}).src == "//img.youtube.com/vi/abc123/default.jpg"


def test_image_options_are_not_mutated():
    options = ImageOptions(image="bogus")
    youtube.thumbnail("abc123", options)
    assert options.image == "bogus"
    plain = {"image": "bogus"}
    youtube.image("abc123", plain)
    assert plain == {"image": "bogus"}


@pytest.mark.asyncio
async def test_youtube_image_with_callback_is_deferred():
    callback, received = _collector()
    youtube.image("abc123", {"image": "hqdefault"}, callback)
    assert not received.done()

    error, result = await asyncio.wait_for(received, 1)
    assert error is None
    assert result == ImageResult(
        src="//img.youtube.com/vi/abc123/hqdefault.jpg",
        html='<img src="//img.youtube.com/vi/abc123/hqdefault.jpg"/>',
    )


def test_callback_style_requires_running_loop():
    with pytest.raises(InvalidUsageError):
        youtube.image("abc123", None, lambda *args: None)


# ---- Vimeo ------------------------------------------------------------------

def test_vimeo_image_without_callback_raises():
    with pytest.raises(InvalidUsageError):
        vimeo.image("76979871")


@pytest.mark.asyncio
async def test_vimeo_fetch_image(fake_http):
    fake_http.respond(200, [{
        "thumbnail_small": "https://i.vimeocdn.com/video/1_100x75.jpg",
        "thumbnail_large": "https://i.vimeocdn.com/video/1_640.jpg",
    }])

    result = await vimeo.fetch_image("76979871")

    assert fake_http.requested == ["https://vimeo.com/api/v2/video/76979871.json"]
    assert result.src == "//i.vimeocdn.com/video/1_640.jpg"
    assert result.html == '<img src="//i.vimeocdn.com/video/1_640.jpg"/>'

    small = await vimeo.fetch_image("76979871", {"image": "thumbnail_small"})
    assert small.src == "//i.vimeocdn.com/video/1_100x75.jpg"


@pytest.mark.asyncio
async def test_vimeo_image_callback_success(fake_http):
    fake_http.respond(200, [{"thumbnail_large": "https://i.vimeocdn.com/video/1_640.jpg"}])
    callback, received = _collector()

    task = vimeo.image("76979871", None, callback)
    await task

    error, result = await asyncio.wait_for(received, 1)
    assert error is None
    assert result.src == "//i.vimeocdn.com/video/1_640.jpg"


@pytest.mark.asyncio
async def test_vimeo_non_200_goes_to_callback(fake_http):
    fake_http.respond(500, {})
    callback, received = _collector()

    vimeo.image("76979871", None, callback)

    (error,) = await asyncio.wait_for(received, 1)
    assert isinstance(error, UpstreamError)
    assert str(error) == "unexpected response from vimeo"
    assert error.status_code == 500


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [[], [{}], {"thumbnail_large": "x"}, [{"thumbnail_large": None}]])
async def test_vimeo_missing_image(fake_http, payload):
    fake_http.respond(200, payload)
    with pytest.raises(NotFoundError, match="no image found for vimeo.com/76979871"):
        await vimeo.fetch_image("76979871")


@pytest.mark.asyncio
async def test_vimeo_invalid_json(fake_http):
    fake_http.respond(200, text="<html>")
    with pytest.raises(UpstreamError):
        await vimeo.fetch_image("76979871")


@pytest.mark.asyncio
async def test_transport_failure_is_upstream_error(fake_http):
    fake_http.fail_with(requests.ConnectionError("boom"))
    with pytest.raises(UpstreamError) as excinfo:
        await vimeo.fetch_image("76979871")
    assert isinstance(excinfo.value.__cause__, requests.ConnectionError)


# ---- Dailymotion ------------------------------------------------------------

def test_dailymotion_image_without_callback_raises():
    with pytest.raises(InvalidUsageError):
        dailymotion.image("x2p4qyf", {"image": "thumbnail_60_url"})


@pytest.mark.asyncio
async def test_dailymotion_fetch_image_default_variant(fake_http):
    fake_http.respond(200, {"thumbnail_480_url": "https://s1.dmcdn.net/v/480.jpg"})

    result = await dailymotion.fetch_image("x2p4qyf", {"image": "nope"})

    assert fake_http.requested == ["https://api.dailymotion.com/video/x2p4qyf?fields=thumbnail_480_url"]
    assert result.src == "https://s1.dmcdn.net/v/480.jpg"


@pytest.mark.asyncio
async def test_dailymotion_requested_variant(fake_http):
    fake_http.respond(200, {"thumbnail_1080_url": "https://s1.dmcdn.net/v/1080.jpg"})
    result = await dailymotion.fetch_image("x2p4qyf", {"image": "thumbnail_1080_url"})
    assert fake_http.requested[0].endswith("?fields=thumbnail_1080_url")
    assert result.html == '<img src="https://s1.dmcdn.net/v/1080.jpg"/>'


@pytest.mark.asyncio
async def test_dailymotion_missing_field_goes_to_callback(fake_http):
    fake_http.respond(200, {"thumbnail_480_url": ""})
    callback, received = _collector()

    dailymotion.image("x2p4qyf", None, callback)

    (error,) = await asyncio.wait_for(received, 1)
    assert isinstance(error, NotFoundError)
    assert str(error) == "no image found for dailymotion.com/x2p4qyf"


@pytest.mark.asyncio
async def test_dailymotion_non_200(fake_http):
    fake_http.respond(404, {"error": "not found"})
    with pytest.raises(UpstreamError, match="unexpected response from dailymotion"):
        await dailymotion.fetch_image("x2p4qyf")


@pytest.mark.parametrize("variant", [5, None, ["hqdefault"], {"size": "big"}])
def test_youtube_non_string_variant_falls_back_to_default(variant):
    assert youtube.image("abc123", {"image": variant}) == (
        '<img src="//img.youtube.com/vi/abc123/default.jpg"/>'
    )


def test_youtube_thumbnail_id_is_encoded_like_embed_url():
    reference = info("https://www.youtube.com/watch?v=a/b")
    assert reference.embed_url == "//www.youtube.com/embed/a%2Fb"
    assert youtube.thumbnail(reference.id).src == "//img.youtube.com/vi/a%2Fb/default.jpg"


@pytest.mark.asyncio
async def test_dailymotion_non_string_variant_uses_default(fake_http):
    fake_http.respond(200, {"thumbnail_480_url": "https://s1.dmcdn.net/v/480.jpg"})
    await dailymotion.fetch_image("x2p4qyf", {"image": 720})
    assert fake_http.requested == ["https://api.dailymotion.com/video/x2p4qyf?fields=thumbnail_480_url"]


@pytest.mark.asyncio
@pytest.mark.parametrize("value", [{"url": "https://s1.dmcdn.net/v/480.jpg"}, 480, ["x"]])
async def test_dailymotion_non_string_value_is_not_found(fake_http, value):
    fake_http.respond(200, {"thumbnail_480_url": value})
    with pytest.raises(NotFoundError, match="no image found for dailymotion.com/x2p4qyf"):
        await dailymotion.fetch_image("x2p4qyf")
