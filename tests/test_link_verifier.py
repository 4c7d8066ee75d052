import asyncio
import time

import httpx

from content_toolkit.services.link_verifier import extract_first_url, probe_url, verify_url

RELAY = "https://relay.test/?"


def relay_client(handler):
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def test_probe_url_encodes_target():
    assert probe_url("https://www.healthline.com/nutrition/oats?x=1", RELAY) == (
        "https://relay.test/?https%3A%2F%2Fwww.healthline.com%2Fnutrition%2Foats%3Fx%3D1"
    )


def test_extract_first_url():
    line = "Oat benefits: https://www.healthline.com/nutrition/oats (source) https://example.com"
    assert extract_first_url(line) == "https://www.healthline.com/nutrition/oats"
    assert extract_first_url("No link here") is None


def test_success_status_verifies():
    seen = []

    def handler(request):
        seen.append(request.url)
        return httpx.Response(200, text="ok")

    assert asyncio.run(verify_url("https://www.nih.gov/health", client=relay_client(handler), proxy=RELAY)) is True
    assert seen[0].host == "relay.test"
    assert "nih.gov" in str(seen[0])


def test_error_status_does_not_verify():
    client = relay_client(lambda request: httpx.Response(404))
    assert asyncio.run(verify_url("https://www.nih.gov/missing", client=client, proxy=RELAY)) is False


def test_transport_failure_does_not_verify():
    def handler(request):
        raise httpx.ConnectTimeout("timed out", request=request)

    assert asyncio.run(verify_url("https://slow.example", client=relay_client(handler), proxy=RELAY)) is False


def test_non_http_input_is_rejected_without_request():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200)

    assert asyncio.run(verify_url("ftp://files.example", client=relay_client(handler), proxy=RELAY)) is False
    assert asyncio.run(verify_url("", client=relay_client(handler), proxy=RELAY)) is False
    assert calls == []


def test_slow_body_counts_against_the_whole_timeout():
    async def drip():
        for _ in range(10):
            await asyncio.sleep(0.08)
            yield b"x"

    async def handler(request):
        return httpx.Response(200, content=drip())

    started = time.monotonic()
    verified = asyncio.run(
        verify_url("https://slow-relay.example/page", client=relay_client(handler), proxy=RELAY, timeout=0.2)
    )
    assert verified is False
    assert time.monotonic() - started < 0.6


def test_oversized_url_does_not_raise():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200)

    url = "https://example.com/" + "a" * 70000
    assert asyncio.run(verify_url(url, client=relay_client(handler), proxy=RELAY)) is False
    assert calls == []
