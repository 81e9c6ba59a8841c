"""Tests for otpauth:// provisioning URIs and QR rendering."""

from __future__ import annotations

import base64
from urllib.parse import parse_qs, unquote, urlsplit

import pyotp

from lockit.security import codec, provisioning, qr

SECRET = b"abcd1234"


def test_build_exact_uri():
    uri = provisioning.build(SECRET, "alice@example.com", "Acme")
    assert uri == (
        "otpauth://totp/Acme%3Aalice%40example.com"
        "?secret=MFRGGZBRGI2DI%3D%3D%3D&issuer=Acme"
    )


def test_build_prefix_and_issuer():
    uri = provisioning.build(codec.generate_secret(), "alice@example.com", "Acme")
    assert uri.startswith("otpauth://totp/Acme%3Aalice%40example.com?secret=")
    assert "issuer=Acme" in uri


def test_build_default_issuer():
    uri = provisioning.build(SECRET, "mirco@example.com")
    assert uri.startswith("otpauth://totp/Lockit%3Amirco%40example.com?")
    assert uri.endswith("&issuer=Lockit")


def test_build_issuer_defaults_to_setting(monkeypatch):
    monkeypatch.setattr(provisioning.settings, "OTP_ISSUER", "Acme")
    uri = provisioning.build(SECRET, "bob")
    assert uri.startswith("otpauth://totp/Acme%3Abob?")
    assert uri.endswith("&issuer=Acme")


def test_build_encodes_issuer_like_encode_uri_component():
    uri = provisioning.build(SECRET, "bob", "Acme Corp (EU)")
    assert uri.startswith("otpauth://totp/Acme%20Corp%20(EU)%3Abob?")
    assert uri.endswith("&issuer=Acme%20Corp%20(EU)")


def test_build_is_parseable_by_pyotp():
    secret = codec.generate_secret()
    uri = provisioning.build(secret, "alice@example.com", "Acme")
    parsed = pyotp.parse_uri(uri)
    assert parsed.issuer == "Acme"
    assert parsed.name == "alice@example.com"
    assert parsed.at(1111111109) == pyotp.TOTP(codec.encode(secret)).at(1111111109)


def test_build_secret_round_trips():
    secret = codec.generate_secret()
    query = parse_qs(urlsplit(provisioning.build(secret, "a", "B")).query)
    assert codec.decode(query["secret"][0]) == secret


def test_chart_url_wraps_whole_uri():
    uri = provisioning.build(SECRET, "alice@example.com", "Acme")
    url = provisioning.chart_url(uri, api="https://qr.example/chart?chl=")
    assert url.startswith("https://qr.example/chart?chl=otpauth%3A%2F%2Ftotp%2FAcme%253Aalice")
    assert unquote(url[len("https://qr.example/chart?chl="):]) == uri


def test_chart_url_default_api():
    url = provisioning.chart_url("otpauth://totp/x")
    assert url.startswith("https://chart.googleapis.com/chart?chs=200x200&cht=qr&chl=")


def test_render_png_base64():
    uri = provisioning.build(SECRET, "alice@example.com", "Acme")
    png = base64.b64decode(qr.render_png_base64(uri))
    assert png.startswith(b"\x89PNG\r\n\x1a\n")
