from __future__ import annotations

from domain_scoring.domain import parse_domain
from domain_scoring.util import clamp, round_half_up


def test_parse_domain_normalizes_case_and_www():
    parsed = parse_domain("  WWW.CloudBank.COM ")
    assert parsed.label == "cloudbank"
    assert parsed.tld == "com"
    assert parsed.name == "cloudbank"


def test_parse_domain_defaults_tld_to_com():
    assert parse_domain("crypto").tld == "com"
    assert parse_domain("crypto.").tld == "com"


def test_parse_domain_uses_first_dot():
    parsed = parse_domain("shop.co.uk")
    assert parsed.label == "shop"
    assert parsed.tld == "co"


def test_parse_domain_cleans_name():
    parsed = parse_domain("my-site_1.io")
    assert parsed.has_hyphen
    assert parsed.name == "mysite1"
    assert parsed.letters == "mysite"


def test_round_half_up_rounds_halves_away_from_even():
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2
    assert round_half_up(-0.5) == 0


def test_clamp():
    assert clamp(150, 0, 100) == 100
    assert clamp(-3, 0, 100) == 0
    assert clamp(42, 0, 100) == 42
