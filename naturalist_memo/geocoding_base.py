# -*- coding: utf-8 -*-
"""Reverse geocoding interfaces and the display-name transform.

The transform is fixed policy: Nominatim returns ``display_name`` most
specific first with postcode and country trailing, e.g.
``"1, 丸の内一丁目, 千代田区, 東京都, 100-0005, 日本"``. The last two parts are
dropped and the rest joined in reverse with no separator, giving a Japanese
coarse-to-fine address ``"東京都千代田区丸の内一丁目1"``. Two parts or fewer are
returned untouched.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Protocol

from .memo_record import ADDRESS_FAILED


def format_display_name(display_name: str) -> str:
    parts = [p.strip() for p in display_name.split(',')]
    if len(parts) > 2:
        return ''.join(reversed(parts[:-2]))
    return display_name


@dataclass
class ReverseGeocodeResult:
    status: str  # OK / FAIL
    address: str
    raw: dict = field(default_factory=dict)
    error: Optional[str] = None

    @classmethod
    def failed(cls, error: str, raw: Optional[dict] = None) -> 'ReverseGeocodeResult':
        return cls(status='FAIL', address=ADDRESS_FAILED, raw=raw or {}, error=error)


class IReverseGeocoder(Protocol):
    def reverse(self, lat: float, lng: float) -> ReverseGeocodeResult: ...

    def resolve(self, lat: float, lng: float) -> str: ...
