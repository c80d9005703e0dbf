# -*- coding: utf-8 -*-
"""Memo record model and placeholder addresses.

A record is one geotagged memo. ``time``, ``lat``, ``lng`` and ``memo`` are
fixed at creation; only ``address`` is overwritten by a later refresh.
Records compare by identity so that deletion removes exactly the instance
the caller holds, even if two entries carry the same values.
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict

from .errors import CorruptDataError

# 住所プレースホルダ (address が None になることはない)
ADDRESS_NOT_ACQUIRED = '未取得'
ADDRESS_OFFLINE = 'オフラインのため住所は未取得'
ADDRESS_FAILED = '住所の取得に失敗しました。'
ADDRESS_PENDING = '住所を取得中...'

SENTINEL_LAT = 0.0
SENTINEL_LNG = 0.0


def format_timestamp(dt: datetime) -> str:
    """2024年03月05日09:07 形式"""
    return f'{dt.year}年{dt.month:02d}月{dt.day:02d}日{dt.hour:02d}:{dt.minute:02d}'


def _as_str(item: Dict[str, Any], key: str) -> str:
    val = item.get(key)
    if not isinstance(val, str):
        raise CorruptDataError(f'Field {key!r} must be a string, got {type(val).__name__}')
    return val


def _as_float(item: Dict[str, Any], key: str) -> float:
    val = item.get(key)
    # bool は int のサブクラスなので明示的に除外
    if isinstance(val, bool) or not isinstance(val, (int, float)):
        raise CorruptDataError(f'Field {key!r} must be a number, got {type(val).__name__}')
    return float(val)


@dataclass(eq=False)
class MemoRecord:
    time: str
    lat: float
    lng: float
    address: str
    memo: str

    def to_json(self) -> Dict[str, Any]:
        return {
            'time': self.time,
            'lat': self.lat,
            'lng': self.lng,
            'address': self.address,
            'memo': self.memo,
        }

    @classmethod
    def from_json(cls, item: Any) -> 'MemoRecord':
        if not isinstance(item, dict):
            raise CorruptDataError(f'Record must be an object, got {type(item).__name__}')
        return cls(
            time=_as_str(item, 'time'),
            lat=_as_float(item, 'lat'),
            lng=_as_float(item, 'lng'),
            address=_as_str(item, 'address'),
            memo=_as_str(item, 'memo'),
        )

    def same_values(self, other: 'MemoRecord') -> bool:
        return self.to_json() == other.to_json()
