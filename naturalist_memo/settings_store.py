# -*- coding: utf-8 -*-
"""Naturalist Memo 用の設定を扱うラッパークラス。

QSettings の文字列スロットは履歴データの保存先 (historyData) も兼ねる。
"""
from __future__ import annotations
from typing import Optional
from PyQt5.QtCore import QSettings

ORG = 'NaturalistMemo'
APP = 'NaturalistMemo'

class SettingsStore:
    def __init__(self, qs: Optional[QSettings] = None):
        self.qs = qs if qs is not None else QSettings(ORG, APP)

    # 設定キー
    KEY_HISTORY_KEY = 'storage/history_key'
    KEY_ENDPOINT = 'geocode/endpoint'
    KEY_ACCEPT_LANGUAGE = 'geocode/accept_language'
    KEY_USER_AGENT = 'geocode/user_agent'
    KEY_TIMEOUT = 'geocode/timeout'

    DEFAULT_HISTORY_KEY = 'historyData'
    DEFAULT_ENDPOINT = 'https://nominatim.openstreetmap.org/reverse'
    DEFAULT_ACCEPT_LANGUAGE = 'ja'
    DEFAULT_USER_AGENT = 'NaturalistMemo/0.1 (set your email)'
    DEFAULT_TIMEOUT = 15

    def _set_or_remove(self, key: str, val):
        # 空文字ならキーを削除しデフォルトにフォールバックさせる
        if not val:
            self.qs.remove(key)
        else:
            self.qs.setValue(key, val)

    def get_history_key(self) -> str:
        return self.qs.value(self.KEY_HISTORY_KEY, self.DEFAULT_HISTORY_KEY, type=str)

    def set_history_key(self, val: str):
        self._set_or_remove(self.KEY_HISTORY_KEY, val)

    def get_endpoint(self) -> str:
        return self.qs.value(self.KEY_ENDPOINT, self.DEFAULT_ENDPOINT, type=str)

    def set_endpoint(self, val: str):
        self._set_or_remove(self.KEY_ENDPOINT, val)

    def get_accept_language(self) -> str:
        return self.qs.value(self.KEY_ACCEPT_LANGUAGE, self.DEFAULT_ACCEPT_LANGUAGE, type=str)

    def set_accept_language(self, val: str):
        self._set_or_remove(self.KEY_ACCEPT_LANGUAGE, val)

    def get_user_agent(self) -> str:
        return self.qs.value(self.KEY_USER_AGENT, self.DEFAULT_USER_AGENT, type=str)

    def set_user_agent(self, val: str):
        self._set_or_remove(self.KEY_USER_AGENT, val)

    def get_timeout(self) -> float:
        try:
            return float(self.qs.value(self.KEY_TIMEOUT, self.DEFAULT_TIMEOUT))
        except (TypeError, ValueError):
            return float(self.DEFAULT_TIMEOUT)

    def set_timeout(self, val: float):
        self._set_or_remove(self.KEY_TIMEOUT, val)

    def export_all(self) -> dict:
        return {
            'history_key': self.get_history_key(),
            'endpoint': self.get_endpoint(),
            'accept_language': self.get_accept_language(),
            'user_agent': self.get_user_agent(),
            'timeout': self.get_timeout(),
        }

    # ---- 生の文字列スロット (RecordStore から利用) ----
    def get_value(self, key: str) -> Optional[str]:
        if not self.qs.contains(key):
            return None
        return self.qs.value(key, '', type=str)

    def set_value(self, key: str, text: str):
        self.qs.setValue(key, text)
        self.qs.sync()

    def remove(self, key: str):
        self.qs.remove(key)
        self.qs.sync()
