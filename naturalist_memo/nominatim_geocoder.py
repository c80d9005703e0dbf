# -*- coding: utf-8 -*-
"""Nominatim reverse geocoder.
Respect usage policy: one request per second (fixed), identifying User-Agent.
No retry: a failed lookup returns the failure placeholder and the user may
refresh the record later.
"""
from __future__ import annotations
import time
import json
import urllib.error
import urllib.parse
import urllib.request
from typing import Optional
from .geocoding_base import IReverseGeocoder, ReverseGeocodeResult, format_display_name
from .log_utils import get_logger
from .settings_store import SettingsStore

logger = get_logger(__name__)


class NominatimReverseGeocoder(IReverseGeocoder):
    def __init__(self, store: Optional[SettingsStore] = None, user_agent: Optional[str] = None,
                 endpoint: Optional[str] = None, accept_language: Optional[str] = None,
                 timeout: Optional[float] = None):
        if store is None and None in (user_agent, endpoint, accept_language, timeout):
            store = SettingsStore()
        self.user_agent = user_agent or store.get_user_agent()
        self.endpoint = endpoint or store.get_endpoint()
        self.accept_language = accept_language or store.get_accept_language()
        self.timeout = timeout if timeout is not None else store.get_timeout()
        self.rate = 1.0
        self._last_request_ts = 0.0

    def _throttle(self):
        if self.rate <= 0:
            return
        min_interval = 1.0 / self.rate
        now = time.monotonic()
        wait = self._last_request_ts + min_interval - now
        if wait > 0:
            time.sleep(wait)
        self._last_request_ts = time.monotonic()

    def build_url(self, lat: float, lng: float) -> str:
        params = {
            'lat': str(lat),
            'lon': str(lng),
            'format': 'json',
            'accept-language': self.accept_language,
        }
        return self.endpoint + '?' + urllib.parse.urlencode(params)

    def reverse(self, lat: float, lng: float) -> ReverseGeocodeResult:
        self._throttle()
        url = self.build_url(lat, lng)
        req = urllib.request.Request(url, headers={'User-Agent': self.user_agent})
        logger.debug('GET %s', url)
        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as resp:
                status = getattr(resp, 'status', 200)
                data = resp.read().decode('utf-8', 'replace')
        except urllib.error.HTTPError as e:
            logger.warning('Reverse geocode HTTP %s for (%s, %s)', e.code, lat, lng)
            return ReverseGeocodeResult.failed(f'HTTP {e.code}')
        except Exception as e:
            logger.warning('Reverse geocode request failed for (%s, %s): %s', lat, lng, e)
            return ReverseGeocodeResult.failed(str(e))
        if status != 200:
            logger.warning('Reverse geocode HTTP %s for (%s, %s)', status, lat, lng)
            return ReverseGeocodeResult.failed(f'HTTP {status}')
        try:
            parsed = json.loads(data)
        except ValueError as e:
            logger.warning('Reverse geocode response is not JSON: %s', e)
            return ReverseGeocodeResult.failed('Parse error')
        if not isinstance(parsed, dict):
            return ReverseGeocodeResult.failed('Parse error')
        display_name = parsed.get('display_name')
        if not isinstance(display_name, str):
            # Nominatim は該当なしのとき {"error": "Unable to geocode"} を返す
            return ReverseGeocodeResult.failed(str(parsed.get('error') or 'No display_name'), raw=parsed)
        return ReverseGeocodeResult(status='OK', address=format_display_name(display_name), raw=parsed)

    def resolve(self, lat: float, lng: float) -> str:
        return self.reverse(lat, lng).address
