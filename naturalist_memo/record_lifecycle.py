# -*- coding: utf-8 -*-
"""Create / refresh / delete memo records.

The lifecycle owns the record list. Callers get tuples, never the list
itself, and every mutation is written through ``RecordStore.save`` before
the call returns. Newest records come first.

Address states per record::

    sensor failed           -> ADDRESS_NOT_ACQUIRED (0.0, 0.0)
    located, gate offline   -> ADDRESS_OFFLINE
    located, lookup failed  -> ADDRESS_FAILED
    located, lookup OK      -> resolved address

Only ``refresh_address`` moves a record between states afterwards. Deleted
records are final: refreshing one is a no-op.
"""
from __future__ import annotations
from datetime import datetime
from typing import Callable, List, Optional, Tuple

from .connectivity import IConnectivityGate
from .csv_exporter import CsvExporter
from .errors import OfflineError
from .geocoding_base import IReverseGeocoder
from .location import ILocationSensor, Located, acquire_location
from .log_utils import get_logger
from .memo_record import (
    ADDRESS_FAILED,
    ADDRESS_NOT_ACQUIRED,
    ADDRESS_OFFLINE,
    ADDRESS_PENDING,
    SENTINEL_LAT,
    SENTINEL_LNG,
    MemoRecord,
    format_timestamp,
)
from .record_store import RecordStore

logger = get_logger(__name__)


class RecordLifecycle:
    def __init__(
        self,
        store: RecordStore,
        gate: IConnectivityGate,
        geocoder: IReverseGeocoder,
        sensor: ILocationSensor,
        clock: Callable[[], datetime] = datetime.now,
        exporter: Optional[CsvExporter] = None,
    ) -> None:
        self.store = store
        self.gate = gate
        self.geocoder = geocoder
        self.sensor = sensor
        self.clock = clock
        self.exporter = exporter or CsvExporter()
        self.preview_address = ADDRESS_PENDING
        self._records: List[MemoRecord] = store.load()
        logger.info('Loaded %d records', len(self._records))

    @property
    def records(self) -> Tuple[MemoRecord, ...]:
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def _lookup(self, lat: float, lng: float) -> str:
        if not self.gate.is_online():
            logger.info('Offline, address lookup skipped for (%s, %s)', lat, lng)
            return ADDRESS_OFFLINE
        return self.geocoder.resolve(lat, lng)

    def create_record(self, memo_text: str) -> MemoRecord:
        stamp = format_timestamp(self.clock())
        loc = acquire_location(self.sensor)
        if isinstance(loc, Located):
            lat, lng = loc.lat, loc.lng
            address = self._lookup(lat, lng)
        else:
            lat, lng = SENTINEL_LAT, SENTINEL_LNG
            address = ADDRESS_NOT_ACQUIRED
        record = MemoRecord(time=stamp, lat=lat, lng=lng, address=address, memo=memo_text)
        self._records.insert(0, record)
        self.store.save(self._records)
        logger.info('Created record at %s (%s)', stamp, address)
        return record

    def _contains(self, record: MemoRecord) -> bool:
        return any(r is record for r in self._records)

    def refresh_address(self, record: MemoRecord) -> MemoRecord:
        # 削除済み (または履歴外) のレコードは更新しない
        if not self._contains(record):
            logger.debug('Refresh ignored, record %s not in history', record.time)
            return record
        if not self.gate.is_online():
            raise OfflineError()
        record.address = self.geocoder.resolve(record.lat, record.lng)
        self.store.save(self._records)
        logger.info('Refreshed address for %s: %s', record.time, record.address)
        return record

    def delete_record(self, record: MemoRecord) -> None:
        for i, r in enumerate(self._records):
            if r is record:
                del self._records[i]
                self.store.save(self._records)
                logger.info('Deleted record %s', record.time)
                return
        logger.debug('Delete ignored, record %s not in history', record.time)

    def current_address(self) -> str:
        """Address of the current position, for display above the memo form."""
        loc = acquire_location(self.sensor)
        if not isinstance(loc, Located):
            self.preview_address = ADDRESS_FAILED
        else:
            self.preview_address = self._lookup(loc.lat, loc.lng)
        return self.preview_address

    def export_csv(self) -> str:
        return self.exporter.export(self._records)
