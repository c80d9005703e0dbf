# -*- coding: utf-8 -*-
"""Geotagged memo history: storage, address lookup and CSV export."""
from .app import build_default_lifecycle
from .csv_exporter import CsvExporter
from .errors import CorruptDataError, EmptyCollectionError, MemoError, NetworkUnreachable, OfflineError
from .memo_record import MemoRecord
from .record_lifecycle import RecordLifecycle
from .record_store import RecordStore

__all__ = [
    'build_default_lifecycle',
    'CsvExporter',
    'CorruptDataError',
    'EmptyCollectionError',
    'MemoError',
    'MemoRecord',
    'NetworkUnreachable',
    'OfflineError',
    'RecordLifecycle',
    'RecordStore',
]
