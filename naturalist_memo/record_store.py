# -*- coding: utf-8 -*-
"""Durable storage of the memo history.

The whole history is one JSON array kept in a single string slot
(``historyData`` by default). ``save`` always rewrites the full list; there
is no append path.

Corrupt payloads fail the whole load with ``CorruptDataError``. Nothing is
dropped or rewritten on failure; ``clear()`` is the explicit way out.
"""
from __future__ import annotations
import json
from typing import Iterable, List, Optional, Protocol

from .errors import CorruptDataError
from .log_utils import get_logger
from .memo_record import MemoRecord
from .settings_store import SettingsStore

logger = get_logger(__name__)


class IKeyValueSlot(Protocol):
    def get_value(self, key: str) -> Optional[str]: ...
    def set_value(self, key: str, text: str) -> None: ...
    def remove(self, key: str) -> None: ...


class RecordStore:
    def __init__(self, slot: IKeyValueSlot, key: Optional[str] = None):
        self.slot = slot
        if key is None:
            # 設定を持つスロットならそのキー名を使う
            get_history_key = getattr(slot, 'get_history_key', None)
            key = get_history_key() if get_history_key else SettingsStore.DEFAULT_HISTORY_KEY
        self.key = key

    def load(self) -> List[MemoRecord]:
        text = self.slot.get_value(self.key)
        if text is None:
            return []
        try:
            decoded = json.loads(text)
        except ValueError as e:
            logger.warning('History slot %r is not valid JSON: %s', self.key, e)
            raise CorruptDataError(f'History data is not valid JSON: {e}') from e
        if not isinstance(decoded, list):
            logger.warning('History slot %r holds %s, expected a list', self.key, type(decoded).__name__)
            raise CorruptDataError('History data must be a JSON array')
        records = []
        for i, item in enumerate(decoded):
            try:
                records.append(MemoRecord.from_json(item))
            except CorruptDataError as e:
                logger.warning('History entry %d is malformed: %s', i, e)
                raise CorruptDataError(f'History entry {i}: {e}') from e
        logger.debug('Loaded %d records from %r', len(records), self.key)
        return records

    def save(self, records: Iterable[MemoRecord]):
        data = [r.to_json() for r in records]
        self.slot.set_value(self.key, json.dumps(data, ensure_ascii=False))
        logger.debug('Saved %d records to %r', len(data), self.key)

    def clear(self):
        self.slot.remove(self.key)
        logger.info('Cleared history slot %r', self.key)
