# -*- coding: utf-8 -*-
"""CSV export of the memo history (fixed schema).

Every field is wrapped in double quotes. Commas in ``address`` and ``memo``
are replaced by a space instead of being escaped, and embedded double quotes
are written as is. The output is meant for quick spreadsheet import, not
for lossless round trips.

Coordinates are written in plain decimal notation (``0.00005``, ``35.0``)
for 1e-6 <= |x| < 1e21; only values outside that range fall back to
exponent form.
"""
from __future__ import annotations
from decimal import Decimal
from typing import Sequence

from .errors import EmptyCollectionError
from .memo_record import MemoRecord

HEADERS = ['time', 'lat', 'lng', 'address', 'memo']


def format_coordinate(value: float) -> str:
    v = float(value)
    text = repr(v)
    if v == 0 or not 1e-6 <= abs(v) < 1e21:
        return text
    # 指数表記 (5e-05 など) を通常の小数表記に直す
    text = format(Decimal(text), 'f')
    if '.' not in text:
        text += '.0'
    return text


class CsvExporter:
    ROW_SEPARATOR = '\n'

    def export(self, records: Sequence[MemoRecord]) -> str:
        if not records:
            raise EmptyCollectionError()
        rows = [','.join(HEADERS)]
        for r in records:
            values = [
                r.time,
                format_coordinate(r.lat),
                format_coordinate(r.lng),
                r.address.replace(',', ' '),
                r.memo.replace(',', ' '),
            ]
            rows.append(','.join(f'"{v}"' for v in values))
        return self.ROW_SEPARATOR.join(rows)

    def write(self, path: str, records: Sequence[MemoRecord]) -> str:
        text = self.export(records)
        with open(path, 'w', encoding='utf-8', newline='') as f:
            f.write(text)
        return text
