# -*- coding: utf-8 -*-
import os
from typing import Iterable, List


def ensure_dir(path: str):
    if path:
        os.makedirs(path, exist_ok=True)


def dedupe_preserving_order(values: Iterable[str]) -> List[str]:
    seen = set()
    out = []
    for v in values:
        if v not in seen:
            seen.add(v)
            out.append(v)
    return out
