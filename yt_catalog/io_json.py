# -*- coding: utf-8 -*-
import os
import json
from typing import Any, Dict, List

from .errors import PersistError
from .utils import ensure_dir


def write_json_array(path: str, records: List[Dict[str, Any]]):
    """Grava a lista como JSON indentado (2 espaços), sobrescrevendo o arquivo."""
    text = json.dumps(records, indent=2, ensure_ascii=False)
    try:
        ensure_dir(os.path.dirname(path))
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as e:
        raise PersistError(f"Não foi possível gravar {path}: {e}") from e
