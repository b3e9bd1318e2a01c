from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import orjson
from filelock import FileLock


def dump_json_bytes(payload: Any) -> bytes:
    try:
        return orjson.dumps(payload, option=orjson.OPT_INDENT_2)
    except TypeError:
        return json.dumps(payload, ensure_ascii=True, indent=2).encode("utf-8")


def write_bytes_atomic(path: Path, payload: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    lock_path = path.with_suffix(f"{path.suffix}.lock")
    tmp_path = path.with_suffix(f"{path.suffix}.tmp")
    with FileLock(str(lock_path)):
        tmp_path.write_bytes(payload)
        tmp_path.replace(path)
    lock_path.unlink(missing_ok=True)


def write_json_atomic(path: Path, payload: Any) -> None:
    write_bytes_atomic(path, dump_json_bytes(payload))
