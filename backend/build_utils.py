# backend/build_utils.py
import os
import json
import uuid
import time
import zipfile
from pathlib import Path

from icongen.errors import IconPipelineError
from icongen.pipeline import make_config, run_pipeline

# =========================
# Base directories
# =========================
TASK_BASE_DIR = os.environ.get("ICON_TASK_DIR", "/tmp/icon_tasks")

OUTPUT_DIRNAME = "output"
ARCHIVE_NAME = "icons.zip"
STATUS_NAME = "status.json"

# =========================
# Task layout
# =========================
def task_paths(task_id: str) -> dict:
    """
    <base>/<task_id>/status.json, output/ (logo/ + res/) and icons.zip
    """
    root = Path(TASK_BASE_DIR) / task_id
    return {
        "root": root,
        "status": root / STATUS_NAME,
        "output": root / OUTPUT_DIRNAME,
        "archive": root / ARCHIVE_NAME,
    }

def record_status(task_id: str, status: str, **fields) -> dict:
    record = dict(fields, task_id=task_id, status=status, updated_at=int(time.time()))

    status_path = task_paths(task_id)["status"]
    status_path.parent.mkdir(parents=True, exist_ok=True)
    status_path.write_text(json.dumps(record, ensure_ascii=False, indent=2), encoding="utf-8")
    return record

def is_valid_task_id(task_id: str) -> bool:
    try:
        return str(uuid.UUID(task_id)) == task_id
    except ValueError:
        return False

def read_status(task_id: str) -> dict | None:
    if not is_valid_task_id(task_id):
        return None
    status_path = task_paths(task_id)["status"]
    if not status_path.is_file():
        return None
    return json.loads(status_path.read_text(encoding="utf-8"))

# =========================
# Task lifecycle
# =========================
def create_task(upload, filename: str | None = None) -> tuple[str, str]:
    """
    Store an uploaded logo in a fresh task directory.

    `upload` is anything with a save(path) method (werkzeug FileStorage).
    Returns (task_id, source_path).
    """
    task_id = str(uuid.uuid4())
    suffix = Path(filename or "").suffix.lower()
    if not suffix[1:].isalnum():
        suffix = ""

    root = task_paths(task_id)["root"]
    root.mkdir(parents=True, exist_ok=True)
    source_path = str(root / f"original_logo{suffix}")
    upload.save(source_path)

    print(f"[TASK] Create task {task_id}", flush=True)
    record_status(task_id, "queued")
    return task_id, source_path

def run_icon_task(task_id: str, source_path: str) -> dict:
    """
    Run the icon pipeline for a task and record the outcome in status.json.

    Pipeline errors are returned as a "failed" record. Anything else is
    recorded as "failed" too and re-raised.
    """
    out = task_paths(task_id)["output"]
    config = make_config(logo_dir=out / "logo", res_root=out / "res", source_path=source_path)

    record_status(task_id, "running")
    try:
        artifacts = run_pipeline(config)
    except IconPipelineError as e:
        print(f"[ERROR] Task {task_id} failed: {e}", flush=True)
        return record_status(task_id, "failed", error=f"{type(e).__name__}: {e}")
    except Exception as e:
        print(f"[ERROR] Task {task_id} crashed: {e}", flush=True)
        record_status(task_id, "failed", error=f"{type(e).__name__}: {e}")
        raise

    print(f"[TASK] Task {task_id} done, {len(artifacts)} files", flush=True)
    return record_status(task_id, "done", artifacts=[
        dict(a.to_dict(), path=Path(a.path).relative_to(out).as_posix()) for a in artifacts
    ])

def archive_task(task_id: str) -> str:
    """
    Zip the task's output tree, returns the archive path.
    """
    paths = task_paths(task_id)
    out = paths["output"]
    with zipfile.ZipFile(paths["archive"], "w", compression=zipfile.ZIP_DEFLATED) as zf:
        for path in sorted(out.rglob("*")):
            if path.is_file():
                zf.write(path, path.relative_to(out).as_posix())
    return str(paths["archive"])
