"""Backup database lớp học bằng `mysqldump`.

Mật khẩu truyền qua biến môi trường ``MYSQL_PWD`` để không lộ trên dòng lệnh.
Chỉ giữ lại ``BACKUP_KEEP`` bản mới nhất (mặc định 10); đặt 0 để giữ tất cả.
"""

from __future__ import annotations

import importlib
import logging
import os
import subprocess
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.classroom_manager.classroom_manager.common.logging_utils import configure_logging
from src.classroom_manager.classroom_manager.database.connection import DBConfig

logger = logging.getLogger("scripts.backup")

BACKUP_DIR = REPO_ROOT / "backups"
DEFAULT_KEEP = 10


def backup_path(target: DBConfig, *, now: datetime, out_dir: Path = BACKUP_DIR) -> Path:
    return out_dir / f"{target.database}_{now.strftime('%Y%m%d_%H%M%S')}.sql"


def build_dump_command(target: DBConfig, out_file: Path) -> list[str]:
    return [
        "mysqldump",
        f"--host={target.host}",
        f"--port={target.port}",
        f"--user={target.user}",
        "--single-transaction",
        "--routines",
        "--default-character-set=utf8mb4",
        f"--result-file={out_file}",
        target.database,
    ]


def prune_backups(out_dir: Path, database: str, keep: int) -> list[Path]:
    """Delete all but the ``keep`` newest dumps of ``database``; returns what was removed."""

    if keep <= 0:
        return []
    # Timestamped names sort chronologically.
    dumps = sorted(out_dir.glob(f"{database}_*.sql"), reverse=True)
    removed = dumps[keep:]
    for path in removed:
        path.unlink()
    return removed


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    target = DBConfig.from_dict(dict(settings.DB_CONFIG))

    BACKUP_DIR.mkdir(parents=True, exist_ok=True)
    out_file = backup_path(target, now=datetime.now())

    env = dict(os.environ, MYSQL_PWD=target.password)
    try:
        subprocess.run(build_dump_command(target, out_file), env=env, stderr=subprocess.PIPE, check=True)
    except FileNotFoundError:
        raise SystemExit("Không tìm thấy `mysqldump`. Hãy cài MySQL client tools hoặc backup bằng Workbench.")
    except subprocess.CalledProcessError as e:
        out_file.unlink(missing_ok=True)
        logger.error("mysqldump failed: %s", (e.stderr or b"").decode("utf-8", "replace").strip())
        raise SystemExit(1)

    logger.info("Backup created: %s", out_file)
    for path in prune_backups(BACKUP_DIR, target.database, int(os.getenv("BACKUP_KEEP", DEFAULT_KEEP))):
        logger.info("Removed old backup %s", path.name)


if __name__ == "__main__":
    main()
