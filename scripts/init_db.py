from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.tally_ledger.tally_ledger.common.log_config import setup_logging
from src.tally_ledger.tally_ledger.database.bootstrap import apply_schema, list_tables
from src.tally_ledger.tally_ledger.database.connection import DBConfig, DatabaseConnection

logger = logging.getLogger("tally_ledger.init_db")


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    db = DBConfig.from_mapping(dict(settings.DB_CONFIG))
    conn = DatabaseConnection(db)

    schema_path = REPO_ROOT / "database" / "schema.sql"
    apply_schema(conn, schema_path=schema_path)
    tables = list_tables(conn)
    logger.info(
        "OK: Applied schema.sql -> %s@%s:%s/%s (tables=%d)",
        db.user,
        db.host,
        db.port,
        db.database,
        len(tables),
    )


if __name__ == "__main__":
    main()
