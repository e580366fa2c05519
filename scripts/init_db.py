from __future__ import annotations

import logging

from dotenv import load_dotenv

from digital_logbook.core.exceptions import DatabaseUnavailable
from digital_logbook.database.bootstrap import apply_schema, ensure_sample_data, list_tables
from digital_logbook.database.config import get_config
from digital_logbook.database.connection import open_database
from digital_logbook.main import LOG_FORMAT

logger = logging.getLogger("init_db")


def main() -> int:
    load_dotenv(override=False)
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

    config = get_config()
    try:
        conn = open_database(config)
    except DatabaseUnavailable as e:
        logger.error("%s", e)
        return 1

    apply_schema(conn)
    ensure_sample_data(conn)
    tables = list_tables(conn)
    logger.info(
        "OK: Applied schema.sql -> %s@%s:%s/%s (tables=%d)",
        config.username, config.host, config.port, config.database, len(tables),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
