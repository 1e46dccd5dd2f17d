from __future__ import annotations

import sys
from pathlib import Path

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from hr_portal.database.bootstrap import ensure_database_exists, init_schema, list_tables
from hr_portal.main import create_app


def main() -> None:
    app = create_app()
    uri = app.config["SQLALCHEMY_DATABASE_URI"]

    ensure_database_exists(uri)
    with app.app_context():
        init_schema()
        tables = list_tables()

    print(f"OK: Created schema (tables={len(tables)}): {', '.join(tables)}")


if __name__ == "__main__":
    main()
