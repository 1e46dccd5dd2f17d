from __future__ import annotations

import os
import sys
from pathlib import Path

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from hr_portal.database.bootstrap import init_schema, seed_demo_data
from hr_portal.main import create_app


def main() -> None:
    # balances and holidays are seeded for SEED_YEAR, default current year
    year = os.getenv("SEED_YEAR")

    app = create_app()
    with app.app_context():
        init_schema()
        result = seed_demo_data(year=int(year) if year else None)

    print("OK: Seeded database")
    print("Test credentials:")
    print("  Admin:    admin@hrportal.example.com / admin123")
    print("  Manager:  manager@hrportal.example.com / manager123")
    print("  Employee: employee@hrportal.example.com / employee123")
    print(f"  Leave types: {', '.join(sorted(result.leave_type_ids))}")


if __name__ == "__main__":
    main()
