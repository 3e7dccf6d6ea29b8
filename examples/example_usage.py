"""Example: use the service layer directly (no Flask).

Recalculates the current week of one employee and prints the day records that
changed.
"""

import importlib
import sys
from datetime import date

from timekeeping.config import get_settings_module
from timekeeping.container import build_container


def main():
    employee_id = sys.argv[1] if len(sys.argv) > 1 else "1"
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    for record in container.overtime_service.recalculate_week(employee_id, date.today()):
        print(record.to_dict())


if __name__ == "__main__":
    main()
