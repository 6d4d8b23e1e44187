"""Example: run a month's computation through the service layer (no Flask).

Controllers are a thin layer; the pay rules live in the services.
"""

import sys

from dotenv import load_dotenv

from config import load_settings

from src.compensation_system.compensation_system.container import build_container


def main():
    load_dotenv(override=False)
    employee_id = sys.argv[1] if len(sys.argv) > 1 else "EMP-001"
    year = int(sys.argv[2]) if len(sys.argv) > 2 else 2025
    month = int(sys.argv[3]) if len(sys.argv) > 3 else 1

    settings = load_settings()
    container = build_container(db_config=settings.DB_CONFIG)
    result = container.compensation_service.compute_month(employee_id, year, month)
    for record in result.computed:
        print(f"{record.day:02d} {record.day_type.value:<8} net={record.net_pay:.2f} absence={record.absence}")
    print(f"missing schedule: {result.missing_schedule_days}, failed: {result.failed_days}")


if __name__ == "__main__":
    main()
