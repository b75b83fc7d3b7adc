"""Example: drive the service layer directly (no Flask).

Controllers stay thin; the ledger and report logic lives in the services.
"""

import importlib

from config import get_settings_module

from src.tally_ledger.tally_ledger.common.datetime_utils import resolve_range
from src.tally_ledger.tally_ledger.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, secret_key=settings.SECRET_KEY)
    report = container.report_service.summary(
        company_id=1,
        date_range=resolve_range("2024-01-01", "2024-01-31"),
        period="weekly",
    )
    print(report.as_dict())


if __name__ == "__main__":
    main()
