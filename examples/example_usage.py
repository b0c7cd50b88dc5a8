"""Example: build a family's dashboard figures through the service layer (no Flask)."""

import importlib
import json
from datetime import datetime

from config import get_settings_module

from src.caraway.caraway.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, period_length=settings.PERIOD_LENGTH)
    data = container.family_data_service.build_for_family(1, today=datetime.now())
    print(json.dumps(data.to_dict(), indent=2))


if __name__ == "__main__":
    main()
