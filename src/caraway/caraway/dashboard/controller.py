from __future__ import annotations

import logging
from datetime import datetime

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local, parse_iso_date
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _reference_time() -> datetime:
        today_s = request.args.get("today")
        if not today_s:
            return now_local()
        try:
            day = parse_iso_date(today_s)
        except ValueError:
            raise ValidationError(f"Invalid date {today_s!r}, expected YYYY-MM-DD") from None
        # a past/future date is viewed as of its start of day
        return datetime.combine(day, datetime.min.time())

    @app.route("/api/v1/families/<int:family_id>/dashboard", methods=["GET"], endpoint="family_dashboard")
    def family_dashboard(family_id: int):
        try:
            today = _reference_time()
            data = container.family_data_service.build_for_family(family_id, today=today)
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except NotFoundError as e:
            return jsonify({"error": str(e)}), 404
        except Exception:
            logger.exception("Dashboard data unavailable for family %s", family_id)
            return jsonify({"error": "Hours data is currently unavailable"}), 503

        return jsonify(data.to_dict())
