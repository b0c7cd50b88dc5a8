from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.validators import parse_id
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/v1/families/<int:donor_id>/donations", methods=["POST"], endpoint="give_donation")
    def give_donation(donor_id: int):
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            return jsonify({"error": "Expected a JSON object"}), 400

        try:
            donee_id = parse_id(payload.get("doneeId"), "doneeId")
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400

        try:
            donation = container.donation_service.give(
                donor_id=donor_id,
                donee_id=donee_id,
                amount=payload.get("amount"),
            )
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except NotFoundError as e:
            return jsonify({"error": str(e)}), 404
        except Exception:
            logger.exception("Failed to save donation from family %s", donor_id)
            return jsonify({"error": "Could not save the donation"}), 500

        logger.info("Family %s donated %.2f hours to family %s", donation.donor_id, donation.amount, donation.donee_id)
        return jsonify(donation.to_dict()), 201
