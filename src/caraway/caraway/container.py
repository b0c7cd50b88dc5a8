from __future__ import annotations

from dataclasses import dataclass

from .bookings.mysql_booking_repository import MySQLBookingRepository
from .core.constants import PERIOD_LENGTH
from .database.connection import DBConfig, DatabaseConnection
from .donations.mysql_donation_repository import MySQLDonationRepository
from .donations.service import DonationService
from .families.mysql_family_repository import MySQLFamilyRepository
from .hours.service import FamilyDataService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    families_repo: MySQLFamilyRepository
    bookings_repo: MySQLBookingRepository
    donations_repo: MySQLDonationRepository

    donation_service: DonationService
    family_data_service: FamilyDataService


def build_container(*, db_config: dict, period_length: int = PERIOD_LENGTH) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    families_repo = MySQLFamilyRepository(conn)
    bookings_repo = MySQLBookingRepository(conn)
    donations_repo = MySQLDonationRepository(conn)

    donation_service = DonationService(donations_repo, families_repo)
    family_data_service = FamilyDataService(
        bookings_repo,
        families_repo,
        donation_service,
        period_length=period_length,
    )

    return Container(
        conn=conn,
        families_repo=families_repo,
        bookings_repo=bookings_repo,
        donations_repo=donations_repo,
        donation_service=donation_service,
        family_data_service=family_data_service,
    )
