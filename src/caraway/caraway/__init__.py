"""Caraway co-op backend package.

Organized by feature modules (families, bookings, donations, hours, ...)
with a thin Flask controller layer over service/repository layers. The
``hours`` package is the pure accounting core behind the family dashboard.
"""
