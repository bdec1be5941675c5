"""Back-office (SQLAdmin) setup."""

from fastapi import FastAPI
from sqladmin import Admin

from cinebook.admin.auth import AdminAuth
from cinebook.admin.views import (
    BookingAdmin,
    HallAdmin,
    MovieAdmin,
    ScreeningAdmin,
    SeatBookingAdmin,
    TheaterAdmin,
)
from cinebook.config import settings
from cinebook.database import engine


def setup_admin(app: FastAPI) -> Admin:
    """Mount the admin views on ``app`` under ``/admin``."""
    auth = AdminAuth(secret_key=settings.admin_secret_key)
    admin = Admin(app, engine, authentication_backend=auth, title="CineBook Admin")
    for view in [MovieAdmin, TheaterAdmin, HallAdmin, ScreeningAdmin, BookingAdmin, SeatBookingAdmin]:
        admin.add_view(view)
    return admin
