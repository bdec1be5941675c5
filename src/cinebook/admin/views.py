"""SQLAdmin model views."""

from sqladmin import ModelView

from cinebook.models.booking import Booking
from cinebook.models.hall import Hall
from cinebook.models.movie import Movie
from cinebook.models.screening import Screening
from cinebook.models.seat_booking import SeatBooking
from cinebook.models.theater import Theater


class MovieAdmin(ModelView, model=Movie):
    column_list = [
        Movie.id,
        Movie.title,
        Movie.genre,
        Movie.director,
        Movie.duration_minutes,
        Movie.recommended,
    ]
    column_searchable_list = [Movie.title, Movie.director]
    column_sortable_list = [Movie.title, Movie.duration_minutes]


class TheaterAdmin(ModelView, model=Theater):
    column_list = [Theater.id, Theater.name, Theater.city, Theater.address, Theater.phone]
    column_searchable_list = [Theater.name, Theater.city]
    column_sortable_list = [Theater.name, Theater.city]


class HallAdmin(ModelView, model=Hall):
    column_list = [Hall.theater_id, Hall.hall_id, Hall.seats_layout]
    column_searchable_list = [Hall.theater_id]


# Schedule changes go through the API so overlap checks always run
class ScreeningAdmin(ModelView, model=Screening):
    column_list = [
        Screening.id,
        Screening.movie_id,
        Screening.theater_id,
        Screening.hall_id,
        Screening.start_time,
        Screening.quality,
        Screening.price,
    ]
    column_searchable_list = [Screening.theater_id, Screening.movie_id]
    column_sortable_list = [Screening.start_time, Screening.price]
    can_create = False
    can_edit = False


class BookingAdmin(ModelView, model=Booking):
    column_list = [
        Booking.id,
        Booking.user_id,
        Booking.screening_id,
        Booking.seats_number,
        Booking.total_price,
        Booking.status,
        Booking.booking_date,
    ]
    column_searchable_list = [Booking.user_id, Booking.screening_id, Booking.status]
    column_sortable_list = [Booking.booking_date, Booking.status]
    can_create = False
    can_edit = False


class SeatBookingAdmin(ModelView, model=SeatBooking):
    column_list = [SeatBooking.screening_id, SeatBooking.seat_id, SeatBooking.booking_id]
    column_searchable_list = [SeatBooking.screening_id, SeatBooking.booking_id]
    can_create = False
    can_edit = False
    can_delete = False
