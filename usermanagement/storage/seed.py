"""Fixture users loaded into a fresh store."""

from datetime import date

from usermanagement.models import User

SEED_USERS: tuple[User, ...] = (
    User(id=1, forename="Peter", surname="Loew", email="ploew@example.com", is_active=True, date_of_birth=date(1953, 7, 10)),
    User(id=2, forename="Benjamin Franklin", surname="Gates", email="bfgates@example.com", is_active=True, date_of_birth=date(1964, 5, 17)),
    User(id=3, forename="Castor", surname="Troy", email="ctroy@example.com", is_active=False, date_of_birth=date(1965, 4, 2)),
    User(id=4, forename="Memphis", surname="Raines", email="mraines@example.com", is_active=True, date_of_birth=date(1968, 11, 22)),
    User(id=5, forename="Stanley", surname="Goodspeed", email="sgodspeed@example.com", is_active=True, date_of_birth=date(1969, 8, 14)),
    User(id=6, forename="H.I.", surname="McDunnough", email="himcdunnough@example.com", is_active=True, date_of_birth=date(1959, 10, 3)),
    User(id=7, forename="Cameron", surname="Poe", email="cpoe@example.com", is_active=False, date_of_birth=date(1954, 1, 21)),
    User(id=8, forename="Edward", surname="Malus", email="emalus@example.com", is_active=False, date_of_birth=date(1966, 3, 27)),
    User(id=9, forename="Damon", surname="Macready", email="dmacready@example.com", is_active=False, date_of_birth=date(1967, 12, 12)),
    User(id=10, forename="Johnny", surname="Blaze", email="jblaze@example.com", is_active=True, date_of_birth=date(1966, 6, 6)),
    User(id=11, forename="Robin", surname="Feld", email="rfeld@example.com", is_active=True, date_of_birth=date(1957, 2, 5)),
)
