"""
Top-level package for the flight booking services.

All functionality lives in submodules under ``app``; import the
applications as ``flight_booking_api.app.main.user_app`` and
``flight_booking_api.app.main.flight_app``.
"""
