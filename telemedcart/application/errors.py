class AccessDeniedError(Exception):
    pass


class BookingError(Exception):
    pass
