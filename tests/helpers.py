"""Collaborators used by the tests.
The real classes are here only to show what the doubles stand in for; the
doubles never consult them.
"""


class MovieTicket:
    def __init__(self, title, price):
        self._title = title
        self._price = price

    def title(self):
        return self._title

    def price(self):
        return self._price

    def print(self):
        return f"Ticket for {self._title}: ${self._price}"


class Theater:
    def show_movie(self, title):
        return f"Now showing: {title}"

    def sell_ticket(self, title, price):
        return f"Sold ticket for {title} at ${price}"

    def is_open(self):
        return True


class BoxOffice:
    """Code under test: depends on a theater and sells tickets through it."""

    def __init__(self, theater):
        self.theater = theater

    def sell(self, ticket):
        if not self.theater.is_open():
            return "Sorry, we're closed"
        return self.theater.sell_ticket(ticket.title(), ticket.price())
