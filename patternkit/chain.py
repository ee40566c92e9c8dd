"""Chain of responsibility: leave requests passed up the office."""

from __future__ import annotations


class LeaveHandler:
    """A link in the chain; forwards requests it does not approve."""

    def __init__(self) -> None:
        self.next: LeaveHandler | None = None

    def set_next(self, handler: LeaveHandler) -> LeaveHandler:
        """Link the next handler and return it, so links can be chained."""
        self.next = handler
        return handler

    def handle_request(self, days: int) -> str | None:
        """Pass the request on; None when nobody in the chain approves it."""
        if self.next is None:
            return None
        return self.next.handle_request(days)


class OfficeManager(LeaveHandler):
    def handle_request(self, days: int) -> str | None:
        if days <= 2:
            return "Manager can approve the leave"
        return super().handle_request(days)


class OfficeHR(LeaveHandler):
    def handle_request(self, days: int) -> str | None:
        if 2 < days < 5:
            return "HR can approve the leave"
        return super().handle_request(days)


class OfficeDirector(LeaveHandler):
    def handle_request(self, days: int) -> str | None:
        if days >= 5:
            return "Director can approve the leave"
        return super().handle_request(days)


def main(argv=None) -> int:
    """Send leave requests of 1, 4 and 10 days through Manager, HR and Director."""
    manager = OfficeManager()
    manager.set_next(OfficeHR()).set_next(OfficeDirector())
    for days in (1, 4, 10):
        answer = manager.handle_request(days)
        if answer is not None:
            print(answer)
    return 0