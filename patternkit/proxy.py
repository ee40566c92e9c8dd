"""Proxy: an ATM that guards access to a bank account with a PIN."""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod

DEFAULT_PIN = 1234
OPENING_BALANCE = 5000


class AtmError(Exception):
    """Base class for refused ATM operations."""


class NotAuthenticatedError(AtmError):
    """Raised when an operation is attempted before logging in."""

    def __init__(self) -> None:
        super().__init__("[ATM] Please login first")


class InsufficientBalanceError(AtmError):
    """Raised when a withdrawal exceeds the balance."""

    def __init__(self) -> None:
        super().__init__("Insufficient balance")


class AtmMachine(ABC):
    """The operations an account offers."""

    @abstractmethod
    def login(self, pin: int) -> bool:
        """Try to log in; return whether it succeeded."""

    @abstractmethod
    def logout(self) -> None:
        """End the session."""

    @abstractmethod
    def fetch_balance(self) -> int:
        """Return the current balance."""

    @abstractmethod
    def withdraw(self, amount: int) -> str:
        """Take money out; return a confirmation."""

    @abstractmethod
    def deposit(self, amount: int) -> str:
        """Put money in; return a confirmation."""


class BankAccount(AtmMachine):
    """The real account; it trusts whoever calls it."""

    def __init__(self, balance: int = OPENING_BALANCE) -> None:
        self._balance = balance

    def login(self, pin: int) -> bool:
        return True

    def logout(self) -> None:
        pass

    def fetch_balance(self) -> int:
        return self._balance

    def withdraw(self, amount: int) -> str:
        if amount > self._balance:
            raise InsufficientBalanceError()
        self._balance -= amount
        return f"Withdrawn: {amount}"

    def deposit(self, amount: int) -> str:
        self._balance += amount
        return f"Deposited: {amount}"


class AtmProxy(AtmMachine):
    """Checks the PIN before letting anything through to the account."""

    def __init__(self, account: AtmMachine, correct_pin: int = DEFAULT_PIN) -> None:
        self._account = account
        self._correct_pin = correct_pin
        self.authenticated = False

    def login(self, pin: int) -> bool:
        self.authenticated = pin == self._correct_pin
        return self.authenticated

    def logout(self) -> None:
        self.authenticated = False

    def _require_login(self) -> None:
        if not self.authenticated:
            raise NotAuthenticatedError()

    def fetch_balance(self) -> int:
        self._require_login()
        return self._account.fetch_balance()

    def withdraw(self, amount: int) -> str:
        self._require_login()
        return self._account.withdraw(amount)

    def deposit(self, amount: int) -> str:
        self._require_login()
        return self._account.deposit(amount)


def _read_pin(text: str) -> int | None:
    words = text.split()
    if not words:
        return None
    try:
        return int(words[0])
    except ValueError:
        return None


def main(argv=None) -> int:
    """Log in to the ATM, check, withdraw, deposit, check again and log out."""
    parser = argparse.ArgumentParser(description="Use an ATM.")
    parser.add_argument("pin", nargs="?", help="the PIN; asked for when left out")
    args = parser.parse_args(argv)

    if args.pin is None:
        try:
            text = input("Enter PIN: ")
        except EOFError:
            text = ""
    else:
        print("Enter PIN: ", end="")
        text = args.pin

    atm = AtmProxy(BankAccount())
    pin = _read_pin(text)
    if pin is None or not atm.login(pin):
        print("[ATM] Wrong PIN")
        return 1
    print("[ATM] Login successful")

    try:
        print(f"Balance: {atm.fetch_balance()}")
        print(atm.withdraw(300))
        print(atm.deposit(20000))
        print(f"Balance: {atm.fetch_balance()}")
    except AtmError as error:
        print(error)
    atm.logout()
    print("[ATM] Logged out")
    return 0