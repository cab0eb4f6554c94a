"""A simple bank account and an interactive menu to operate one."""

from __future__ import annotations

import math
import re
import string
import sys
from typing import Iterable, Iterator, Optional, Sequence, TextIO

OPTIONS = ("Quit", "Create Account", "Deposit", "Withdraw", "View Balance")

_HEX_FLOAT = re.compile(r"[+-]?0[xX][0-9a-fA-F]*\.?[0-9a-fA-F]*([pP][+-]?\d+)?")


class BankAccount:
    """An account whose balance grows with deposits and shrinks with withdrawals."""

    def __init__(self, balance: float = 0.0):
        self.balance = balance

    def withdraw(self, amount: float) -> float:
        """Take out the amount only if it is less than the balance; return the balance."""
        if amount < self.balance:
            self.balance -= amount
        return self.balance

    def deposit(self, amount: float) -> float:
        """Add the amount to the balance and return the balance."""
        self.balance += amount
        return self.balance


def _parse_number(text: str) -> float:
    body = text.lstrip()
    if not body or not body.isascii() or "_" in body or body != body.rstrip():
        raise ValueError(f"not a number: {text!r}")
    try:
        return float(body)
    except ValueError:
        if _HEX_FLOAT.fullmatch(body):
            return float.fromhex(body)
        raise


def is_amount(text: str) -> bool:
    """True if the whole text is a number within the range of a double."""
    try:
        value = _parse_number(text)
    except ValueError:
        return False
    return value != math.inf


def _round_half_away(value: float) -> float:
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return math.copysign(whole, value)


def sanitize_amount(text: str) -> float:
    """Parse an amount, round it to cents and clamp negatives to zero."""
    try:
        amount = _parse_number(text)
    except ValueError:
        amount = 0.0
    if math.isfinite(amount):
        amount = _round_half_away(amount * 100.0) / 100.0
    if amount < 0:
        amount = 0.0
    return amount


def _next_token(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise EOFError("input ended") from None


def _leading_int(text: str) -> int:
    match = re.match(r"\d+", text)
    return int(match.group()) if match else 0


def choose_option(options: Sequence[str], tokens: Iterable[str], out: TextIO) -> int:
    """Show the menu and read tokens until a valid 1-based choice is given."""
    tokens = iter(tokens)
    out.write("     - - - - - -  MENU - - - - - -\n\n")
    for number, option in enumerate(options, 1):
        out.write(f"\t{number} - {option}\n")
    out.write("\n")
    out.write("     - - - - - - - - - - - - - - -\n")
    while True:
        out.write("     Enter number of choice > ")
        token = _next_token(tokens)
        if token[0] in string.digits:
            choice = _leading_int(token)
            if 0 < choice <= len(options):
                return choice
            out.write(f"\tYour response MUST be between 1 and {len(options)}\n")
        else:
            out.write("\tYour response MUST be a number!\n")


def _read_amount(tokens: Iterator[str], out: TextIO, retry: str) -> str:
    response = _next_token(tokens)
    while not is_amount(response):
        out.write(retry)
        response = _next_token(tokens)
    return response


def run_session(tokens: Iterable[str], out: TextIO) -> Optional[BankAccount]:
    """Run the account menu over the given tokens; return the account at the end."""
    tokens = iter(tokens)
    account: Optional[BankAccount] = None
    out.write("--------------------------------------------------\n")
    out.write("This test harness operates with one bank account\n"
              "Use the menu options to manipulate it\n\n")
    try:
        while True:
            option = choose_option(OPTIONS, tokens, out)
            if option == 1:
                out.write("\tDo you really want to quit? (y/n) > ")
                if _next_token(tokens)[0] in "yY":
                    return account
            elif option == 2:
                account = None
                out.write("\tDo you want to initialize it with an amount (y/n)? > ")
                if _next_token(tokens)[0] not in "yY":
                    out.write("\tCurrent balance is: $0.00\n")
                    account = BankAccount()
                    continue
                out.write("\t\tEnter the amount you would like your bank account to have.\n")
                out.write("\t\tThe amount will be rounded to the second decimal place: ")
                response = _read_amount(tokens, out, "\t\tPlease input a valid numeric: ")
                account = BankAccount(sanitize_amount(response))
                out.write(f"\nCurrent balance is: ${account.balance:.2f}\n")
            elif account is None:
                out.write("\n\tCreate an account first.\n")
            elif option in (3, 4):
                verb = "deposit" if option == 3 else "withdraw"
                out.write(f"\tYou currently have ${account.balance:.2f} in your account\n"
                          f"\tEnter how much you would like to {verb}: ")
                response = _read_amount(tokens, out, "\tPlease input a valid numeric: ")
                previous = account.balance
                if option == 3:
                    account.deposit(sanitize_amount(response))
                    unchanged = "\n\tNo money deposited into your account."
                else:
                    account.withdraw(sanitize_amount(response))
                    unchanged = "\n\tNo money was taken out of your account."
                if previous == account.balance:
                    out.write(unchanged)
                out.write(f"\n\tThe new balance is: ${account.balance:.2f}\n")
            else:
                out.write(f"\tCurrent balance is: ${account.balance:.2f}\n")
    except EOFError:
        return account


def _stdin_tokens() -> Iterator[str]:
    for line in sys.stdin:
        yield from line.split()


def main(argv=None) -> int:
    """Run the account menu on standard input and output."""
    run_session(_stdin_tokens(), sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())