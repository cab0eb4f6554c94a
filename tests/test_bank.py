import io

import pytest

from cslabs.bank import (
    OPTIONS,
    BankAccount,
    choose_option,
    is_amount,
    main,
    run_session,
    sanitize_amount,
)


def test_new_account_is_empty():
    assert BankAccount().balance == 0.0


def test_deposit_returns_balance():
    account = BankAccount(10.0)
    assert account.deposit(2.5) == pytest.approx(10.0 + 2.5)
    assert account.balance == pytest.approx(12.5)


def test_withdraw_less_than_balance():
    account = BankAccount(10.0)
    assert account.withdraw(4.0) == pytest.approx(10.0 - 4.0)


def test_withdraw_equal_or_more_is_refused():
    account = BankAccount(10.0)
    assert account.withdraw(10.0) == 10.0
    assert account.withdraw(50.0) == 10.0


@pytest.mark.parametrize("text", ["12.5", "0", "-3", "1e5", ".5", "-inf", "0x1p3"])
def test_is_amount_accepts(text):
    assert is_amount(text) is True


@pytest.mark.parametrize("text", ["abc", "12abc", "", "inf", "1e400", "1_0", "1 "])
def test_is_amount_rejects(text):
    assert is_amount(text) is False


def test_sanitize_keeps_cents():
    assert sanitize_amount("2.5") == 2.5


def test_sanitize_rounds_to_cents():
    assert sanitize_amount("3.14159") == 3.14


def test_sanitize_clamps_negative():
    assert sanitize_amount("-3") == 0.0
    assert sanitize_amount("-inf") == 0.0


def test_choose_option_retries():
    out = io.StringIO()
    assert choose_option(OPTIONS, ["abc", "9", "3"], out) == 3
    text = out.getvalue()
    assert "\tYour response MUST be a number!\n" in text
    assert f"\tYour response MUST be between 1 and {len(OPTIONS)}\n" in text
    assert "\t2 - Create Account\n" in text


def test_choose_option_leading_digits():
    assert choose_option(OPTIONS, ["4xyz"], io.StringIO()) == 4


def test_choose_option_end_of_input():
    with pytest.raises(EOFError):
        choose_option(OPTIONS, [], io.StringIO())


def test_session_deposit_and_withdraw():
    out = io.StringIO()
    tokens = ["2", "y", "10.50", "3", "5", "4", "100", "5", "1", "y"]
    account = run_session(tokens, out)
    assert account.balance == pytest.approx(10.5 + 5)
    assert "No money was taken out of your account." in out.getvalue()


def test_session_requires_account():
    out = io.StringIO()
    assert run_session(["3", "1", "y"], out) is None
    assert "\n\tCreate an account first.\n" in out.getvalue()


def test_session_empty_account_and_invalid_amount():
    out = io.StringIO()
    account = run_session(["2", "n", "3", "oops", "0", "1", "y"], out)
    text = out.getvalue()
    assert account.balance == 0.0
    assert "\tCurrent balance is: $0.00\n" in text
    assert "\tPlease input a valid numeric: " in text
    assert "No money deposited into your account." in text


def test_session_quit_declined_then_input_ends():
    account = run_session(["2", "y", "7", "1", "n"], io.StringIO())
    assert account.balance == 7.0


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 n\n5\n1 y\n"))
    assert main([]) == 0
    assert "\tCurrent balance is: $0.00\n" in capsys.readouterr().out