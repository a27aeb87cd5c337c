"""Unit tests for the auth boundary and text sinks."""

import logging
import re
import threading

from empcomp.sdk.auth import AuthManager
from empcomp.sdk.employee import Classification
from empcomp.sdk.schemas import CompensationResult, ProfileSchema, RosterEntry
from empcomp.sdk.sink import FileSink, MemorySink, format_calc_line


TIMESTAMPED = re.compile(r"^\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\] (.*)$")


class TestLogin:
    """Login only checks for non-blank credentials."""

    def test_blank_password_fails(self):
        sink = MemorySink()
        auth = AuthManager(sink)

        assert auth.login("ada", "   ") is False
        assert auth.is_authenticated() is False
        assert sink.lines[-1] == "[WARN] Login failed: empty username or password."

    def test_blank_username_fails(self):
        auth = AuthManager(MemorySink())
        assert auth.login("", "secret") is False

    def test_success_uses_default_record(self):
        sink = MemorySink()
        auth = AuthManager(sink)

        assert auth.login("ada", "secret") is True
        employee = auth.get_current_employee()
        assert employee.classification == "FullTime"
        assert employee.hours_worked == 38.0
        assert employee.display_name == "Unknown"
        assert sink.lines == [
            "User login initiated...",
            "[INFO] User 'ada' successfully logged in.",
        ]

    def test_roster_entry_seeds_record(self):
        profile = ProfileSchema(employees={
            "grace": RosterEntry(name="Grace Hopper", type="CLevel", hours=25),
        })
        auth = AuthManager(MemorySink(), profile)

        auth.login("grace", "secret")
        employee = auth.get_current_employee()
        assert employee.display_name == "Grace Hopper"
        assert employee.classification == "CLevel"
        assert employee.hours_worked == 25

    def test_failed_login_clears_previous_session(self):
        auth = AuthManager(MemorySink())
        auth.login("ada", "secret")
        auth.login("ada", "")
        assert auth.is_authenticated() is False


class TestSession:
    def test_current_employee_without_login_is_blank(self):
        sink = MemorySink()
        auth = AuthManager(sink)

        employee = auth.get_current_employee()
        assert employee.classification == ""
        assert employee.hours_worked == 0.0
        assert sink.lines[-1].startswith("[WARN] Attempted to get user details")

    def test_logout(self):
        sink = MemorySink()
        auth = AuthManager(sink)
        auth.login("ada", "secret")

        auth.logout()
        assert auth.is_authenticated() is False
        assert sink.lines[-1] == "[INFO] User successfully logged out."

        auth.logout()
        assert sink.lines[-1] == "[WARN] No user currently logged in to log out."


class TestFileSink:
    """File sink appends timestamped lines."""

    def test_appends_timestamped_lines(self, tmp_path):
        log_path = tmp_path / "logs" / "logs.txt"
        sink = FileSink(log_path)

        sink.write("first")
        sink.write("second")

        lines = log_path.read_text().splitlines()
        assert [TIMESTAMPED.match(line).group(1) for line in lines] == ["first", "second"]

    def test_unwritable_path_logged_not_raised(self, tmp_path, caplog):
        sink = FileSink(tmp_path)  # a directory, can't be opened for append

        with caplog.at_level(logging.ERROR, logger="empcomp.sdk.sink"):
            sink.write("hello")

        assert "Could not write to log file" in caplog.text

    def test_concurrent_writes_do_not_interleave(self, tmp_path):
        log_path = tmp_path / "logs.txt"
        sink = FileSink(log_path)

        def worker(n):
            for i in range(50):
                sink.write(f"worker={n} line={i}")

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        lines = log_path.read_text().splitlines()
        assert len(lines) == 200
        assert all(TIMESTAMPED.match(line) for line in lines)


class TestFormatCalcLine:
    def make_result(self, **overrides):
        values = dict(
            display_name="Ada",
            classification="FTE",
            resolved=Classification.FULL_TIME,
            hours_worked=38.0,
            pay=380.0,
            rewards=119.0,
            stock_options=0.0,
        )
        values.update(overrides)
        return CompensationResult(**values)

    def test_full_time(self):
        line = format_calc_line(self.make_result())
        assert line == "[CALC] Name=Ada, Type=FTE, Hours=38, Pay=380, Rewards=119, Stock=0"

    def test_contractor_pay_not_applicable(self):
        result = self.make_result(
            classification="Contractor",
            resolved=Classification.CONTRACTOR,
            pay=None,
            rewards=138.0,
        )
        assert "Pay=n/a" in format_calc_line(result)

    def test_cents_kept(self):
        line = format_calc_line(self.make_result(hours_worked=41.0, pay=415.0, rewards=120.75))
        assert "Rewards=120.75" in line
