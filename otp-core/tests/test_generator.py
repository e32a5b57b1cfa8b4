"""
Tests for OTPGenerator
======================
Configured generation, settings fallback and logging hygiene.
"""

import threading
from datetime import datetime, timezone

import pytest
from structlog.testing import capture_logs

SECRET = b"12345678901234567890"


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Clear cached settings around each test."""
    from otp_core.config import get_settings

    monkeypatch.delenv("OTP_HASH_ALGORITHM", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestOTPGenerator:
    """Tests for the high-level generator."""

    def test_defaults_to_sha1(self):
        """No config and no environment should mean SHA-1."""
        from otp_core.otp import OTPGenerator, HashAlgorithm

        generator = OTPGenerator()

        assert generator.algorithm is HashAlgorithm.SHA1
        assert generator.hotp(SECRET, 0) == "755224"

    def test_algorithm_from_config(self):
        """Explicit config should win."""
        from otp_core.otp import OTPGenerator, OTPConfig, HashAlgorithm

        generator = OTPGenerator(OTPConfig(algorithm="sha-256"))

        assert generator.algorithm is HashAlgorithm.SHA256
        assert generator.totp(SECRET, 1111111111) == "584430"

    def test_algorithm_from_environment(self, monkeypatch):
        """OTP_HASH_ALGORITHM should set the default algorithm."""
        from otp_core.otp import OTPGenerator, HashAlgorithm

        monkeypatch.setenv("OTP_HASH_ALGORITHM", "sha512")

        assert OTPGenerator().algorithm is HashAlgorithm.SHA512

    def test_invalid_config_fails_fast(self):
        """Bad selectors should raise at construction."""
        from otp_core.otp import OTPGenerator, OTPConfig, InvalidHashAlgorithm

        with pytest.raises(InvalidHashAlgorithm):
            OTPGenerator(OTPConfig(algorithm="md5"))

    def test_totp_with_datetime(self):
        """Should accept datetime instants."""
        from otp_core.otp import OTPGenerator

        now = datetime.fromtimestamp(1234567890, tz=timezone.utc)

        assert OTPGenerator().totp(SECRET, now) == "005924"

    def test_totp_defaults_to_now(self):
        """Without an instant, the current time step is used."""
        from otp_core.otp import OTPGenerator, generate_hotp

        generator = OTPGenerator()
        before = generator.counter_for()
        otp = generator.totp(SECRET)
        after = generator.counter_for()

        assert otp in {generate_hotp(None, SECRET, before), generate_hotp(None, SECRET, after)}

    def test_seconds_remaining(self):
        """Should count down to the end of the step."""
        from otp_core.otp import OTPGenerator

        generator = OTPGenerator()

        assert generator.seconds_remaining(60) == 30
        assert generator.seconds_remaining(61) == 29
        assert generator.seconds_remaining(89) == 1
        assert 1 <= generator.seconds_remaining() <= 30

    def test_counter_for(self):
        """Counter should follow the 30-second step."""
        from otp_core.otp import OTPGenerator

        assert OTPGenerator().counter_for(1111111111) == 1111111111 // 30

    def test_shared_across_threads(self):
        """One instance should be usable from many threads."""
        from otp_core.otp import OTPGenerator

        generator = OTPGenerator()
        results = {}

        def worker(counter):
            results[counter] = generator.hotp(SECRET, counter)

        threads = [threading.Thread(target=worker, args=(c,)) for c in range(10)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert [results[c] for c in range(10)] == [
            "755224", "287082", "359152", "969429", "338314",
            "254676", "287922", "162583", "399871", "520489",
        ]


class TestGeneratorLogging:
    """Generation events must never carry secrets or codes."""

    def test_logs_hotp_event(self):
        """Should log algorithm and counter."""
        from otp_core.otp import OTPGenerator

        with capture_logs() as logs:
            otp = OTPGenerator().hotp(SECRET, 3)

        assert len(logs) == 1
        assert logs[0]["event"] == "HOTP generated"
        assert logs[0]["algorithm"] == "sha1"
        assert logs[0]["counter"] == 3
        assert logs[0]["log_level"] == "debug"
        assert otp not in repr(logs)
        assert SECRET.decode() not in repr(logs)

    def test_logs_totp_event(self):
        """TOTP events should carry the derived counter."""
        from otp_core.otp import OTPGenerator

        with capture_logs() as logs:
            otp = OTPGenerator().totp(SECRET, 1111111111)

        assert logs[0]["event"] == "TOTP generated"
        assert logs[0]["counter"] == 1111111111 // 30
        assert otp not in repr(logs)

    def test_pure_functions_do_not_log(self):
        """The low-level API should be silent, including on errors."""
        from otp_core.otp import generate_hotp, InvalidHashAlgorithm

        with capture_logs() as logs:
            generate_hotp(None, SECRET, 0)
            with pytest.raises(InvalidHashAlgorithm):
                generate_hotp("md5", SECRET, 0)

        assert logs == []
