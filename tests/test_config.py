# File: tests/test_config.py

from app.core.config import Settings


def test_cors_origins_from_comma_separated_string():
    s = Settings(backend_cors_origins="http://a.example.com, http://b.example.com")
    assert [str(o).rstrip("/") for o in s.backend_cors_origins] == [
        "http://a.example.com",
        "http://b.example.com",
    ]


def test_log_level_upper_cased():
    assert Settings(log_level="debug").log_level == "DEBUG"
