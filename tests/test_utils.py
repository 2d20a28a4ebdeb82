"""Tests for Gohan utility modules."""


class TestGetLogger:
    """Tests for get_logger."""

    def test_prefixes_name(self) -> None:
        from gohan.utils.logger import get_logger

        assert get_logger("mymodule").name == "gohan.mymodule"

    def test_package_names_unchanged(self) -> None:
        from gohan.utils.logger import get_logger

        assert get_logger("gohan").name == "gohan"
        assert get_logger("gohan.lexer.core").name == "gohan.lexer.core"

    def test_no_handlers_installed(self) -> None:
        from gohan.utils.logger import get_logger

        assert get_logger("gohan.parsing.inline").handlers == []
