"""Tests for the Rich console factory."""

from switchboard.output.console import SWITCHBOARD_THEME, create_console, get_output


class TestCreateConsole:
    def test_renders_to_buffer(self) -> None:
        console = create_console()
        console.print("hello")
        assert get_output(console) == "hello\n"

    def test_markup_not_interpreted(self) -> None:
        console = create_console()
        console.print("[bold]x[/bold]")
        assert get_output(console) == "[bold]x[/bold]\n"

    def test_default_width(self) -> None:
        assert create_console().width == 120
        assert create_console(width=60).width == 60

    def test_theme_styles(self) -> None:
        assert "sb.error" in SWITCHBOARD_THEME.styles
