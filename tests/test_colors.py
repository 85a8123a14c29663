from colorama import Fore
from levellog.core.colors import level_color, strip_ansi, LEVEL_COLORS
from levellog.core.levels import Level


def test_color_table_per_level():
    assert level_color(Level.TRACE)("x") == f"{Fore.GREEN}x{Fore.RESET}"
    assert level_color(Level.INFO)("x") == f"{Fore.LIGHTBLUE_EX}x{Fore.RESET}"
    assert level_color(Level.WARN)("x") == f"{Fore.YELLOW}x{Fore.RESET}"
    assert level_color(Level.ERROR)("x") == f"{Fore.RED}x{Fore.RESET}"
    assert level_color(Level.FATAL)("x") == f"{Fore.LIGHTRED_EX}x{Fore.RESET}"


def test_unknown_level_falls_back_to_white():
    assert level_color(42)("x") == f"{Fore.WHITE}x{Fore.RESET}"
    assert level_color([1])("x") == f"{Fore.WHITE}x{Fore.RESET}"


def test_every_level_has_a_color():
    assert set(LEVEL_COLORS) == set(Level)


def test_strip_ansi():
    assert strip_ansi(level_color(Level.WARN)("Warn@net")) == "Warn@net"
