import os

# Constants

RESET = "\033[0m"


def supports_true_color() -> bool:
    """
    Return True if the terminal claims to support 24-bit (true-color).
    We check COLORTERM and TERM for the usual markers.
    """
    for variable in ("COLORTERM", "TERM"):
        value = os.getenv(variable, "").lower()
        if "truecolor" in value or "24bit" in value:
            return True
    return False


def bg_color_8b(code: int) -> str:
    """
    Return the ANSI escape code for the 256-colors background 'code'.
    """
    return f"\033[48;5;{code}m"


def rgb_to_8b(red: int, green: int, blue: int) -> int:
    """
    Nearest entry of the 6x6x6 color cube of 256-colors terminals.
    """
    def level(channel: int) -> int:
        return round(channel / 255 * 5)

    return 16 + 36 * level(red) + 6 * level(green) + level(blue)


def bg_color_24b(red: int, green: int, blue: int) -> str:
    """
    Background escape for an RGB color, degraded to 256 colors when the
    terminal does not advertise true-color.
    """
    if not supports_true_color():
        return bg_color_8b(rgb_to_8b(red, green, blue))
    return f"\033[48;2;{red};{green};{blue}m"


if __name__ == "__main__":
    for shade in range(0, 256, 51):
        print(f"{bg_color_24b(shade, shade, shade)} {shade:3d} {RESET}", end=" ")
    print()
