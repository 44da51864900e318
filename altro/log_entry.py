"""Columns of the tabular solver log: formatting, verbosity and colour."""

import enum
import math

DEFAULT_WIDTH = 10


class LogLevel(enum.IntEnum):
    """Verbosity of the solver output; higher levels include the lower ones.

    The "outer" levels report augmented Lagrangian iterations, the "inner"
    levels the iLQR iterations. ``DEBUG`` prints everything that is logged.
    """

    SILENT = 0
    OUTER = 1
    OUTER_DEBUG = 2
    INNER = 3
    INNER_DEBUG = 4
    DEBUG = 5


class EntryType(enum.Enum):
    """Kind of data held by a log entry."""

    INT = "int"
    FLOAT = "float"
    STRING = "string"


class Color(enum.Enum):
    """Terminal foreground colours, as 24-bit RGB values."""

    WHITE = 0xFFFFFF
    GREEN = 0x008000
    RED = 0xFF0000
    YELLOW = 0xFFFF00
    CYAN = 0x00FFFF
    BLUE = 0x0000FF
    MAGENTA = 0xFF00FF

    @property
    def rgb(self):
        """The colour as an ``(r, g, b)`` tuple."""
        return (self.value >> 16) & 0xFF, (self.value >> 8) & 0xFF, self.value & 0xFF


_RESET = "\x1b[0m"


def colorize(text, color):
    """Wrap ``text`` in the terminal escape codes for a true-colour foreground."""
    r, g, b = Color(color).rgb
    return f"\x1b[38;2;{r};{g};{b}m{text}{_RESET}"


class LogEntry:
    """One column of the solver log.

    ``fmt`` is a ``str.format`` template such as ``"{:>4.2f}"`` used to turn
    logged values into text. The column is shown only when the current
    verbosity is at least ``level``. Numeric values outside optional bounds
    are shown in a different colour.
    """

    def __init__(
        self,
        title,
        fmt,
        entry_type=EntryType.FLOAT,
        width=DEFAULT_WIDTH,
        level=LogLevel.INNER,
        name=None,
    ):
        self.title = title
        self.name = title if name is None else name
        self.fmt = fmt
        self.entry_type = EntryType(entry_type)
        self.width = width
        self.level = LogLevel(level)
        self.data = ""
        self.color = Color.WHITE
        self.default_color = Color.WHITE
        self._bounded = False
        self._lower = -math.inf
        self._upper = math.inf
        self._color_lower = Color.GREEN
        self._color_upper = Color.RED

    @property
    def bounded(self):
        """Whether conditional colouring by bounds is enabled."""
        return self._bounded

    @property
    def lower_bound(self):
        return self._lower

    @property
    def upper_bound(self):
        return self._upper

    def is_active(self, level):
        """True if the entry is shown at verbosity ``level``."""
        return level >= self.level

    def set_lower_bound(self, lb, color=Color.GREEN):
        """Show values below ``lb`` in ``color``. Returns the entry."""
        if lb > self._upper:
            raise ValueError("Lower bound must be less than or equal to the upper bound.")
        self._bounded = True
        self._lower = lb
        self._color_lower = Color(color)
        return self

    def set_upper_bound(self, ub, color=Color.RED):
        """Show values above ``ub`` in ``color``. Returns the entry."""
        if ub < self._lower:
            raise ValueError("Upper bound must be greater than or equal to the lower bound.")
        self._bounded = True
        self._upper = ub
        self._color_upper = Color(color)
        return self

    def _color_for(self, value):
        if self._bounded:
            if value < self._lower:
                return self._color_lower
            if value > self._upper:
                return self._color_upper
        return self.default_color

    def log(self, value):
        """Format ``value`` and keep it for the next render."""
        self.color = self._color_for(value)
        self.data = self.fmt.format(value)

    def render(self, level=LogLevel.SILENT):
        """The stored data padded to the column width, or ``""`` if inactive."""
        if not self.is_active(level):
            return ""
        return colorize(f"{self.data:>{self.width}}", self.color)

    def render_header(self, level=LogLevel.SILENT, color=Color.WHITE):
        """The title padded to the column width, or ``""`` if inactive."""
        if not self.is_active(level):
            return ""
        return colorize(f"{self.title:>{self.width}}", color)

    def clear(self):
        """Forget the stored data; the column then renders blank."""
        self.data = ""