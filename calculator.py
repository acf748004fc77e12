"""
Calculator Engine for Kiddy Calc
Turns button taps into calculator states and the text shown on screen
"""
import math
from dataclasses import dataclass, replace
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum

import config

DIGITS = "0123456789"


class Operator(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"


@dataclass(frozen=True)
class Idle:
    """First number being typed, nothing pending"""
    display: str = "0"


@dataclass(frozen=True)
class AwaitingOperand:
    """Operator chosen, second number not started"""
    pending: float
    operator: Operator

    @property
    def display(self):
        return ""


@dataclass(frozen=True)
class EnteringOperand:
    """Second number being typed"""
    pending: float
    operator: Operator
    display: str


@dataclass(frozen=True)
class Evaluated:
    """Result of '=' on screen; the next digit starts a new number"""
    display: str


INITIAL_STATE = Idle()


# ── Arithmetic ────────────────────────────────────────────────────────────────

def compute(a, b, op):
    """Apply op to a and b. Division by zero gives NaN instead of raising."""
    op = Operator(op)
    if op is Operator.ADD:
        return a + b
    if op is Operator.SUBTRACT:
        return a - b
    if op is Operator.MULTIPLY:
        return a * b
    if b == 0:
        return math.nan
    return a / b


def parse_operand(text):
    """Read display text as a number; anything unreadable (like 'Oops!') is NaN"""
    try:
        return float(text)
    except ValueError:
        return math.nan


# ── Formatting ────────────────────────────────────────────────────────────────

def _number_text(n):
    """Default decimal form: 5 not 5.0, 0.000015 not 1.5e-05, 1e+21 stays short"""
    if n == 0:
        return "0"
    text = repr(n)
    if 1e-6 <= abs(n) < 1e21:
        return format(Decimal(text).normalize(), "f")
    mantissa, exponent = text.split("e")
    return f"{mantissa}e{int(exponent):+d}"


def _fixed(n, places):
    if abs(n) >= 1e21:
        return _number_text(n)
    quantum = Decimal(1).scaleb(-places)
    return format(Decimal(n).quantize(quantum, rounding=ROUND_HALF_UP), "f")


def _format(n, places):
    if not math.isfinite(n):
        return config.OOPS_TEXT
    text = _number_text(n)
    if len(text) > config.MAX_DISPLAY_LENGTH:
        return _fixed(n, places)
    return text


def format_number(n):
    """Format a result for the main display"""
    return _format(n, config.LONG_DECIMALS)


def format_number_short(n):
    """Format the pending number for the equation preview"""
    return _format(n, config.SHORT_DECIMALS)


# ── Transitions ───────────────────────────────────────────────────────────────

def _append_digit(display, digit):
    if display in ("0", ""):
        return digit
    if len(display) >= config.MAX_DISPLAY_LENGTH:
        return display  # keep it simple for kids
    return display + digit


def input_digit(state, digit):
    if len(digit) != 1 or digit not in DIGITS:
        raise ValueError(f"Not a digit: {digit!r}")
    if isinstance(state, Evaluated):
        return Idle(digit)
    if isinstance(state, AwaitingOperand):
        return EnteringOperand(state.pending, state.operator, digit)
    return replace(state, display=_append_digit(state.display, digit))


def input_dot(state):
    if isinstance(state, Evaluated):
        return Idle("0.")
    if isinstance(state, AwaitingOperand):
        return EnteringOperand(state.pending, state.operator, "0.")
    if "." in state.display:
        return state
    return replace(state, display=state.display + ".")


def set_operator(state, op):
    """Commit the typed number and wait for the next one.

    A second number that was already typed is folded into the pending value
    first, so chains run strictly left to right: 2 + 3 × 4 is (2 + 3) × 4.
    Pressing another operator before typing just swaps the operator.
    """
    op = Operator(op)
    if isinstance(state, AwaitingOperand):
        return AwaitingOperand(state.pending, op)
    if isinstance(state, EnteringOperand):
        result = compute(state.pending, parse_operand(state.display), state.operator)
        return AwaitingOperand(result, op)
    return AwaitingOperand(parse_operand(state.display), op)


def equals(state):
    """Finish the pending calculation. Without a second number this does nothing."""
    if not isinstance(state, EnteringOperand):
        return state
    result = compute(state.pending, parse_operand(state.display), state.operator)
    return Evaluated(format_number(result))


def clear_all(state=None):
    return INITIAL_STATE


def equation(state):
    """Text for the screen: 'A op', 'A op B', or just the number being typed"""
    if isinstance(state, (AwaitingOperand, EnteringOperand)):
        head = f"{format_number_short(state.pending)} {state.operator.value}"
        return f"{head} {state.display}" if state.display else head
    return state.display


def press(state, button):
    """Route a button label (one of the 17 on screen) to its transition"""
    if button in DIGITS and len(button) == 1:
        return input_digit(state, button)
    if button == ".":
        return input_dot(state)
    if button == "C":
        return clear_all(state)
    if button == "=":
        return equals(state)
    try:
        op = Operator(button)
    except ValueError:
        raise ValueError(f"Unknown button: {button!r}") from None
    return set_operator(state, op)


# ── Serialization ─────────────────────────────────────────────────────────────

_KINDS = {
    "idle": Idle,
    "awaiting": AwaitingOperand,
    "entering": EnteringOperand,
    "evaluated": Evaluated,
}
_KIND_NAMES = {cls: name for name, cls in _KINDS.items()}


def state_to_dict(state):
    """JSON-safe form of a state. The pending number travels as repr text
    so NaN and infinity survive."""
    pending = getattr(state, "pending", None)
    operator = getattr(state, "operator", None)
    return {
        "kind": _KIND_NAMES[type(state)],
        "display": state.display,
        "pending": repr(pending) if pending is not None else None,
        "operator": operator.value if operator is not None else None,
    }


def state_from_dict(data):
    """Rebuild a state sent back by a client; malformed data raises ValueError"""
    if not isinstance(data, dict):
        raise ValueError("State must be an object")
    kind = data.get("kind")
    cls = _KINDS.get(kind) if isinstance(kind, str) else None
    if cls is None:
        raise ValueError(f"Unknown state kind: {kind!r}")

    if cls in (Idle, Evaluated, EnteringOperand):
        display = data.get("display")
        if not isinstance(display, str) or not display:
            raise ValueError("State needs a non-empty display")
        if display.count(".") > 1:
            raise ValueError(f"Display has more than one decimal point: {display!r}")
        if cls is not Evaluated and len(display.replace(".", "")) > config.MAX_DISPLAY_LENGTH:
            raise ValueError(f"Display too long: {display!r}")
        if cls is not Evaluated and not display.replace(".", "").isdigit():
            raise ValueError(f"Display is not a number: {display!r}")
        if cls is Idle:
            return Idle(display)
        if cls is Evaluated:
            return Evaluated(display)

    pending = data.get("pending")
    if not isinstance(pending, str):
        raise ValueError("State needs a pending number")
    try:
        pending = float(pending)
    except ValueError:
        raise ValueError(f"Pending is not a number: {pending!r}") from None
    operator = Operator(data.get("operator"))

    if cls is AwaitingOperand:
        return AwaitingOperand(pending, operator)
    return EnteringOperand(pending, operator, display)


# ── Engine object used by the screens ─────────────────────────────────────────

class Calculator:
    """Holds the state of one calculator screen"""

    def __init__(self, state=INITIAL_STATE):
        self.state = state

    def press(self, button):
        """Apply a button tap and return the new equation text"""
        self.state = press(self.state, button)
        return self.get_equation()

    def input_digit(self, digit):
        self.state = input_digit(self.state, digit)
        return self.get_equation()

    def input_dot(self):
        self.state = input_dot(self.state)
        return self.get_equation()

    def set_operator(self, op):
        self.state = set_operator(self.state, op)
        return self.get_equation()

    def equals(self):
        self.state = equals(self.state)
        return self.get_equation()

    def clear(self):
        """Clear everything (C)"""
        self.state = clear_all(self.state)
        return self.get_equation()

    def get_equation(self):
        return equation(self.state)

    def get_display(self):
        return self.state.display
