"""
Calculator Engine for SweetLogic
Four-function integer calculator driven one button press at a time
"""
import config

# Operations
NONE = "none"
ADD = "add"
SUBTRACT = "subtract"
MULTIPLY = "multiply"
DIVIDE = "divide"

# Control tokens
CLEAR = "AC"
BACKSPACE = "⌫"
EQUALS = "="

DIGITS = "0123456789"

OPERATOR_TOKENS = {
    "+": ADD,
    "−": SUBTRACT,
    "×": MULTIPLY,
    "÷": DIVIDE,
    # ASCII aliases
    "-": SUBTRACT,
    "*": MULTIPLY,
    "x": MULTIPLY,
    "/": DIVIDE,
}

# Button face shown for each operation
OPERATOR_SYMBOLS = {
    ADD: "+",
    SUBTRACT: "−",
    MULTIPLY: "×",
    DIVIDE: "÷",
}

# Keypad layout, top to bottom
BUTTON_ROWS = [
    [CLEAR, BACKSPACE, "÷"],
    ["7", "8", "9", "×"],
    ["4", "5", "6", "−"],
    ["1", "2", "3", "+"],
    ["0", EQUALS],
]


def parse_int(text):
    """Parse display text as an integer; anything unparseable counts as zero"""
    try:
        return int(text)
    except (TypeError, ValueError):
        return 0


def divide_truncate(left, right):
    """Integer division rounding toward zero (-7 / 2 == -3)"""
    quotient = abs(left) // abs(right)
    return -quotient if (left < 0) != (right < 0) else quotient


def key_to_token(char, keysym=""):
    """Translate a keystroke into a calculator token, or None if it has no meaning"""
    if keysym == "BackSpace":
        return BACKSPACE
    if keysym in ("Escape", "Delete"):
        return CLEAR
    if keysym in ("Return", "KP_Enter"):
        return EQUALS
    if not char:
        return None
    if char in DIGITS or char == EQUALS:
        return char
    if char in ("\r", "\n"):
        return EQUALS
    if char in ("c", "C"):
        return CLEAR
    if char in OPERATOR_TOKENS:
        return OPERATOR_SYMBOLS[OPERATOR_TOKENS[char]]
    return None


class Calculator:
    def __init__(self):
        self.display = "0"
        self.pending_operand = 0
        self.pending_operation = NONE
        self.awaiting_new_entry = False

    def handle_input(self, token):
        """Apply a single button press and return the new display text"""
        token = str(token)
        if token in DIGITS and len(token) == 1:
            self.add_digit(token)
        elif token in OPERATOR_TOKENS:
            self.set_operation(OPERATOR_TOKENS[token])
        elif token == CLEAR:
            self.clear()
        elif token == BACKSPACE:
            self.backspace()
        elif token == EQUALS:
            self.calculate_result()
        return self.display

    def add_digit(self, digit):
        """Start a new number or extend the one being entered"""
        if self.awaiting_new_entry or self.display in ("0", config.ERROR_SENTINEL):
            self.display = digit
            self.awaiting_new_entry = False
        elif len(self.display.lstrip("-")) < config.MAX_DIGITS:
            self.display += digit
        return self.display

    def set_operation(self, operation):
        """Capture the display as the left operand; any earlier pending operation is dropped"""
        self.pending_operand = parse_int(self.display)
        self.pending_operation = operation
        self.awaiting_new_entry = True

    def backspace(self):
        """Remove the last character, falling back to "0" rather than an empty display"""
        remaining = self.display[:-1]
        if self.display == config.ERROR_SENTINEL or remaining in ("", "-"):
            self.display = "0"
        else:
            self.display = remaining
        return self.display

    def clear(self):
        """Reset to a fresh calculator"""
        self.display = "0"
        self.pending_operand = 0
        self.pending_operation = NONE
        self.awaiting_new_entry = False
        return self.display

    def calculate_result(self):
        """Apply the pending operation as pending_operand OP display"""
        current = parse_int(self.display)
        left = self.pending_operand

        result = None
        if self.pending_operation == ADD:
            result = left + current
        elif self.pending_operation == SUBTRACT:
            result = left - current
        elif self.pending_operation == MULTIPLY:
            result = left * current
        elif self.pending_operation == DIVIDE:
            if current == 0:
                self.display = config.ERROR_SENTINEL
            else:
                result = divide_truncate(left, current)

        if result is not None:
            # Results too long to show overflow to the error display
            if abs(result) >= 10 ** config.MAX_DIGITS:
                self.display = config.ERROR_SENTINEL
            else:
                self.display = str(result)

        self.awaiting_new_entry = True
        return self.display

    def is_error(self):
        return self.display == config.ERROR_SENTINEL

    def get_expression(self):
        """Pending operand and operator as shown above the display, e.g. "12 ×" """
        if self.pending_operation == NONE:
            return ""
        return f"{self.pending_operand} {OPERATOR_SYMBOLS[self.pending_operation]}"

    def get_state(self):
        return {
            'display': self.display,
            'pending_operand': self.pending_operand,
            'pending_operation': self.pending_operation,
            'awaiting_new_entry': self.awaiting_new_entry,
        }
