"""Recognition of date and time number format codes."""

_DATE_TIME_LETTERS = frozenset("DdYyHhSsMm")
_ELAPSED_UNITS = frozenset("hms")


def is_date_time(format_code: str) -> bool:
    """Return True if the number format code probably formats a date or time.

    Only the first section of the code is considered, since dates and
    times are always positive numbers.
    """
    n = len(format_code)
    i = 0
    while i < n:
        c = format_code[i]
        if c == "[":
            if i < n - 2 and format_code[i + 2] == "]":
                # [h], [m] and [s] are elapsed-time formats
                if format_code[i + 1].lower() in _ELAPSED_UNITS:
                    return True
                i += 2
            else:
                # a condition or a colour: skip to the closing bracket
                close = format_code.find("]", i)
                i = n if close == -1 else close
        elif c == '"':
            # quoted literal text
            close = format_code.find('"', i + 1)
            i = max(i, n - 1) if close == -1 else close
        elif c == "\\":
            # escaped character
            if i < n - 1:
                i += 1
        elif c == ";":
            return False
        elif c in _DATE_TIME_LETTERS:
            return True
        i += 1
    return False