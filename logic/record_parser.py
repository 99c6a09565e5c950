"""
Line parsing for course catalog files.

Splits one raw line into trimmed fields. Knows nothing about courses.

Quoting rules:
- A double quote outside a quoted region opens one and is dropped
- Inside a quoted region commas are literal content
- Inside a quoted region a doubled quote ("") is one literal quote
- An unterminated quoted region just runs to the end of the line
"""

DELIMITER = ","
QUOTE = '"'


def parse_line(raw: str) -> list:
    """
    Split a raw line into fields, honoring double-quoted fields.

    Args:
        raw: One line of text, without its line terminator

    Returns:
        list: Trimmed field strings. Always at least one element;
              an empty line gives [''].

    Examples:
        >>> parse_line('a,"b,c",d')
        ['a', 'b,c', 'd']
        >>> parse_line('a,"b""c",d')
        ['a', 'b"c', 'd']
    """
    fields = []
    current = []
    in_quotes = False

    i = 0
    length = len(raw)
    while i < length:
        ch = raw[i]
        if in_quotes:
            if ch == QUOTE:
                if i + 1 < length and raw[i + 1] == QUOTE:
                    current.append(QUOTE)
                    i += 1
                else:
                    in_quotes = False
            else:
                current.append(ch)
        elif ch == QUOTE:
            in_quotes = True
        elif ch == DELIMITER:
            fields.append("".join(current))
            current = []
        else:
            current.append(ch)
        i += 1

    # The last field is emitted even when the line has no delimiter
    fields.append("".join(current))

    return [f.strip() for f in fields]
