MAX_HOSTNAME_LENGTH = 254
""" In bytes, as the names are stored in the files and on the wire. """

_ALLOWED_ASCII = frozenset(
    'abcdefghijklmnopqrstuvwxyz'
    'ABCDEFGHIJKLMNOPQRSTUVWXYZ'
    '0123456789'
    '.-'
)


def is_valid_hostname(name: str) -> bool:
    """
    Check if the name is acceptable as a canonical hostname.

    The rules are the same as in musl's ``getaddrinfo()``: a limited length,
    ASCII letters, digits, dots & dashes. All non-ASCII characters are accepted
    as is, including the undecodable bytes (escaped as surrogates when decoded),
    so no UTF-8 or IDNA validation is done here.
    """
    if _byte_length(name) > MAX_HOSTNAME_LENGTH:
        return False
    return all(c in _ALLOWED_ASCII or ord(c) >= 0x80 for c in name)


def remove_trailing_dot(hostname: str) -> str:
    # Only one dot, as the system resolvers put it: "host.example.com." -> "host.example.com".
    return hostname[:-1] if hostname.endswith('.') else hostname


def _byte_length(name: str) -> int:
    # The undecodable bytes (U+DC80..U+DCFF) were one byte each in the file; lone surrogates never fail.
    return sum(
        1 if 0xDC80 <= ord(c) <= 0xDCFF else len(c.encode('utf-8', errors='surrogatepass'))
        for c in name
    )
