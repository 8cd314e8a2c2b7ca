"""Header parsers — turn raw proxy-chain header values into lists of IP addresses.

Each extractor returns the addresses in header order: the original client
first, the most recently added proxy last. Entries that are not a usable IP
address are skipped.

Note: these parsers do no trust validation. Use ``realip.real_ip`` for that.
"""

from ipaddress import IPv4Address, IPv6Address, ip_address

IPAddress = IPv4Address | IPv6Address


def extract_forwarded_header(header_value: str) -> list[IPAddress]:
    """Get the list of IP addresses from a ``Forwarded`` (RFC 7239) header.

    Only the ``for=`` parameter is used. Elements without one, elements that
    fail to parse, and ``unknown`` or obfuscated (``_hidden``) nodes are skipped.

    Example:
        >>> extract_forwarded_header("for=10.10.10.10, for=10.10.10.20;proto=https")
        [IPv4Address('10.10.10.10'), IPv4Address('10.10.10.20')]
    """
    result = []
    for element in split_comma_separated(header_value):
        params = _parse_forwarded_element(element)
        if params is None or "for" not in params:
            continue
        addr = _parse_node(params["for"])
        if addr is not None:
            result.append(addr)
    return result


def extract_x_forwarded_for_header(header_value: str) -> list[IPAddress]:
    """Get the list of IP addresses from an ``X-Forwarded-For`` header.

    Example:
        >>> extract_x_forwarded_for_header("10.10.10.10,10.10.10.20")
        [IPv4Address('10.10.10.10'), IPv4Address('10.10.10.20')]
    """
    result = []
    for entry in split_comma_separated(header_value):
        addr = _parse_bare_ip(entry.strip())
        if addr is not None:
            result.append(addr)
    return result


def extract_real_ip_header(header_value: str) -> list[IPAddress]:
    """Get the IP address from an ``X-Real-IP`` header, as a list of zero or one."""
    addr = _parse_bare_ip(header_value.strip())
    return [addr] if addr is not None else []


# ---------------------------------------------------------------------------
# Low-level helpers
# ---------------------------------------------------------------------------

def split_comma_separated(value: str, separator: str = ",") -> list[str]:
    """Split a header list on ``separator``, leaving separators inside quoted strings alone.

    Empty elements (``a,,b``) are dropped.
    """
    parts: list[str] = []
    current: list[str] = []
    in_quotes = False
    escaped = False

    for char in value:
        if escaped:
            escaped = False
        elif in_quotes and char == "\\":
            escaped = True
        elif char == '"':
            in_quotes = not in_quotes
        elif char == separator and not in_quotes:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)
    parts.append("".join(current))

    return [part for part in parts if part.strip()]


def unquote(value: str) -> str:
    """Strip an HTTP quoted-string, resolving backslash escapes.

    Values that don't start with a double quote are returned unchanged.
    Anything after the closing quote is dropped.
    """
    if not value.startswith('"'):
        return value

    chars: list[str] = []
    escaped = False
    for char in value[1:]:
        if escaped:
            chars.append(char)
            escaped = False
        elif char == "\\":
            escaped = True
        elif char == '"':
            break
        else:
            chars.append(char)
    return "".join(chars)


def _parse_forwarded_element(element: str) -> dict[str, str] | None:
    """Parse one ``key=value;key=value`` forwarded element.

    Returns None when any pair is malformed. Keys are lower-cased, values unquoted.
    """
    params: dict[str, str] = {}
    for pair in split_comma_separated(element, ";"):
        pair = pair.strip()
        if not pair:
            continue
        key, sep, raw_value = pair.partition("=")
        key = key.strip().lower()
        if not sep or not key:
            return None
        params.setdefault(key, unquote(raw_value.strip()))
    return params


def _parse_node(node: str) -> IPAddress | None:
    """Parse an RFC 7239 node identifier, dropping any port."""
    if node.startswith("["):
        host, sep, rest = node[1:].partition("]")
        if not sep or (rest and not rest.startswith(":")):
            return None
        return _to_ip(host)

    # An IPv4 node has at most one colon, separating the port
    if node.count(":") == 1:
        node = node.partition(":")[0]
    return _to_ip(node)


def _parse_bare_ip(value: str) -> IPAddress | None:
    value = unquote(value)
    if value.startswith("[") and value.endswith("]"):
        value = value[1:-1]
    return _to_ip(value)


def _to_ip(value: str) -> IPAddress | None:
    try:
        return ip_address(value)
    except ValueError:
        return None
