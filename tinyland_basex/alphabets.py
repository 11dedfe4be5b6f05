"""Well-known alphabets, addressable by name from the CLI and library."""

ALPHABETS = {
    "base2": "01",
    "base8": "01234567",
    "base11": "0123456789a",
    "base16": "0123456789abcdef",
    # Crockford
    "base32": "0123456789ABCDEFGHJKMNPQRSTVWXYZ",
    "base32z": "ybndrfg8ejkmcpqxot1uwisza345h769",
    "base36": "0123456789abcdefghijklmnopqrstuvwxyz",
    # Bitcoin
    "base58": "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz",
    "base62": "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "base64": "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/",
    "base67": "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_.!~",
}


def get_alphabet(name: str) -> str:
    """Return the alphabet registered under ``name``.

    Raises:
        KeyError: If no alphabet has that name.
    """
    try:
        return ALPHABETS[name]
    except KeyError:
        known = ", ".join(ALPHABETS)
        raise KeyError(f"Unknown alphabet {name!r} (known: {known})") from None
