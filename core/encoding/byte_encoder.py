"""
Byte Encoder
Deterministic fixed-width encoding of addresses and amounts.

Encoding Rules (Hard Contracts):
1. Address: optional "0x" prefix stripped, odd-length body gets a
   leading "0", hex-decoded, right-aligned in a 32-byte zero buffer
2. Addresses decoding to more than 32 bytes are rejected, never truncated
3. Amount: unsigned 64-bit, 8 bytes big-endian

Fixed widths keep every (address, amount) pair at 40 bytes, so no two
distinct pairs can concatenate to the same leaf preimage.
"""
from __future__ import annotations

from core.schemas.errors import EncodingError
from core.schemas.records import MAX_AMOUNT


ADDRESS_SIZE: int = 32
AMOUNT_SIZE: int = 8

_HEX_PREFIX = "0x"


def encode_address(address: str) -> bytes:
    """
    Encode a hex address string to exactly 32 bytes.

    Args:
        address: Hex string, "0x" prefix optional. May be empty.

    Returns:
        32 bytes, the decoded value left-padded with zero bytes

    Raises:
        EncodingError: If the body is not hexadecimal or decodes to
                       more than 32 bytes

    Example:
        >>> encode_address("0x123") == encode_address("0123")
        True
        >>> encode_address("0x") == bytes(32)
        True
    """
    if not isinstance(address, str):
        raise EncodingError(
            f"Address must be a string, got {type(address).__name__}",
        )

    body = address[len(_HEX_PREFIX):] if address.startswith(_HEX_PREFIX) else address

    if len(body) % 2 != 0:
        body = "0" + body

    # bytes.fromhex tolerates whitespace between bytes, an address may not
    if any(c not in "0123456789abcdefABCDEF" for c in body):
        raise EncodingError(f"Address is not valid hexadecimal: {address!r}", value=address)

    decoded = bytes.fromhex(body)

    if len(decoded) > ADDRESS_SIZE:
        raise EncodingError(
            f"Address decodes to {len(decoded)} bytes, maximum is {ADDRESS_SIZE}",
            value=address,
            details={"decoded_length": len(decoded)},
        )

    buffer = bytearray(ADDRESS_SIZE)
    buffer[ADDRESS_SIZE - len(decoded):] = decoded
    return bytes(buffer)


def encode_amount(amount: int) -> bytes:
    """
    Encode an unsigned 64-bit amount as 8 big-endian bytes.

    Raises:
        EncodingError: If amount is not an int or falls outside 0..2**64-1
    """
    # bool is an int subclass but never a valid amount
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise EncodingError(
            f"Amount must be an integer, got {type(amount).__name__}",
            value=repr(amount),
        )
    if amount < 0 or amount > MAX_AMOUNT:
        raise EncodingError(
            f"Amount {amount} outside unsigned 64-bit range",
            value=str(amount),
        )
    return amount.to_bytes(AMOUNT_SIZE, "big")


__all__ = [
    "ADDRESS_SIZE",
    "AMOUNT_SIZE",
    "encode_address",
    "encode_amount",
]
