"""Paper backup (recovery) codes.

Each code is a random unpadded Base32 string, optionally broken into
dash-separated groups: 10 bytes with group_by=4 gives "AAAA-BBBB-CCCC-DDDD".
"""

from __future__ import annotations

from otpcore.secret import DEFAULT_SECRET_BYTES, generate_random_secret

GROUP_SIZES = (1, 4, 8)


def generate_single_backup_code(byte_length: int = DEFAULT_SECRET_BYTES, group_by: int = 1) -> str:
    if group_by not in GROUP_SIZES:
        raise ValueError(f"group_by must be one of {GROUP_SIZES}, got {group_by}")
    code = generate_random_secret(byte_length)
    if group_by == 1:
        return code
    return "-".join(code[i:i + group_by] for i in range(0, len(code), group_by))


def generate_backup_codes(
    count: int,
    byte_length: int = DEFAULT_SECRET_BYTES,
    group_by: int = 1,
) -> list[str]:
    """Generate ``count`` independent backup codes."""
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    return [generate_single_backup_code(byte_length, group_by) for _ in range(count)]
