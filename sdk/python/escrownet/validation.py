"""Input validators. Each raises ValidationError and never touches the network."""

from __future__ import annotations

import re

from escrownet.errors import ValidationError
from escrownet.types import EscrowParams

MIN_USERNAME_LENGTH = 3
MAX_USERNAME_LENGTH = 32
MIN_DESCRIPTION_LENGTH = 1
MAX_DESCRIPTION_LENGTH = 200

UINT256_MAX = 2**256 - 1

_USERNAME_RE = re.compile(r"^[a-zA-Z0-9_-]+$")


def text_length(text: str) -> int:
    """Length in UTF-16 code units; characters outside the BMP count twice."""
    return len(text.encode("utf-16-le")) // 2


def validate_username(username: str) -> None:
    if not username or not isinstance(username, str):
        raise ValidationError("Username must be a non-empty string")
    if len(username) < MIN_USERNAME_LENGTH:
        raise ValidationError(
            f"Username must be at least {MIN_USERNAME_LENGTH} characters long"
        )
    if len(username) > MAX_USERNAME_LENGTH:
        raise ValidationError(
            f"Username must not exceed {MAX_USERNAME_LENGTH} characters"
        )
    # fullmatch: "$" alone would accept a trailing newline
    if not _USERNAME_RE.fullmatch(username):
        raise ValidationError(
            "Username can only contain letters, numbers, underscores, and hyphens"
        )


def validate_escrow_params(params: EscrowParams) -> None:
    recipient = getattr(params, "recipient", None)
    amount = getattr(params, "amount", None)
    description = getattr(params, "description", None)

    if not recipient or not isinstance(recipient, str):
        raise ValidationError("Recipient address is required")
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise ValidationError("Amount must be an integer")
    if amount <= 0:
        raise ValidationError("Amount must be greater than 0")
    if amount > UINT256_MAX:
        raise ValidationError("Amount must fit in a uint256")
    if description is None or not isinstance(description, str):
        raise ValidationError("Description is required")
    if text_length(description) < MIN_DESCRIPTION_LENGTH:
        raise ValidationError("Description cannot be empty")
    if text_length(description) > MAX_DESCRIPTION_LENGTH:
        raise ValidationError(
            f"Description must not exceed {MAX_DESCRIPTION_LENGTH} characters"
        )


def validate_escrow_id(escrow_id: str) -> None:
    if not escrow_id or not isinstance(escrow_id, str):
        raise ValidationError("Valid escrow ID is required")
