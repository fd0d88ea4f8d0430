"""Transaction record model.

A TxSecureRecord is the unit produced by encrypt and consumed by decrypt. All
binary fields are stored as hex strings; field names on the wire are the
camelCase aliases below.
"""
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Literal, Mapping

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from txsecure.domain.crypto.aead import ALGORITHM_AES_256_GCM
from txsecure.domain.crypto.errors import ValidationError

MK_VERSION_V1 = 1

_STORED_REQUIRED = ("id", "createdAt")


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"


class TxSecureRecord(BaseModel):
    """Encrypted transaction record (immutable once produced)."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    party_id: str = Field(..., alias="partyId")
    created_at: str = Field(default_factory=_utc_timestamp, alias="createdAt")
    payload_nonce: str = Field(..., alias="payloadNonce")  # 24 hex char (12 bytes)
    payload_ct: str = Field(..., alias="payloadCt")
    payload_tag: str = Field(..., alias="payloadTag")      # 32 hex char (16 bytes)
    dek_wrap_nonce: str = Field(..., alias="dekWrapNonce")
    dek_wrapped: str = Field(..., alias="dekWrapped")      # 64 hex char (32 bytes)
    dek_wrap_tag: str = Field(..., alias="dekWrapTag")
    alg: Literal["AES-256-GCM"] = ALGORITHM_AES_256_GCM
    mk_version: Literal[1] = MK_VERSION_V1

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    def to_wire(self) -> Dict[str, Any]:
        """Flat JSON mapping with the stable wire field names."""
        return self.model_dump(by_alias=True, mode="json")

    @classmethod
    def from_wire(cls, data: Mapping[str, Any]) -> "TxSecureRecord":
        """Build a record from its wire mapping.

        Raises:
            ValidationError: If a field is missing or has the wrong type/literal.
        """
        if not isinstance(data, Mapping):
            raise ValidationError("validation failed: record is required")
        # Stored records always carry these; defaults only apply to new records
        missing = [name for name in _STORED_REQUIRED if name not in data]
        if missing:
            raise ValidationError(f"validation failed: invalid record fields: {', '.join(missing)}")
        try:
            return cls.model_validate(dict(data))
        except PydanticValidationError as e:
            fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
            raise ValidationError(f"validation failed: invalid record fields: {fields}") from e
