"""Order drafts extracted from assistant replies.

The assistant is asked to put collected order details in a fenced ```json
block. Replies are untrusted: anything that is not a well-formed JSON object
with at least one usable field yields no draft, and a draft only ever
pre-fills the order form; it is never submitted on its own.
"""

import json
import re
from dataclasses import asdict, dataclass
from typing import Optional

from rest_framework import serializers

from common.catalog import service_titles

JSON_BLOCK = re.compile(r"```json\s*\n(.*?)\n?\s*```", re.DOTALL)


@dataclass(frozen=True)
class OrderDraft:
    customer_name: Optional[str] = None
    contact_number: Optional[str] = None
    email: Optional[str] = None
    service: Optional[str] = None
    details: Optional[str] = None

    def as_dict(self) -> dict:
        return asdict(self)


class _DraftPayloadSerializer(serializers.Serializer):
    customerName = serializers.CharField(source="customer_name", required=False, allow_blank=True, max_length=200)
    contactNumber = serializers.CharField(source="contact_number", required=False, allow_blank=True, max_length=50)
    email = serializers.CharField(required=False, allow_blank=True, max_length=254)
    service = serializers.CharField(required=False, allow_blank=True, max_length=200)
    details = serializers.CharField(required=False, allow_blank=True)


def find_json_block(text: str) -> Optional[str]:
    match = JSON_BLOCK.search(text or "")
    return match.group(1) if match else None


def extract_order_draft(text: str) -> Optional[OrderDraft]:
    block = find_json_block(text)
    if block is None:
        return None
    try:
        payload = json.loads(block)
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None

    serializer = _DraftPayloadSerializer(data=payload)
    if not serializer.is_valid():
        return None
    values = {k: (v or None) for k, v in serializer.validated_data.items()}
    if values.get("service") not in service_titles():
        values["service"] = None
    if not any(values.values()):
        return None
    return OrderDraft(**values)
