"""Compiled-in service catalog.

Services are configuration, not database rows: the order form offers them as
choices and the chat assistant lists them in its prompt.
"""

from dataclasses import asdict, dataclass
from decimal import Decimal
from typing import Optional, Tuple


@dataclass(frozen=True)
class Service:
    title: str
    description: str
    icon: str
    min_price: Decimal

    def as_dict(self) -> dict:
        data = asdict(self)
        data["min_price"] = float(self.min_price)
        return data


SERVICES: Tuple[Service, ...] = (
    Service(
        title="Logo & Brand Identity",
        description="Crafting unique logos and comprehensive brand guidelines to make your business stand out.",
        icon="logo-design",
        min_price=Decimal("99"),
    ),
    Service(
        title="Website Design",
        description="Designing responsive, user-friendly websites that look great on any device.",
        icon="web-design",
        min_price=Decimal("299"),
    ),
    Service(
        title="Typesetting",
        description="Professional typesetting for documents, books, and reports, ensuring a clean and readable layout.",
        icon="typesetting",
        min_price=Decimal("49"),
    ),
    Service(
        title="Video Editing",
        description="Professional video editing for promotional content, social media, and more.",
        icon="video-editing",
        min_price=Decimal("79"),
    ),
)


def service_titles() -> Tuple[str, ...]:
    return tuple(s.title for s in SERVICES)


def find_service(title: str) -> Optional[Service]:
    for service in SERVICES:
        if service.title == title:
            return service
    return None
