import json
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class UrlRecord:
    """Represent a persisted short URL record.

    Attributes:
        original_url (str):
            The original long URL supplied by the caller.
        expiration_time (int):
            Expiration in seconds, stored verbatim (never enforced).

    Example:
        >>> record = UrlRecord(original_url='https://example.com', expiration_time=3600)
        >>> record.to_json()
        '{"originalUrl":"https://example.com","expirationTime":3600}'
        >>> UrlRecord.from_json(record.to_json()) == record
        True
    """

    original_url: str
    expiration_time: int

    def to_dict(self) -> dict[str, Any]:
        return {
            'originalUrl': self.original_url,
            'expirationTime': self.expiration_time,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(',', ':'))

    @classmethod
    def from_json(cls, document: str | bytes) -> 'UrlRecord':
        payload = json.loads(document)
        return cls(original_url=payload['originalUrl'], expiration_time=payload['expirationTime'])
