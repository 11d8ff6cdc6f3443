"""Identity for entities, aggregates and history tokens."""

from datetime import UTC, datetime
from uuid import uuid4

from attrs import define, field

from rich_domain.config import settings


def _now() -> datetime:
    return datetime.now(UTC)


@define(eq=False, slots=True)
class ID:
    """Unique identifier backed by a string value.

    Created without a value, an ID holds a fresh UUID4 and is flagged as
    new (not yet persisted anywhere). ``to_short()`` turns the value into
    a fixed-length uppercase token used to address history snapshots.
    """

    _value: str
    _is_new: bool = False
    _created_at: datetime = field(factory=_now)

    @classmethod
    def create(cls, value: str | int | None = None) -> "ID":
        """Create an ID from a value, or a new one from a fresh UUID."""
        if value is None:
            return cls(str(uuid4()), is_new=True)
        return cls(value if isinstance(value, str) else str(value))

    @classmethod
    def short(cls, value: str | int | None = None) -> "ID":
        """Create a short ID, minted from a fresh UUID when no value is given."""
        return cls.create(value).to_short()

    def to_short(self) -> "ID":
        """Shorten the value in place to ``settings.domain.short_id_length`` chars.

        Values shorter than the target length are prefixed with a fresh
        UUID before shortening, so their short form is random.
        """
        size = settings.domain.short_id_length
        long_value = self._value
        if len(long_value) < size:
            long_value = str(uuid4()) + long_value
        long_value = long_value.upper().replace("-", "")
        self._value = long_value[-size:]
        self._created_at = _now()
        return self

    def value(self) -> str:
        return self._value

    def is_new(self) -> bool:
        """True when the ID was generated rather than given a value."""
        return self._is_new

    def created_at(self) -> datetime:
        return self._created_at

    def is_short(self) -> bool:
        return len(self._value) == settings.domain.short_id_length

    def equal(self, other: "ID | None") -> bool:
        """Compare values only."""
        if not isinstance(other, ID):
            return False
        return self._value == other.value()

    def deep_equal(self, other: "ID | None") -> bool:
        """Compare type, value and newness."""
        return (
            type(self) is type(other)
            and self._value == other.value()
            and self._is_new == other.is_new()
        )

    def clone(self) -> "ID":
        return ID(self._value)

    def clone_as_new(self) -> "ID":
        return ID(self._value, is_new=True)

    def __str__(self) -> str:
        return self._value
