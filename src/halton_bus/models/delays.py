from pydantic import BaseModel, ConfigDict


class DelayRecord(BaseModel):
    """A single delay announcement taken from one feed item.

    Built from the item's raw text each time the feed is read; never stored
    apart from the cached feed document.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    lines: tuple[str, ...] = ()

    @classmethod
    def from_entry_text(cls, raw: str) -> "DelayRecord":
        """Build a record from the concatenated text of a feed item."""
        lines = tuple(" ".join(line.split()) for line in raw.splitlines() if line.strip())
        return cls(text=" ".join(lines), lines=lines)

    @property
    def summary(self) -> str:
        """First non-empty line of the announcement (usually the item title)."""
        return self.lines[0] if self.lines else ""
