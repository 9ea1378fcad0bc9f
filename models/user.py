from dataclasses import dataclass, field

@dataclass(frozen=True)
class User:
    """A chat participant. Two users are the same user when their ids match."""
    id: int
    first_name: str = field(compare=False)

    def __str__(self) -> str:
        return self.first_name
