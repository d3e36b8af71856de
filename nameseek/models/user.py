from dataclasses import dataclass


@dataclass(frozen=True)
class UserName:
    """The name parts of a user profile, as handed over by the web layer."""

    first_name: str
    last_name: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
