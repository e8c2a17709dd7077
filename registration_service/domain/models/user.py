from typing import Optional


class User:
    """
    Registered user entity - no external dependencies.
    
    Identity is the ``id`` assigned by the repository on first save; two
    users are the same entity iff their ids match, whatever their other
    fields hold. The email only changes through ``change_email``.
    """

    def __init__(
        self,
        id: Optional[str],
        name: str,
        email: str,
        password_hash: str,
    ) -> None:
        self.id = id
        self.name = name
        self._email = email
        self.password_hash = password_hash

    @property
    def email(self) -> str:
        return self._email

    def change_email(self, new_email: str) -> None:
        """Replace the stored email.

        Not re-validated here; callers validate before calling.
        """
        self._email = new_email

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        # Unsaved users have no identity yet
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id) if self.id is not None else id(self)

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, name={self.name!r}, email={self._email!r})"
