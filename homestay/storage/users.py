from homestay.models.user import User
from homestay.schemas.user import UserAccount, UserPublic
from homestay.storage.base import Repository


class UserRepository(Repository):
    model = User
    read_schema = UserPublic
    entity = "User"
    unique_fields = ("email",)

    def get_account_by_email(self, email: str):
        """Return the stored account (with password hash) for a login check."""
        with self._guard("get User by email"):
            row = self.db.query(User).filter(User.email == email).first()
        if row is None:
            return None
        return UserAccount(
            id=row.id,
            email=row.email,
            full_name=row.full_name,
            hashed_password=row.hashed_password,
        )

    def email_exists(self, email: str) -> bool:
        with self._guard("check User email"):
            return self.db.query(User.id).filter(User.email == email).first() is not None

    def create_account(self, full_name: str, email: str, hashed_password: str):
        with self._guard("create User"):
            row = User(full_name=full_name, email=email, hashed_password=hashed_password)
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
        return self._to_read(row)
