"""Identity store models: users, roles and memberships."""
from sqlalchemy import Column, String, Integer, Boolean, DateTime, ForeignKey, Table
from sqlalchemy.orm import relationship
import uuid
from uxscore.database import Base
from uxscore.utils.serialization import utcnow


user_roles = Table(
    "user_roles",
    Base.metadata,
    Column("user_id", String(36), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("role_id", String(36), ForeignKey("roles.id", ondelete="CASCADE"), primary_key=True),
)


def _new_id() -> str:
    return str(uuid.uuid4())


class Role(Base):
    """Named role such as Admin or Evaluator."""
    __tablename__ = "roles"

    id = Column(String(36), primary_key=True, default=_new_id)
    name = Column(String(256), unique=True, nullable=False, index=True)


class User(Base):
    """Account that can sign in to the service."""
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=_new_id)
    username = Column(String(256), unique=True, nullable=False, index=True)
    email = Column(String(256), nullable=True, index=True)
    password_hash = Column(String, nullable=False)
    email_confirmed = Column(Boolean, nullable=False, default=False)
    lockout_enabled = Column(Boolean, nullable=False, default=True)
    lockout_end = Column(DateTime, nullable=True)
    access_failed_count = Column(Integer, nullable=False, default=0)
    security_stamp = Column(String(64), nullable=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    # Relationships
    roles = relationship("Role", secondary=user_roles, lazy="selectin", order_by="Role.name")

    @property
    def is_locked_out(self) -> bool:
        return self.lockout_end is not None and self.lockout_end > utcnow()

    @property
    def role_names(self) -> list[str]:
        return [role.name for role in self.roles]
