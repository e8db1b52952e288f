"""SQLAlchemy repositories for users and permission grants."""

from sqlalchemy import text

from src.application.ports.access_repository import (
    PermissionsRepositoryPort,
    UsersRepositoryPort,
)
from src.application.ports.database import DatabaseEnginePort
from src.domain.models.access import PermissionGrant, UserRecord


SELECT_GRANTS_SQL = text(
    """
    SELECT resource, action
    FROM role_permissions
    WHERE role = :role
    UNION
    SELECT resource, action
    FROM user_permissions
    WHERE user_id = :user_id AND granted = TRUE
    """
)

SELECT_USERS_SQL = text(
    """
    SELECT id, email, role, first_name, last_name
    FROM users
    ORDER BY id
    """
)


class SqlAlchemyPermissionsRepository(PermissionsRepositoryPort):
    """Permission grants read from role and user permission tables."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        self._db_port = db_port

    def fetch_grants(self, user_id: str, role: str) -> list[PermissionGrant]:
        """Return the grants of a user's role and the user's own grants.

        Args:
            user_id: Identifier of the session user.
            role: Role of the session user.

        Returns:
            list[PermissionGrant]: Grants sorted by resource then action.
        """
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_GRANTS_SQL,
                {"user_id": user_id, "role": role},
            ).all()
        grants = [
            PermissionGrant(resource=row.resource, action=row.action)
            for row in rows
        ]
        return sorted(grants, key=lambda grant: (grant.resource, grant.action))


class SqlAlchemyUsersRepository(UsersRepositoryPort):
    """Users read from the ``users`` table."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        self._db_port = db_port

    def fetch_users(self) -> list[UserRecord]:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_USERS_SQL).all()
        return [
            UserRecord(
                id=row.id,
                email=row.email,
                role=row.role,
                first_name=row.first_name,
                last_name=row.last_name,
            )
            for row in rows
        ]


__all__ = [
    "SqlAlchemyPermissionsRepository",
    "SqlAlchemyUsersRepository",
    "SELECT_GRANTS_SQL",
    "SELECT_USERS_SQL",
]
