"""
TASKTRACK Core API - Database Module

Motor client lifecycle for the task store. Timestamps come back
as aware UTC datetimes (tz_aware).
"""

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from tasktrack_api.config import settings


class Database:
    """Holds the Motor client opened by the app lifespan."""

    client: AsyncIOMotorClient | None = None
    db: AsyncIOMotorDatabase | None = None

    async def connect(self) -> None:
        """Open the client and select the tasks database."""
        self.client = AsyncIOMotorClient(settings.MONGODB_URI, tz_aware=True)
        self.db = self.client[settings.MONGODB_DATABASE]

    async def disconnect(self) -> None:
        """Close the client on shutdown."""
        if self.client:
            self.client.close()
            self.client = None
            self.db = None

    def get_database(self) -> AsyncIOMotorDatabase:
        """Tasks database; only valid inside the app lifespan."""
        if self.db is None:
            raise RuntimeError("Database not connected. Call connect() first.")
        return self.db


# Shared by the lifespan and the repository dependency
database = Database()


async def get_database() -> AsyncIOMotorDatabase:
    """FastAPI dependency for the task repository."""
    return database.get_database()
