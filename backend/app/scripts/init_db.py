import asyncio

from app.core.config import configs
from app.core.database import Database
# Import all models to register them with SQLAlchemy
from app.models.orm import Question, MainQuestion  # noqa: F401


async def init():
    db = Database(configs.DATABASE_URL)
    try:
        await db.create_database()
    finally:
        await db.dispose()


if __name__ == "__main__":
    asyncio.run(init())
