import asyncio
import os
import sys

# Add backend directory to sys.path
sys.path.append(os.getcwd())

from sqlalchemy import func, select

from app.db.session import async_session_maker, engine
from app.models import LoggedSet


async def check_data():
    async with async_session_maker() as session:
        try:
            total = (await session.execute(select(func.count(LoggedSet.id)))).scalar()
            print(f"Table 'logged_sets' row count: {total}")
            per_exercise = await session.execute(
                select(LoggedSet.exercise_id, func.count(LoggedSet.id))
                .group_by(LoggedSet.exercise_id)
                .order_by(func.count(LoggedSet.id).desc())
            )
            for exercise_id, count in per_exercise.all():
                print(f"  {exercise_id}: {count}")
        except Exception as e:
            print(f"Error checking DB: {e}")
    await engine.dispose()

if __name__ == "__main__":
    asyncio.run(check_data())
