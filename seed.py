import logging
from app.core.database import SessionLocal, create_database_tables
from app.models.student import Student
from app.repositories.student import StudentRepository

# Setup logging to see output
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SEED_STUDENTS = [
    {"name": "Nguyen Van A", "email": "vana@example.com", "age": 20, "grade": "12A1"},
    {"name": "Tran Thi B", "email": "thib@example.com", "age": 21, "grade": "12A2"},
    {"name": "Le Van C", "email": "vanc@example.com", "age": 22, "grade": "12A1"},
]


def seed_data(db=None) -> int:
    """
    Seed initial students into the database.

    Does nothing when the table already has rows. Returns the number of
    students inserted.
    """
    own_session = db is None
    if own_session:
        db = SessionLocal()
    try:
        repo = StudentRepository(db)
        # Skip if data already exists to avoid duplicates
        if repo.find_all():
            logger.info("Database already contains data. Skipping seed.")
            return 0

        logger.info("Seeding data...")
        for fields in SEED_STUDENTS:
            repo.save(Student(**fields))

        logger.info(f"Seeded {len(SEED_STUDENTS)} students")
        return len(SEED_STUDENTS)
    finally:
        if own_session:
            db.close()  # Always close the connection


if __name__ == "__main__":
    create_database_tables()
    seed_data()
