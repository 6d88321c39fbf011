#!/usr/bin/env python3
"""
Reset the database and load demo data.

Creates one employer, one seeker, one admin (the only way to get an ADMIN
account), two jobs and an application from the seeker to each job.

    python backend/seed.py
"""

import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent))

from app.database import SessionLocal, init_db
from app.models import Application, Job, Role, User
from app.utils.security import hash_password


def _user(*, name: str, email: str, password: str, role: Role, skills: list[str] | None = None, **extra) -> User:
    user = User(name=name, email=email, password=hash_password(password), role=role.value, **extra)
    user.skill_list = skills or []
    return user


def seed() -> None:
    init_db()
    db = SessionLocal()
    try:
        db.query(Application).delete()
        db.query(Job).delete()
        db.query(User).delete()

        employer = _user(
            name="Acme Corp",
            email="employer@acme.com",
            password="employer123",
            role=Role.EMPLOYER,
            preferred_location="Remote",
        )
        seeker = _user(
            name="Jane Developer",
            email="jane@example.com",
            password="seeker123",
            role=Role.SEEKER,
            skills=["React", "TypeScript", "Node.js"],
            experience="5 years building web applications",
            preferred_role="Frontend Engineer",
            preferred_location="Remote",
        )
        admin = _user(name="Admin User", email="admin@example.com", password="admin123", role=Role.ADMIN)
        db.add_all([employer, seeker, admin])
        db.flush()

        frontend = Job(
            employer_id=employer.id,
            title="Senior Frontend Engineer",
            description="Lead the development of our customer-facing web applications using React and TypeScript.",
            location="Remote",
            salary="$130k - $160k",
        )
        frontend.skill_list = ["React", "TypeScript", "UX"]
        fullstack = Job(
            employer_id=employer.id,
            title="Fullstack Node.js Engineer",
            description="Build API integrations and internal tools using Node.js, Express, and PostgreSQL.",
            location="New York, NY",
            salary="$120k - $150k",
        )
        fullstack.skill_list = ["Node.js", "Express", "SQL"]
        db.add_all([frontend, fullstack])
        db.flush()

        db.add_all([
            Application(
                job_id=frontend.id,
                seeker_id=seeker.id,
                message="I have 5 years of experience shipping production React apps.",
            ),
            Application(
                job_id=fullstack.id,
                seeker_id=seeker.id,
                message="Experienced with Node.js and looking for new challenges.",
            ),
        ])
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()

    print("✓ Seed data created successfully.")


if __name__ == "__main__":
    seed()
