import os
import unittest
from datetime import timedelta
from uuid import uuid4

from fastapi.testclient import TestClient
from sqlalchemy import create_engine, delete
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Ensure settings can be initialized in test environments
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")
os.environ.setdefault("REDIS_URL", "redis://localhost:6379/0")
os.environ.setdefault("EMAIL_PROVIDER", "dummy")

from app.core.config import settings
from app.core.security import create_admin_token
from app.db.session import Base, get_db
from app.main import app
from app.services.rate_limit import InMemoryRateLimiter, reset_rate_limiter_for_tests


class ApiTestBase(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.engine = create_engine(
            "sqlite+pysqlite:///:memory:",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        cls.SessionLocal = sessionmaker(bind=cls.engine, autocommit=False, autoflush=False)
        Base.metadata.create_all(bind=cls.engine)

    @classmethod
    def tearDownClass(cls):
        Base.metadata.drop_all(bind=cls.engine)
        cls.engine.dispose()

    def setUp(self):
        with self.SessionLocal() as db:
            for table in reversed(Base.metadata.sorted_tables):
                db.execute(delete(table))
            db.commit()

        def override_get_db():
            db = self.SessionLocal()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        reset_rate_limiter_for_tests(InMemoryRateLimiter())
        self.client = TestClient(app)

    def tearDown(self):
        self.client.close()
        app.dependency_overrides.clear()
        reset_rate_limiter_for_tests(None)

    def add(self, row):
        with self.SessionLocal() as db:
            db.add(row)
            db.commit()
            db.refresh(row)
            db.expunge(row)
        return row

    @staticmethod
    def admin_headers() -> dict[str, str]:
        token = create_admin_token(
            user_id=str(uuid4()),
            username="admin",
            secret=settings.ADMIN_JWT_SECRET,
            expires_delta=timedelta(minutes=30),
        )
        return {"Authorization": f"Bearer {token}"}
